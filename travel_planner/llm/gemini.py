"""Gemini LLM adapter.

Google's Generative Language API exposes generateContent at
https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent
and authenticates with a ``key`` query parameter.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from travel_planner.config import get_settings
from travel_planner.schemas import LLMResponse
from travel_planner.llm.base import LLMAdapter


logger = logging.getLogger(__name__)


class GeminiAdapter(LLMAdapter):
    """Gemini generateContent adapter."""

    def __init__(
        self,
        base_url: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.base_url = base_url or settings.gemini_base_url
        self.default_model = model or settings.gemini_model
        self.timeout = timeout or settings.gemini_timeout_seconds

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
            transport=transport,
        )

    @property
    def provider_name(self) -> str:
        return "gemini"

    async def generate_content(
        self,
        prompt: str,
        api_key: str,
        model: str | None = None,
    ) -> LLMResponse:
        """Send a generateContent request to Gemini.

        Transport failures (DNS, connect, timeout) are not caught here and
        propagate to the caller.
        """
        model = model or self.default_model
        payload = self._build_request(prompt)

        response = await self._client.post(
            f"/models/{model}:generateContent",
            params={"key": api_key},
            json=payload,
        )

        if response.is_error:
            error_body = _json_or_none(response)
            return LLMResponse(
                content=None,
                model=model,
                status_code=response.status_code,
                status_text=response.reason_phrase,
                error_message=_upstream_error_message(error_body),
                raw_response=error_body,
            )

        data = response.json()
        candidate = _first_candidate(data)

        return LLMResponse(
            content=_candidate_text(candidate),
            model=data.get("modelVersion", model),
            status_code=response.status_code,
            status_text=response.reason_phrase,
            finish_reason=candidate.get("finishReason") if candidate else None,
            raw_response=data,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()


# =============================================================================
# Response helpers
# =============================================================================

def _json_or_none(response: httpx.Response) -> dict[str, Any] | None:
    try:
        data = response.json()
    except ValueError:
        logger.warning(f"Gemini returned a non-JSON body with status {response.status_code}")
        return None
    return data if isinstance(data, dict) else None


def _upstream_error_message(body: dict[str, Any] | None) -> str | None:
    """Pull ``error.message`` out of a Gemini error body, if present."""
    if not body:
        return None
    error = body.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return None


def _first_candidate(data: Any) -> dict[str, Any] | None:
    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates") or []
    if candidates and isinstance(candidates[0], dict):
        return candidates[0]
    return None


def _candidate_text(candidate: dict[str, Any] | None) -> str | None:
    """Text of the candidate's first content part."""
    if not candidate:
        return None
    parts = (candidate.get("content") or {}).get("parts") or []
    if not parts or not isinstance(parts[0], dict):
        return None
    return parts[0].get("text")


# Singleton instance
_adapter: GeminiAdapter | None = None


def get_gemini_adapter() -> GeminiAdapter:
    """Get the global Gemini adapter instance."""
    global _adapter
    if _adapter is None:
        _adapter = GeminiAdapter()
    return _adapter


async def close_gemini_adapter() -> None:
    """Close the global adapter if one was created."""
    global _adapter
    if _adapter is not None:
        await _adapter.close()
        _adapter = None
