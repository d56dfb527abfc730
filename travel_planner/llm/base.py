"""Abstract base class for LLM adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from travel_planner.schemas import LLMResponse


class LLMAdapter(ABC):
    """Abstract base class for text-generation provider adapters.

    Adapters hold no per-request state: the caller's API key travels with
    each call, so one adapter instance can serve concurrent requests.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name (e.g., 'gemini')."""
        ...

    @abstractmethod
    async def generate_content(
        self,
        prompt: str,
        api_key: str,
        model: str | None = None,
    ) -> LLMResponse:
        """Send a single-turn generation request.

        Args:
            prompt: The full instruction text, sent as the only content part
            api_key: Caller-supplied provider key
            model: Model name (uses default if None)

        Returns:
            LLMResponse with the generated text, or finish_reason "error"
            and the provider's status when the call was rejected
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying HTTP client."""
        ...

    def _build_request(self, prompt: str) -> dict[str, Any]:
        """Build the API request payload.

        This is a helper method that subclasses can use or override.
        """
        return {
            "contents": [
                {"role": "user", "parts": [{"text": prompt}]},
            ],
        }
