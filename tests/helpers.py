"""Helpers for building Gemini replies in tests."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx


SAMPLE_PLAN: dict[str, Any] = {
    "city_card_data": {
        "title": "京都 - 3日深度游",
        "travel_route": [
            {"day": 1, "route": "清水寺 -> 二年坂 -> 祇园"},
            {"day": 2, "route": "伏见稻荷大社 -> 东福寺"},
            {"day": 3, "route": "金阁寺 -> 岚山竹林"},
        ],
        "city_data": "京都是日本千年古都，保存了大量寺社与传统街区。",
        "local_delicacies": ["汤豆腐", "抹茶甜点", "京渍物", "鲱鱼荞麦面"],
    }
}


def gemini_body(text: str | None) -> dict[str, Any]:
    """A generateContent success body carrying ``text``."""
    part = {} if text is None else {"text": text}
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [part]},
                "finishReason": "STOP",
            }
        ],
        "modelVersion": "gemini-2.5-flash",
    }


def fenced(obj: Any, tag: str = "json") -> str:
    return f"```{tag}\n{json.dumps(obj, ensure_ascii=False, indent=2)}\n```"


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response | Callable[[httpx.Request], httpx.Response]):
        self._response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if callable(self._response):
            return self._response(request)
        return self._response

    @property
    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)

