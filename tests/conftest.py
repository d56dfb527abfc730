"""Shared fixtures: a Gemini adapter backed by httpx.MockTransport."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from tests.helpers import RecordingHandler
from travel_planner.api.main import app
from travel_planner.llm.gemini import GeminiAdapter, get_gemini_adapter


@pytest.fixture
def make_adapter() -> Callable[[Any], tuple[GeminiAdapter, RecordingHandler]]:
    """Build an adapter whose upstream replies with the given response."""

    def _make(response: httpx.Response | Callable[[httpx.Request], httpx.Response]):
        handler = RecordingHandler(response)
        adapter = GeminiAdapter(
            base_url="https://gemini.test/v1beta",
            model="gemini-2.5-flash",
            transport=httpx.MockTransport(handler),
        )
        return adapter, handler

    return _make


@pytest.fixture
def api_client(make_adapter):
    """TestClient whose Gemini dependency is swapped for a mocked adapter."""

    def _client(response):
        adapter, handler = make_adapter(response)
        app.dependency_overrides[get_gemini_adapter] = lambda: adapter
        return TestClient(app), handler

    yield _client
    app.dependency_overrides.clear()
