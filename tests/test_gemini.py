"""Tests for the Gemini adapter."""

import httpx
import pytest

from tests.helpers import gemini_body
from travel_planner.schemas import LLMResponse


@pytest.mark.asyncio
async def test_request_shape(make_adapter):
    adapter, handler = make_adapter(httpx.Response(200, json=gemini_body("{}")))

    await adapter.generate_content("你好", api_key="secret key/+")
    await adapter.close()

    request = handler.requests[-1]
    assert request.method == "POST"
    assert request.url.path == "/v1beta/models/gemini-2.5-flash:generateContent"
    assert request.url.params["key"] == "secret key/+"
    assert handler.last_json == {"contents": [{"role": "user", "parts": [{"text": "你好"}]}]}


@pytest.mark.asyncio
async def test_success_returns_first_part_text(make_adapter):
    adapter, _ = make_adapter(httpx.Response(200, json=gemini_body('{"a": 1}')))

    response = await adapter.generate_content("prompt", api_key="k")
    await adapter.close()

    assert response.ok
    assert response.content == '{"a": 1}'
    assert response.finish_reason == "STOP"
    assert response.model == "gemini-2.5-flash"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"finishReason": "SAFETY"}]},
        gemini_body(None),
    ],
)
async def test_success_without_text(make_adapter, body):
    adapter, _ = make_adapter(httpx.Response(200, json=body))

    response = await adapter.generate_content("prompt", api_key="k")
    await adapter.close()

    assert response.ok
    assert response.content is None


@pytest.mark.asyncio
async def test_error_with_upstream_message(make_adapter):
    error = {"error": {"code": 400, "message": "API key not valid.", "status": "INVALID_ARGUMENT"}}
    adapter, _ = make_adapter(httpx.Response(400, json=error))

    response = await adapter.generate_content("prompt", api_key="bad")
    await adapter.close()

    assert not response.ok
    assert response.status_code == 400
    assert response.status_text == "Bad Request"
    assert response.error_message == "API key not valid."
    assert response.raw_response == error


@pytest.mark.asyncio
async def test_error_with_non_json_body(make_adapter):
    adapter, _ = make_adapter(httpx.Response(503, text="upstream down"))

    response = await adapter.generate_content("prompt", api_key="k")
    await adapter.close()

    assert not response.ok
    assert response.status_text == "Service Unavailable"
    assert response.error_message is None


@pytest.mark.asyncio
async def test_transport_errors_propagate(make_adapter):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    adapter, _ = make_adapter(refuse)

    with pytest.raises(httpx.ConnectError):
        await adapter.generate_content("prompt", api_key="k")
    await adapter.close()


def test_ok_follows_status_code():
    assert LLMResponse(model="m", finish_reason="error").ok
    assert LLMResponse(model="m", status_code=204).ok
    assert not LLMResponse(model="m", status_code=429, finish_reason="STOP").ok
