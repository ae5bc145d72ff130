"""
Tests for the Gemini generative-report client and response decoding.
"""

import json

import httpx
import pytest

from echo3ai.core.errors import NetworkError
from echo3ai.schemas.gemini import GeminiRequest, GeminiResponse
from echo3ai.services.llm import generate
from tests.conftest import gemini_payload


def test_request_envelope_shape():
    request = GeminiRequest.from_prompt("Hello")

    assert request.model_dump() == {"contents": [{"parts": [{"text": "Hello"}]}]}


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"candidates": None},
        {"candidates": []},
        {"candidates": [{}]},
        {"candidates": [{"content": {}}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{}]}}]},
        {"candidates": [None]},
        {"candidates": [{"content": None}]},
        {"candidates": [{"content": {"parts": None}}]},
        {"candidates": [{"content": {"parts": [None]}}]},
        {"candidates": [{"content": {"parts": [{"text": None}]}}]},
    ],
)
def test_first_text_missing_fields(payload):
    assert GeminiResponse.model_validate(payload).first_text() is None


def test_first_text_uses_first_candidate_and_part():
    payload = {
        "candidates": [
            {"content": {"parts": [{"text": "first"}, {"text": "second"}]}},
            {"content": {"parts": [{"text": "other"}]}},
        ]
    }

    assert GeminiResponse.model_validate(payload).first_text() == "first"


@pytest.mark.asyncio
async def test_generate_posts_prompt_with_key(mock_http):
    seen = mock_http(lambda request: httpx.Response(200, json=gemini_payload("A report")))

    text = await generate("Check this", "secret-key", "fallback")

    assert text == "A report"
    request = seen[0]
    assert request.method == "POST"
    assert request.url.host == "generativelanguage.googleapis.com"
    assert request.url.path.endswith("gemini-2.5-flash:generateContent")
    assert request.url.params["key"] == "secret-key"
    assert json.loads(request.content) == {"contents": [{"parts": [{"text": "Check this"}]}]}


@pytest.mark.asyncio
async def test_generate_returns_fallback_without_candidates(mock_http):
    mock_http(lambda request: httpx.Response(200, json={"candidates": []}))

    assert await generate("prompt", "key", "No report generated.") == "No report generated."


@pytest.mark.asyncio
async def test_generate_http_error_carries_status(mock_http):
    mock_http(lambda request: httpx.Response(429, json={"error": {"message": "quota"}}))

    with pytest.raises(NetworkError) as exc_info:
        await generate("prompt", "key", "fallback")

    assert exc_info.value.status_code == 429
    assert "key=" not in str(exc_info.value)


@pytest.mark.asyncio
async def test_generate_invalid_json(mock_http):
    mock_http(lambda request: httpx.Response(200, text="<html>not json</html>"))

    with pytest.raises(NetworkError):
        await generate("prompt", "key", "fallback")


@pytest.mark.asyncio
async def test_generate_transport_failure(mock_http):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    mock_http(handler)

    with pytest.raises(NetworkError):
        await generate("prompt", "key", "fallback")


@pytest.mark.asyncio
async def test_generate_null_parts_returns_fallback(mock_http):
    payload = {"candidates": [{"content": {"role": "model", "parts": None}, "finishReason": "SAFETY"}]}
    mock_http(lambda request: httpx.Response(200, json=payload))

    assert await generate("prompt", "key", "No report generated.") == "No report generated."
