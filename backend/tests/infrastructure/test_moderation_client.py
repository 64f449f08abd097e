"""Moderation Client — request shape and failure mapping over httpx.MockTransport.

Invariants:
    - POST with apikey header, censor_character query and raw content body
    - 2xx ⇒ response text returned
    - non-2xx, transport error, timeout ⇒ QAError(EXTERNAL_API_ERROR)
"""

import asyncio

import httpx
import pytest

from qa_api.core.errors import ErrorKind, QAError
from qa_api.infrastructure.moderation_client import ModerationClient

URL = "http://moderation.test/bad_words"


def _client(handler, timeout_seconds=1.0) -> ModerationClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ModerationClient(
        http, url=URL, api_key="k-123", timeout_seconds=timeout_seconds,
    )


async def test_success_returns_body_text():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text='{"censored_content": "**** it"}')

    result = await _client(handler).check("darn it")

    assert result == '{"censored_content": "**** it"}'
    request = seen[0]
    assert request.method == "POST"
    assert request.headers["apikey"] == "k-123"
    assert request.url.params["censor_character"] == "*"
    assert request.content == b"darn it"


@pytest.mark.parametrize("status", [400, 401, 429, 503])
async def test_non_success_status_is_external_api_error(status):
    client = _client(lambda request: httpx.Response(status, text="nope"))
    with pytest.raises(QAError) as exc_info:
        await client.check("hello")
    assert exc_info.value.kind is ErrorKind.EXTERNAL_API_ERROR
    assert exc_info.value.http_status == 500
    assert str(status) in exc_info.value.message


async def test_transport_error_is_external_api_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(QAError) as exc_info:
        await _client(handler).check("hello")
    assert exc_info.value.kind is ErrorKind.EXTERNAL_API_ERROR
    assert "connection refused" in exc_info.value.message


async def test_slow_service_hits_timeout_budget():
    async def handler(request):
        await asyncio.sleep(1)
        return httpx.Response(200, text="late")

    with pytest.raises(QAError) as exc_info:
        await _client(handler, timeout_seconds=0.05).check("hello")
    assert exc_info.value.kind is ErrorKind.EXTERNAL_API_ERROR
    assert "timed out" in exc_info.value.message
