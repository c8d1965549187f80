"""Testes do HttpClient base (retry e backoff)."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError


def _client(handler, max_retries: int = 2) -> HttpClient:
    return HttpClient(
        HttpClientConfig(
            max_retries=max_retries,
            backoff_base_seconds=0,
            default_headers={"X-Default": "1"},
            transport=httpx.MockTransport(handler),
        )
    )


@pytest.mark.asyncio
async def test_get_retries_retryable_status_then_succeeds() -> None:
    statuses = [503, 429, 200]
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(statuses.pop(0))

    response = await _client(handler).get(
        "https://api.example.test/items", params={"a": "b"}, headers={"X-Extra": "2"}
    )

    assert response.status_code == 200
    assert len(seen) == 3
    assert seen[0].method == "GET"
    assert seen[0].url.params["a"] == "b"
    assert seen[0].headers["X-Default"] == "1"
    assert seen[0].headers["X-Extra"] == "2"


@pytest.mark.asyncio
async def test_client_errors_are_returned_without_retry() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(404)

    response = await _client(handler).get("https://api.example.test/missing")

    assert response.status_code == 404
    assert len(seen) == 1


@pytest.mark.asyncio
async def test_exhausted_retries_raise_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    with pytest.raises(HttpError) as exc_info:
        await _client(handler, max_retries=1).get("https://api.example.test/boom")

    assert exc_info.value.status_code == 500
    assert exc_info.value.is_retryable is True
