"""Testes do cliente HTTP das chamadas administrativas (httpx mockado)."""

from __future__ import annotations

import httpx
import pytest

from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.infra.http import client as http_client

URL = "https://discord.com/api/v10/applications/1/commands"


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    recorded: list[float] = []

    async def _fake_sleep(seconds: float, attempt: int, reason: int | str) -> None:
        _ = (attempt, reason)
        recorded.append(seconds)

    monkeypatch.setattr(http_client, "_sleep", _fake_sleep)
    return recorded


def _client(responses: list[httpx.Response | Exception], **config: float) -> HttpClient:
    queue = iter(responses)

    def handler(request: httpx.Request) -> httpx.Response:
        item = next(queue)
        if isinstance(item, Exception):
            raise item
        return item

    return HttpClient(HttpClientConfig(**config), transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_rate_limit_waits_retry_after_header(sleeps: list[float]) -> None:
    client = _client(
        [
            httpx.Response(429, headers={"Retry-After": "2.5"}, json={"retry_after": 9}),
            httpx.Response(201, json={"id": "cmd-1"}),
        ]
    )

    response = await client.post(URL, json={"name": "new_event"})

    assert response.status_code == 201
    assert sleeps == [2.5]


@pytest.mark.asyncio
async def test_rate_limit_falls_back_to_body_retry_after(sleeps: list[float]) -> None:
    client = _client(
        [
            httpx.Response(
                429,
                json={"message": "You are being rate limited.", "retry_after": 0.75},
            ),
            httpx.Response(200, json={}),
        ]
    )

    await client.post(URL, json={})

    assert sleeps == [0.75]


@pytest.mark.asyncio
async def test_rate_limit_wait_is_capped(sleeps: list[float]) -> None:
    client = _client(
        [httpx.Response(429, headers={"Retry-After": "600"}), httpx.Response(200, json={})],
        backoff_max_seconds=30.0,
    )

    await client.post(URL, json={})

    assert sleeps == [30.0]


@pytest.mark.asyncio
async def test_server_errors_use_exponential_backoff(sleeps: list[float]) -> None:
    client = _client(
        [httpx.Response(502), httpx.Response(503), httpx.Response(200, json={})],
        backoff_base_seconds=1.0,
    )

    await client.post(URL, json={})

    assert sleeps == [1.0, 2.0]


@pytest.mark.asyncio
async def test_client_errors_are_returned_without_retry(sleeps: list[float]) -> None:
    client = _client([httpx.Response(400, json={"code": 50035})])

    response = await client.post(URL, json={})

    assert response.status_code == 400
    assert sleeps == []


@pytest.mark.asyncio
async def test_exhausted_retries_raise_with_last_status(sleeps: list[float]) -> None:
    client = _client([httpx.Response(500), httpx.Response(500)], max_retries=1)

    with pytest.raises(HttpError) as exc_info:
        await client.post(URL, json={})

    assert exc_info.value.status_code == 500
    assert exc_info.value.is_retryable is True
    assert len(sleeps) == 1


@pytest.mark.asyncio
async def test_transport_errors_are_retried_then_raised(sleeps: list[float]) -> None:
    request = httpx.Request("POST", URL)
    client = _client(
        [
            httpx.ConnectError("refused", request=request),
            httpx.ReadTimeout("slow", request=request),
        ],
        max_retries=1,
    )

    with pytest.raises(HttpError, match="http_transport_error"):
        await client.post(URL, json={})

    assert len(sleeps) == 1
