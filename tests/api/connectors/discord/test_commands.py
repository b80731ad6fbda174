"""Testes do registro do comando `new_event` (HTTP mockado via httpx)."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.discord.commands import build_command_payload, register_command
from app.infra.http import HttpClient, HttpClientConfig
from config.settings import DiscordSettings
from utils.errors import CommandRegistrationError

SETTINGS = DiscordSettings(
    public_key="ab" * 32,
    bot_token="bot-token",
    application_id="987654321",
)


def _client(handler, max_retries: int = 0) -> HttpClient:
    return HttpClient(
        HttpClientConfig(max_retries=max_retries, backoff_base_seconds=0.0),
        transport=httpx.MockTransport(handler),
    )


def test_command_payload_declares_slash_command() -> None:
    assert build_command_payload() == {
        "name": "new_event",
        "type": 1,
        "description": "Create a new event on GitEvents",
    }


@pytest.mark.asyncio
async def test_register_command_posts_payload_with_bot_auth() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(201, json={"id": "cmd-1", "name": "new_event"})

    result = await register_command(SETTINGS, http_client=_client(handler))

    assert result == {"id": "cmd-1", "name": "new_event"}
    assert len(captured) == 1
    request = captured[0]
    assert request.method == "POST"
    assert str(request.url) == "https://discord.com/api/v10/applications/987654321/commands"
    assert request.headers["Authorization"] == "Bot bot-token"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == build_command_payload()


@pytest.mark.asyncio
async def test_register_command_rejected_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"message": "401: Unauthorized"})

    with pytest.raises(CommandRegistrationError) as exc_info:
        await register_command(SETTINGS, http_client=_client(handler))

    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_register_command_retries_server_errors() -> None:
    statuses = iter([503, 200])

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(next(statuses), json={"id": "cmd-1"})

    result = await register_command(SETTINGS, http_client=_client(handler, max_retries=1))

    assert result == {"id": "cmd-1"}


@pytest.mark.asyncio
async def test_register_command_exhausted_retries_raise() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    with pytest.raises(CommandRegistrationError) as exc_info:
        await register_command(SETTINGS, http_client=_client(handler))

    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_register_command_requires_credentials() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover
        raise AssertionError("request must not be sent")

    settings = DiscordSettings(public_key="ab" * 32)

    with pytest.raises(CommandRegistrationError, match="DISCORD_BOT_TOKEN"):
        await register_command(settings, http_client=_client(handler))
