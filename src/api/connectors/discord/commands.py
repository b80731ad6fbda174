"""Registro do comando `new_event` na API do Discord.

Operação administrativa, executada uma vez (scripts/register_discord_command.py);
não faz parte do pipeline de requests.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.infra.http import HttpClient, HttpClientConfig, HttpError
from utils.errors import CommandRegistrationError

from .models import NEW_EVENT_COMMAND

if TYPE_CHECKING:
    from config.settings import DiscordSettings

logger = logging.getLogger(__name__)

# CHAT_INPUT: slash command
_CHAT_INPUT_COMMAND_TYPE = 1
_COMMAND_DESCRIPTION = "Create a new event on GitEvents"


def build_command_payload() -> dict[str, Any]:
    """Payload de declaração do slash command."""
    return {
        "name": NEW_EVENT_COMMAND,
        "type": _CHAT_INPUT_COMMAND_TYPE,
        "description": _COMMAND_DESCRIPTION,
    }


async def register_command(
    settings: DiscordSettings,
    http_client: HttpClient | None = None,
) -> dict[str, Any]:
    """Registra (ou sobrescreve) o comando global da aplicação.

    Args:
        settings: Settings Discord com bot_token e application_id
        http_client: Cliente HTTP (default: configurado a partir de settings)

    Raises:
        CommandRegistrationError: Credenciais ausentes ou resposta não-2xx

    Returns:
        JSON do comando criado, como devolvido pela API
    """
    errors = settings.validate_registration()
    if errors:
        raise CommandRegistrationError("; ".join(errors))

    client = http_client or HttpClient(
        HttpClientConfig(
            timeout_seconds=settings.request_timeout_seconds,
            max_retries=settings.max_retries,
        )
    )
    headers = {
        "Authorization": f"Bot {settings.bot_token}",
        "Content-Type": "application/json",
    }

    try:
        response = await client.post(
            settings.commands_endpoint,
            json=build_command_payload(),
            headers=headers,
        )
    except HttpError as exc:
        logger.error(
            "discord_command_registration_failed",
            extra={"component": "discord_commands", "status_code": exc.status_code},
        )
        raise CommandRegistrationError(str(exc), status_code=exc.status_code) from exc

    if not response.is_success:
        logger.error(
            "discord_command_registration_rejected",
            extra={"component": "discord_commands", "status_code": response.status_code},
        )
        raise CommandRegistrationError(
            "discord_command_rejected",
            status_code=response.status_code,
        )

    logger.info(
        "discord_command_registered",
        extra={
            "component": "discord_commands",
            "command": NEW_EVENT_COMMAND,
            "status_code": response.status_code,
        },
    )
    return response.json()
