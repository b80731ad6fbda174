#!/usr/bin/env python3
"""Registra o slash command `new_event` na aplicação Discord.

Uso:
    DISCORD_BOT_TOKEN=... DISCORD_APPLICATION_ID=... \
        python scripts/register_discord_command.py

    python scripts/register_discord_command.py --dry-run

Operação administrativa: executar uma vez por aplicação (a API sobrescreve
o comando com o mesmo nome).
"""

from __future__ import annotations

import argparse
import asyncio
import json

from api.connectors.discord.commands import build_command_payload, register_command
from config.logging import configure_logging
from config.settings import get_discord_settings
from utils.errors import CommandRegistrationError


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Mostra endpoint e payload sem chamar a API",
    )
    return parser.parse_args()


def main() -> int:
    args = _parse_args()
    configure_logging(level="INFO", service_name="gitevents_admin")
    settings = get_discord_settings()

    errors = settings.validate_registration()
    if errors:
        for error in errors:
            print(f"erro: {error}")
        return 2

    if args.dry_run:
        print(f"POST {settings.commands_endpoint}")
        print(json.dumps(build_command_payload(), indent=2))
        return 0

    try:
        command = asyncio.run(register_command(settings))
    except CommandRegistrationError as exc:
        print(f"falha no registro: {exc} (status={exc.status_code})")
        return 1

    print(f"comando registrado: {command.get('name')} id={command.get('id')}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
