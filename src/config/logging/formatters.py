"""Formatter JSON com o conjunto mínimo de campos do serviço."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter usado pelo handler raiz.

    Exemplo de saída:
        {"asctime": "...", "level": "WARNING", "logger": "api.routes.discord",
         "message": "discord_interaction_rejected", "correlation_id": "c1",
         "service": "gitevents", "reason": "signature_invalid"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
