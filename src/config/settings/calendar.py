"""Settings de integracao com Google Calendar.

O calendario e o destino dos eventos criados pelo formulario do comando
`new_event`. Sem `CALENDAR_ENABLED` o bot responde com a mensagem de falha.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class CalendarSettings(BaseModel):
    """Configuracoes do calendario de eventos."""

    model_config = ConfigDict(extra="ignore")

    google_calendar_id: str = Field(
        default="",
        description="ID do calendario alvo no Google Calendar.",
    )
    google_service_account_json: str | None = Field(
        default=None,
        description="Credencial JSON da service account em formato texto.",
    )
    calendar_timezone: str = Field(
        default="UTC",
        description="Timezone usado para interpretar data/hora do formulario.",
    )
    calendar_enabled: bool = Field(
        default=False,
        description="Feature flag para habilitar criacao real de eventos.",
    )

    def validate_enabled(self) -> list[str]:
        """Valida credenciais quando a integracao esta habilitada."""
        if not self.calendar_enabled:
            return []
        errors: list[str] = []
        if not self.google_calendar_id:
            errors.append("GOOGLE_CALENDAR_ID nao configurado")
        if not self.google_service_account_json:
            errors.append("GOOGLE_SERVICE_ACCOUNT_JSON nao configurado")
        return errors


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_calendar_from_env() -> CalendarSettings:
    """Carrega CalendarSettings a partir de variaveis de ambiente."""
    return CalendarSettings(
        google_calendar_id=os.getenv("GOOGLE_CALENDAR_ID", ""),
        google_service_account_json=_read_optional_env("GOOGLE_SERVICE_ACCOUNT_JSON"),
        calendar_timezone=os.getenv("CALENDAR_TIMEZONE", "UTC"),
        calendar_enabled=_parse_bool(os.getenv("CALENDAR_ENABLED", "false")),
    )


@lru_cache(maxsize=1)
def get_calendar_settings() -> CalendarSettings:
    """Retorna instancia cacheada de CalendarSettings."""
    return _load_calendar_from_env()


__all__ = ["CalendarSettings", "get_calendar_settings"]
