"""Modelos de dominio para criacao de eventos a partir do formulario.

Os seis campos chegam como texto livre; a interpretacao de data, hora e
duracao fica com a implementacao da acao (ver app/infra/calendar).
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import BaseModel, ConfigDict, Field

# Limites declarados nos campos do formulario
FIELD_MIN_LENGTH = 1
FIELD_MAX_LENGTH = 100


class EventRequest(BaseModel):
    """Dados do formulario `new_event` validados para a acao externa."""

    model_config = ConfigDict(extra="ignore", frozen=True, str_strip_whitespace=True)

    name: str = Field(
        ...,
        min_length=FIELD_MIN_LENGTH,
        max_length=FIELD_MAX_LENGTH,
        description="Nome do evento.",
    )
    description: str = Field(
        ...,
        min_length=FIELD_MIN_LENGTH,
        max_length=FIELD_MAX_LENGTH,
        description="Descricao curta do evento.",
    )
    location: str = Field(
        ...,
        min_length=FIELD_MIN_LENGTH,
        max_length=FIELD_MAX_LENGTH,
        description="Local do evento (ou 'online').",
    )
    date: str = Field(
        ...,
        min_length=FIELD_MIN_LENGTH,
        max_length=FIELD_MAX_LENGTH,
        description="Data informada (DD/MM/YYYY).",
    )
    time: str = Field(
        ...,
        min_length=FIELD_MIN_LENGTH,
        max_length=FIELD_MAX_LENGTH,
        description="Horario informado (ex: 12:30pm).",
    )
    duration: str = Field(
        ...,
        min_length=FIELD_MIN_LENGTH,
        max_length=FIELD_MAX_LENGTH,
        description="Duracao informada (ex: 1h30m).",
    )


class CreatedEvent(BaseModel):
    """Evento confirmado pelo provedor externo."""

    model_config = ConfigDict(extra="ignore")

    event_id: str = Field(..., description="Identificador do evento no provedor.")
    html_link: str = Field(..., description="URL publica para visualizar o evento.")
    start: datetime = Field(..., description="Data/hora de inicio do evento.")
    end: datetime = Field(..., description="Data/hora de fim do evento.")


__all__ = ["CreatedEvent", "EventRequest"]
