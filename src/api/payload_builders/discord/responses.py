"""Renderização de Outcome no formato de resposta de interação Discord.

O formulário é declarado como dado (FormTemplate/FormField); as funções de
render apenas o serializam. Toda resposta de interação válida é 200: a
falha da ação é comunicada no corpo, não no status.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from api.connectors.discord.models import (
    NEW_EVENT_FORM_ID,
    ComponentType,
    MessageFlag,
    ResponseType,
    TextInputStyle,
)
from app.domain.event import FIELD_MAX_LENGTH, FIELD_MIN_LENGTH
from app.domain.interaction import (
    Acknowledge,
    ActionFailed,
    ActionSucceeded,
    Outcome,
    PresentForm,
)

JSON_MEDIA_TYPE = "application/json"

EVENT_CREATED_TEXT = "An event was just created: {reference}"
EVENT_FAILED_TEXT = "There was an error creating your event"


@dataclass(frozen=True, slots=True)
class WireResponse:
    """Resposta final entregue ao runtime HTTP."""

    status_code: int
    body: dict[str, Any]
    media_type: str = JSON_MEDIA_TYPE


@dataclass(frozen=True, slots=True)
class FormField:
    custom_id: str
    label: str
    placeholder: str
    style: TextInputStyle = TextInputStyle.SHORT
    min_length: int = FIELD_MIN_LENGTH
    max_length: int = FIELD_MAX_LENGTH
    required: bool = True


@dataclass(frozen=True, slots=True)
class FormTemplate:
    title: str
    custom_id: str
    fields: tuple[FormField, ...]


NEW_EVENT_FORM = FormTemplate(
    title="New Event",
    custom_id=NEW_EVENT_FORM_ID,
    fields=(
        FormField("name", "Name", "Event name"),
        FormField("description", "Description", "A concise description", TextInputStyle.PARAGRAPH),
        FormField("location", "Location", "online"),
        FormField("date", "Date", "15/12/2022"),
        FormField("time", "Time", "12:30pm"),
        FormField("duration", "Duration", "1h30m"),
    ),
)


def render_outcome(outcome: Outcome) -> WireResponse:
    """Converte o Outcome do dispatcher na resposta de interação.

    Raises:
        TypeError: Objeto fora das variantes de Outcome
    """
    if isinstance(outcome, Acknowledge):
        body: dict[str, Any] = {"type": ResponseType.PONG.value}
    elif isinstance(outcome, PresentForm):
        body = build_form_payload(NEW_EVENT_FORM)
    elif isinstance(outcome, ActionSucceeded):
        body = _build_message(EVENT_CREATED_TEXT.format(reference=outcome.reference))
    elif isinstance(outcome, ActionFailed):
        body = _build_message(EVENT_FAILED_TEXT, ephemeral=True)
    else:
        raise TypeError(f"unsupported outcome: {type(outcome).__name__}")
    return WireResponse(status_code=200, body=body)


def build_form_payload(template: FormTemplate) -> dict[str, Any]:
    """Resposta MODAL: uma action row por campo, na ordem do template."""
    return {
        "type": ResponseType.MODAL.value,
        "data": {
            "title": template.title,
            "custom_id": template.custom_id,
            "components": [_build_action_row(field) for field in template.fields],
        },
    }


def _build_action_row(field: FormField) -> dict[str, Any]:
    return {
        "type": ComponentType.ACTION_ROW.value,
        "components": [
            {
                "type": ComponentType.TEXT_INPUT.value,
                "custom_id": field.custom_id,
                "label": field.label,
                "style": field.style.value,
                "min_length": field.min_length,
                "max_length": field.max_length,
                "placeholder": field.placeholder,
                "required": field.required,
            }
        ],
    }


def _build_message(content: str, *, ephemeral: bool = False) -> dict[str, Any]:
    data: dict[str, Any] = {"content": content}
    if ephemeral:
        data["flags"] = MessageFlag.EPHEMERAL.value
    return {"type": ResponseType.CHANNEL_MESSAGE_WITH_SOURCE.value, "data": data}
