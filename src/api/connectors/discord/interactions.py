"""Decodificação do corpo de interações em variantes fechadas.

Ordem de leitura:
1. JSON objeto
2. somente o discriminante `type` de topo
3. o restante, conforme o formato da variante escolhida

Nenhuma variante é produzida por default: tipo ausente, mal tipado ou
desconhecido é erro.
"""

from __future__ import annotations

import json
from typing import Any

from app.domain.interaction import (
    FormSubmission,
    HealthCheck,
    InteractionEnvelope,
    NewCommandInvocation,
)

from .errors import (
    MalformedBodyError,
    MissingDiscriminantError,
    UnknownInteractionTypeError,
)
from .models import NEW_EVENT_FORM_ID, ComponentType, InteractionType

FORM_FIELD_IDS: tuple[str, ...] = (
    "name",
    "description",
    "location",
    "date",
    "time",
    "duration",
)


def decode_interaction(body: bytes) -> InteractionEnvelope:
    """Converte o corpo bruto em uma variante de InteractionEnvelope.

    Args:
        body: Corpo bruto (já autenticado)

    Raises:
        MalformedBodyError: JSON inválido, não-objeto ou formulário incompleto
        MissingDiscriminantError: Campo `type` ausente
        UnknownInteractionTypeError: `type` não inteiro ou não suportado

    Returns:
        HealthCheck, NewCommandInvocation ou FormSubmission
    """
    payload = _parse_object(body)
    interaction_type = _read_discriminant(payload)

    if interaction_type is InteractionType.PING:
        return HealthCheck()
    if interaction_type is InteractionType.APPLICATION_COMMAND:
        return NewCommandInvocation()
    return _decode_form_submission(payload)


def _parse_object(body: bytes) -> dict[str, Any]:
    try:
        payload = json.loads(body.decode("utf-8"))
    except (ValueError, RecursionError) as exc:
        # ValueError cobre UTF-8 inválido, JSON inválido e inteiros acima do limite de dígitos
        raise MalformedBodyError("invalid_json") from exc
    if not isinstance(payload, dict):
        raise MalformedBodyError("payload_not_object")
    return payload


def _read_discriminant(payload: dict[str, Any]) -> InteractionType:
    if "type" not in payload:
        raise MissingDiscriminantError("missing_type")
    raw_type = payload["type"]
    # bool é subclasse de int em Python
    if not isinstance(raw_type, int) or isinstance(raw_type, bool):
        raise UnknownInteractionTypeError("type_not_integer")
    try:
        return InteractionType(raw_type)
    except ValueError as exc:
        raise UnknownInteractionTypeError(f"unsupported_type:{raw_type}") from exc


def _decode_form_submission(payload: dict[str, Any]) -> FormSubmission:
    data = payload.get("data")
    if not isinstance(data, dict):
        raise MalformedBodyError("missing_form_data")
    if data.get("custom_id") != NEW_EVENT_FORM_ID:
        raise MalformedBodyError("unknown_form")

    values = _collect_text_inputs(data.get("components"))
    missing = [field_id for field_id in FORM_FIELD_IDS if field_id not in values]
    if missing:
        raise MalformedBodyError(f"missing_form_fields:{','.join(missing)}")

    return FormSubmission(**{field_id: values[field_id] for field_id in FORM_FIELD_IDS})


def _collect_text_inputs(rows: Any) -> dict[str, str]:
    """Lê `data.components[*].components[*]` indexando por custom_id.

    Campo do formulário repetido ou com valor não-string é erro; componentes fora do
    formulário são ignorados.
    """
    if not isinstance(rows, list):
        raise MalformedBodyError("missing_form_components")

    values: dict[str, str] = {}
    for row in rows:
        if not isinstance(row, dict) or row.get("type") != ComponentType.ACTION_ROW:
            raise MalformedBodyError("invalid_action_row")
        components = row.get("components")
        if not isinstance(components, list):
            raise MalformedBodyError("invalid_action_row")
        for component in components:
            if not isinstance(component, dict):
                raise MalformedBodyError("invalid_component")
            custom_id = component.get("custom_id")
            if custom_id not in FORM_FIELD_IDS:
                continue
            if custom_id in values:
                raise MalformedBodyError(f"duplicate_form_field:{custom_id}")
            value = component.get("value")
            if not isinstance(value, str):
                raise MalformedBodyError(f"invalid_form_value:{custom_id}")
            values[custom_id] = value
    return values
