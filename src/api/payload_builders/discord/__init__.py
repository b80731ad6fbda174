"""Payloads de resposta de interação Discord."""

from .errors import render_error
from .responses import (
    NEW_EVENT_FORM,
    FormField,
    FormTemplate,
    WireResponse,
    build_form_payload,
    render_outcome,
)

__all__ = [
    "NEW_EVENT_FORM",
    "FormField",
    "FormTemplate",
    "WireResponse",
    "build_form_payload",
    "render_error",
    "render_outcome",
]
