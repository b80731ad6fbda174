"""Connector Discord: assinatura, decodificação e registro de comando."""

from .commands import build_command_payload, register_command
from .errors import (
    ConfigurationError,
    EncodingError,
    InteractionDecodeError,
    InteractionError,
    InvalidInputError,
    MalformedBodyError,
    MissingCredentialsError,
    MissingDiscriminantError,
    SignatureInvalidError,
    UnknownInteractionTypeError,
)
from .interactions import FORM_FIELD_IDS, decode_interaction
from .models import RawInteractionRequest
from .signature import verify_interaction_signature

__all__ = [
    "FORM_FIELD_IDS",
    "ConfigurationError",
    "EncodingError",
    "InteractionDecodeError",
    "InteractionError",
    "InvalidInputError",
    "MalformedBodyError",
    "MissingCredentialsError",
    "MissingDiscriminantError",
    "RawInteractionRequest",
    "SignatureInvalidError",
    "UnknownInteractionTypeError",
    "build_command_payload",
    "decode_interaction",
    "register_command",
    "verify_interaction_signature",
]
