"""Tipos de protocolo das interações Discord (camada de borda)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-signature-ed25519"
TIMESTAMP_HEADER = "x-signature-timestamp"

PUBLIC_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64

NEW_EVENT_COMMAND = "new_event"
NEW_EVENT_FORM_ID = "new_event"


class InteractionType(IntEnum):
    """Discriminante `type` do payload recebido."""

    PING = 1
    APPLICATION_COMMAND = 2
    MODAL_SUBMIT = 5


class ResponseType(IntEnum):
    """Discriminante `type` do payload de resposta."""

    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    MODAL = 9


class MessageFlag(IntEnum):
    EPHEMERAL = 64


class ComponentType(IntEnum):
    ACTION_ROW = 1
    TEXT_INPUT = 4


class TextInputStyle(IntEnum):
    """Estilo de exibição do campo do formulário."""

    SHORT = 1
    PARAGRAPH = 2


@dataclass(frozen=True, slots=True)
class RawInteractionRequest:
    """Request bruto: headers com lookup case-insensitive e corpo opaco."""

    headers: Mapping[str, str]
    body: bytes
    _normalized: dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        normalized = {key.lower(): value for key, value in self.headers.items()}
        object.__setattr__(self, "_normalized", normalized)

    def header(self, name: str) -> str | None:
        return self._normalized.get(name.lower())


@dataclass(frozen=True, slots=True)
class SignatureProof:
    """Material decodificado para uma única verificação Ed25519."""

    public_key: bytes
    signature: bytes


__all__ = [
    "NEW_EVENT_COMMAND",
    "NEW_EVENT_FORM_ID",
    "PUBLIC_KEY_LENGTH",
    "SIGNATURE_HEADER",
    "SIGNATURE_LENGTH",
    "TIMESTAMP_HEADER",
    "ComponentType",
    "InteractionType",
    "MessageFlag",
    "RawInteractionRequest",
    "ResponseType",
    "SignatureProof",
    "TextInputStyle",
]
