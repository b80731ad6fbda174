"""Taxonomia de erros do pipeline de interações.

Cada classe tem uma mensagem pública fixa (`public_message`); o detalhe
passado no construtor vai apenas para logs. Falhas de hex e de assinatura
compartilham a mesma mensagem pública.
"""

from __future__ import annotations


class InteractionError(ValueError):
    """Base para falhas do pipeline antes do dispatch."""

    public_message = "Internal error"
    status_code = 500

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.public_message)
        self.detail = detail


class InvalidInputError(InteractionError):
    """Entrada do chamador estruturalmente válida, semanticamente errada."""

    public_message = "Invalid Input"
    status_code = 400


class MissingCredentialsError(InvalidInputError):
    """Header de assinatura ou timestamp ausente."""

    public_message = "Invalid Input: You need to provide both signature and timestamp"


class ConfigurationError(InteractionError):
    """Segredo/configuração do servidor ausente ou malformado."""

    public_message = "Server configuration error"


class SignatureInvalidError(InteractionError):
    """Verificação criptográfica falhou."""

    public_message = "Invalid request signature"


class EncodingError(InteractionError):
    """Hex inválido no material de assinatura."""

    public_message = SignatureInvalidError.public_message


class InteractionDecodeError(InteractionError):
    """Corpo não corresponde a uma interação conhecida."""

    public_message = "Parsing Body Error: unrecognized interaction"


class MissingDiscriminantError(InteractionDecodeError):
    """Campo `type` ausente."""


class UnknownInteractionTypeError(InteractionDecodeError):
    """Campo `type` com tipo JSON errado ou valor fora do conjunto suportado."""


class MalformedBodyError(InteractionDecodeError):
    """JSON inválido, não-objeto ou campos da variante ausentes/mal tipados."""


__all__ = [
    "ConfigurationError",
    "EncodingError",
    "InteractionDecodeError",
    "InteractionError",
    "InvalidInputError",
    "MalformedBodyError",
    "MissingCredentialsError",
    "MissingDiscriminantError",
    "SignatureInvalidError",
    "UnknownInteractionTypeError",
]
