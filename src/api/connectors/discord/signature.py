"""Validação de assinatura Ed25519 das interações Discord.

A plataforma assina `timestamp || corpo` (bytes crus, sem delimitador) e
envia a assinatura em hex no header `x-signature-ed25519`.
"""

from __future__ import annotations

import binascii
from typing import TYPE_CHECKING

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from .errors import (
    ConfigurationError,
    EncodingError,
    MissingCredentialsError,
    SignatureInvalidError,
)
from .models import (
    PUBLIC_KEY_LENGTH,
    SIGNATURE_HEADER,
    SIGNATURE_LENGTH,
    TIMESTAMP_HEADER,
    RawInteractionRequest,
    SignatureProof,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


def verify_interaction_signature(
    headers: Mapping[str, str],
    body: bytes,
    public_key_hex: str,
) -> None:
    """Verifica que o request foi assinado pela plataforma.

    Args:
        headers: Headers recebidos (lookup case-insensitive)
        body: Corpo bruto do request
        public_key_hex: Chave pública configurada (hex)

    Raises:
        MissingCredentialsError: Header de assinatura ou timestamp ausente
        ConfigurationError: Chave pública não configurada
        EncodingError: Chave ou assinatura com hex inválido
        SignatureInvalidError: Qualquer falha da verificação criptográfica
    """
    request = RawInteractionRequest(headers=headers, body=body)
    signature_hex = request.header(SIGNATURE_HEADER)
    timestamp = request.header(TIMESTAMP_HEADER)
    if not signature_hex or not timestamp:
        raise MissingCredentialsError("missing_signature_headers")

    if not public_key_hex:
        raise ConfigurationError("missing_public_key")

    proof = _decode_proof(public_key_hex, signature_hex)
    _verify_proof(proof, _signed_message(timestamp, request.body))


def _signed_message(timestamp: str, body: bytes) -> bytes:
    # Starlette decodifica headers como latin-1; o encode devolve os bytes recebidos
    try:
        return timestamp.encode("latin-1") + body
    except UnicodeEncodeError as exc:
        raise SignatureInvalidError("signature_verification_failed") from exc


def _decode_proof(public_key_hex: str, signature_hex: str) -> SignatureProof:
    return SignatureProof(
        public_key=_decode_hex(public_key_hex, "public_key"),
        signature=_decode_hex(signature_hex, "signature"),
    )


def _decode_hex(value: str, label: str) -> bytes:
    try:
        return binascii.unhexlify(value)
    except (ValueError, binascii.Error) as exc:
        raise EncodingError(f"invalid_hex_{label}") from exc


def _verify_proof(proof: SignatureProof, message: bytes) -> None:
    # Tamanho errado, chave inválida e assinatura errada viram o mesmo erro
    if len(proof.public_key) != PUBLIC_KEY_LENGTH or len(proof.signature) != SIGNATURE_LENGTH:
        raise SignatureInvalidError("signature_verification_failed")
    try:
        public_key = Ed25519PublicKey.from_public_bytes(proof.public_key)
        public_key.verify(proof.signature, message)
    except (InvalidSignature, ValueError) as exc:
        raise SignatureInvalidError("signature_verification_failed") from exc
