"""Renderização das falhas do pipeline (antes do dispatch).

Só a mensagem pública da classe do erro é exposta; o detalhe fica nos logs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .responses import WireResponse

if TYPE_CHECKING:
    from api.connectors.discord.errors import InteractionError


def render_error(exc: InteractionError) -> WireResponse:
    """InvalidInput -> 400; demais falhas do pipeline -> 500."""
    return WireResponse(
        status_code=exc.status_code,
        body={"message": exc.public_message},
    )
