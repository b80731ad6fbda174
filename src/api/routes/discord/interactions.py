"""Endpoint de interações do Discord.

Endpoints:
- POST /webhook/discord: recebe interações assinadas pela plataforma

Pipeline por request (estritamente sequencial):
1. Assinatura Ed25519 (falha interrompe tudo, corpo não é interpretado)
2. Decodificação do corpo em variante fechada
3. Dispatch -> Outcome
4. Render da resposta

Segurança:
- Corpo bruto lido uma única vez e usado byte a byte na assinatura
- Falhas de autenticação/decodificação expõem apenas mensagem genérica
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.connectors.discord.errors import InteractionError
from api.connectors.discord.interactions import decode_interaction
from api.connectors.discord.models import RawInteractionRequest
from api.connectors.discord.signature import verify_interaction_signature
from api.payload_builders.discord import render_error, render_outcome
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import get_discord_settings

if TYPE_CHECKING:
    from api.payload_builders.discord import WireResponse
    from app.services.interaction_dispatcher import InteractionDispatcher

logger = logging.getLogger(__name__)

router = APIRouter()

# Lazy-loaded (inicializado na primeira requisição)
_dispatcher = None


def _get_dispatcher() -> InteractionDispatcher:
    """Obtém o dispatcher de interações (lazy-loading)."""
    global _dispatcher
    if _dispatcher is None:
        from app.bootstrap.dependencies import create_interaction_dispatcher

        _dispatcher = create_interaction_dispatcher()
    return _dispatcher


async def handle_interaction(
    raw_request: RawInteractionRequest,
    *,
    public_key: str,
    dispatcher: InteractionDispatcher,
) -> WireResponse:
    """Executa o pipeline completo para um request bruto.

    Args:
        raw_request: Headers e corpo bruto recebidos
        public_key: Chave pública Ed25519 configurada (hex)
        dispatcher: Dispatcher de interações

    Returns:
        WireResponse de erro (400/500) ou da interação (200)
    """
    try:
        verify_interaction_signature(raw_request.headers, raw_request.body, public_key)
        envelope = decode_interaction(raw_request.body)
    except InteractionError as exc:
        logger.warning(
            "discord_interaction_rejected",
            extra={
                "channel": "discord",
                "correlation_id": get_correlation_id(),
                "error_type": type(exc).__name__,
                "reason": exc.detail,
                "payload_size": len(raw_request.body),
            },
        )
        return render_error(exc)

    outcome = await dispatcher.dispatch(envelope)

    logger.info(
        "discord_interaction_dispatched",
        extra={
            "channel": "discord",
            "correlation_id": get_correlation_id(),
            "envelope": type(envelope).__name__,
            "outcome": type(outcome).__name__,
        },
    )
    return render_outcome(outcome)


@router.post("/", response_model=None)
async def receive_interaction(request: Request) -> JSONResponse:
    """Recebimento de interações do Discord.

    Returns:
        JSONResponse com payload de interação ou `{"message": ...}` de erro.
    """
    correlation_id = request.headers.get("x-correlation-id")
    token = set_correlation_id(correlation_id)

    try:
        settings = get_discord_settings()
        raw_body = await request.body()

        wire_response = await handle_interaction(
            RawInteractionRequest(headers=dict(request.headers), body=raw_body),
            public_key=settings.public_key,
            dispatcher=_get_dispatcher(),
        )
        return JSONResponse(
            content=wire_response.body,
            status_code=wire_response.status_code,
            media_type=wire_response.media_type,
        )
    finally:
        reset_correlation_id(token)
