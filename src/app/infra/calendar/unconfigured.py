"""Acao usada quando nenhum calendario esta habilitado.

Toda submissao vira ActionFailed (mensagem efemera ao usuario).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from app.protocols.event_action import EventActionProtocol
from utils.errors import ExternalActionError

if TYPE_CHECKING:
    from app.domain.event import CreatedEvent, EventRequest

logger = logging.getLogger(__name__)


class UnconfiguredEventAction(EventActionProtocol):
    """Falha sempre, sem IO."""

    async def create_event(self, request: EventRequest) -> CreatedEvent:
        _ = request
        logger.warning(
            "event_action_not_configured",
            extra={"component": "event_action", "correlation_id": get_correlation_id()},
        )
        raise ExternalActionError("calendar_not_configured")
