"""Dispatcher de interacoes: envelope decodificado -> Outcome.

HealthCheck          -> Acknowledge
NewCommandInvocation -> PresentForm
FormSubmission       -> acao externa -> ActionSucceeded(link) | ActionFailed

Falha da acao externa nunca sai daqui como excecao: a plataforma sempre
recebe uma resposta bem formada.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.domain.event import EventRequest
from app.domain.interaction import (
    Acknowledge,
    ActionFailed,
    ActionSucceeded,
    FormSubmission,
    HealthCheck,
    NewCommandInvocation,
    PresentForm,
)
from app.observability import get_correlation_id, record_interaction, record_latency

if TYPE_CHECKING:
    from app.domain.interaction import InteractionEnvelope, Outcome
    from app.protocols.event_action import EventActionProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "interaction_dispatcher"


class InteractionDispatcher:
    """Maquina de estados de uma interacao (sem estado entre requests)."""

    __slots__ = ("_event_action",)

    def __init__(self, event_action: EventActionProtocol) -> None:
        self._event_action = event_action

    async def dispatch(self, envelope: InteractionEnvelope) -> Outcome:
        """Mapeia o envelope para exatamente um Outcome.

        Raises:
            TypeError: Objeto fora das variantes de InteractionEnvelope
        """
        if isinstance(envelope, HealthCheck):
            outcome: Outcome = Acknowledge()
        elif isinstance(envelope, NewCommandInvocation):
            outcome = PresentForm()
        elif isinstance(envelope, FormSubmission):
            outcome = await self._run_event_action(envelope)
        else:
            raise TypeError(f"unsupported envelope: {type(envelope).__name__}")

        record_interaction(
            type(envelope).__name__,
            type(outcome).__name__,
            get_correlation_id(),
        )
        return outcome

    async def _run_event_action(self, submission: FormSubmission) -> Outcome:
        started_at = time.perf_counter()
        try:
            request = EventRequest(
                name=submission.name,
                description=submission.description,
                location=submission.location,
                date=submission.date,
                time=submission.time,
                duration=submission.duration,
            )
            created = await self._event_action.create_event(request)
        except Exception as exc:
            logger.warning(
                "event_action_failed",
                extra={
                    "component": _COMPONENT,
                    "error_type": type(exc).__name__,
                    "correlation_id": get_correlation_id(),
                },
            )
            return ActionFailed()
        finally:
            record_latency(
                _COMPONENT,
                "create_event",
                (time.perf_counter() - started_at) * 1000,
                get_correlation_id(),
            )

        logger.info(
            "event_action_succeeded",
            extra={
                "component": _COMPONENT,
                "event_id": created.event_id,
                "correlation_id": get_correlation_id(),
            },
        )
        return ActionSucceeded(reference=created.html_link)
