"""Factories de dependências (providers concretos atrás dos protocolos)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.calendar import GoogleCalendarEventAction, UnconfiguredEventAction
from app.services.interaction_dispatcher import InteractionDispatcher
from config.settings import get_calendar_settings

if TYPE_CHECKING:
    from app.protocols.event_action import EventActionProtocol

logger = logging.getLogger(__name__)


def create_event_action() -> EventActionProtocol:
    """Cria a ação de evento conforme CALENDAR_ENABLED.

    Credenciais inválidas não derrubam o serviço: a ação degrada para
    UnconfiguredEventAction e toda submissão vira ActionFailed.
    """
    settings = get_calendar_settings()
    if not settings.calendar_enabled or settings.validate_enabled():
        logger.info(
            "event_action_selected",
            extra={"component": "bootstrap", "provider": "unconfigured"},
        )
        return UnconfiguredEventAction()

    try:
        action = GoogleCalendarEventAction(
            calendar_id=settings.google_calendar_id,
            credentials_json=settings.google_service_account_json or "",
            timezone=settings.calendar_timezone,
        )
    except Exception as exc:
        logger.error(
            "event_action_init_failed",
            extra={"component": "bootstrap", "error_type": type(exc).__name__},
        )
        return UnconfiguredEventAction()

    logger.info(
        "event_action_selected",
        extra={"component": "bootstrap", "provider": "google_calendar"},
    )
    return action


def create_interaction_dispatcher() -> InteractionDispatcher:
    """Cria o dispatcher com a ação de evento configurada."""
    return InteractionDispatcher(event_action=create_event_action())
