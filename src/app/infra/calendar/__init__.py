"""Implementações da ação de criação de eventos."""

from app.infra.calendar.google_calendar_client import GoogleCalendarEventAction
from app.infra.calendar.unconfigured import UnconfiguredEventAction

__all__ = ["GoogleCalendarEventAction", "UnconfiguredEventAction"]
