"""Acao de criacao de eventos usando Google Calendar API v3."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.infra.calendar.google_calendar_parsers import (
    build_event_window,
    http_status,
    map_created_event,
)
from app.observability import get_correlation_id
from app.protocols.event_action import EventActionProtocol
from utils.errors import ExternalActionError

if TYPE_CHECKING:
    from app.domain.event import CreatedEvent, EventRequest

logger = logging.getLogger(__name__)

_COMPONENT = "google_calendar_event_action"
_CALENDAR_SCOPE = "https://www.googleapis.com/auth/calendar.events"


class GoogleCalendarEventAction(EventActionProtocol):
    """Cria o evento do formulario no calendario configurado."""

    __slots__ = ("_calendar_id", "_service", "_timezone", "_zone")

    def __init__(self, *, calendar_id: str, credentials_json: str, timezone: str) -> None:
        credentials = service_account.Credentials.from_service_account_info(
            json.loads(credentials_json),
            scopes=[_CALENDAR_SCOPE],
        )
        self._calendar_id = calendar_id
        self._timezone = timezone
        self._zone = ZoneInfo(timezone)
        self._service = build("calendar", "v3", credentials=credentials, cache_discovery=False)

    async def create_event(self, request: EventRequest) -> CreatedEvent:
        try:
            start_dt, end_dt = build_event_window(
                request.date, request.time, request.duration, self._zone
            )
        except ValueError as exc:
            logger.info(
                "google_calendar_invalid_schedule",
                extra={
                    "component": _COMPONENT,
                    "reason": str(exc),
                    "correlation_id": get_correlation_id(),
                },
            )
            raise ExternalActionError(str(exc)) from exc

        body: dict[str, Any] = {
            "summary": request.name,
            "description": request.description,
            "location": request.location,
            "start": {"dateTime": start_dt.isoformat(), "timeZone": self._timezone},
            "end": {"dateTime": end_dt.isoformat(), "timeZone": self._timezone},
        }
        try:
            response = await asyncio.to_thread(self._insert_event_sync, body)
            return map_created_event(response, self._zone)
        except HttpError as exc:
            self._log_error(result="http_error", exc=exc)
            raise ExternalActionError("calendar_http_error") from exc
        except Exception as exc:
            self._log_error(result="error")
            raise ExternalActionError("calendar_unexpected_error") from exc

    def _insert_event_sync(self, body: dict[str, Any]) -> dict[str, Any]:
        return self._service.events().insert(calendarId=self._calendar_id, body=body).execute()

    def _log_error(self, *, result: str, exc: HttpError | None = None) -> None:
        extra: dict[str, Any] = {
            "component": _COMPONENT,
            "action": "create_event",
            "result": result,
            "correlation_id": get_correlation_id(),
        }
        if exc is not None:
            extra["status_code"] = http_status(exc)
            extra["error_type"] = type(exc).__name__
            logger.error("google_calendar_http_error", extra=extra)
            return
        logger.exception("google_calendar_unexpected_error", extra=extra)
