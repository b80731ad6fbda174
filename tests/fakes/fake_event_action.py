"""Fakes da ação de evento para testes deterministas."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from app.domain.event import CreatedEvent, EventRequest


class FakeEventAction:
    """Registra as chamadas e devolve um evento fixo (ou levanta `error`)."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[EventRequest] = []

    async def create_event(self, request: EventRequest) -> CreatedEvent:
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        start = datetime(2022, 12, 15, 12, 30, tzinfo=UTC)
        return CreatedEvent(
            event_id="evt-1",
            html_link="https://calendar.google.com/event?eid=evt-1",
            start=start,
            end=start + timedelta(minutes=90),
        )
