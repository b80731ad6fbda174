"""Parsing do texto livre do formulario e das respostas da Google Calendar API."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING, Any

from app.domain.event import CreatedEvent

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

    from googleapiclient.errors import HttpError

_TIME_PATTERN = re.compile(r"^(\d{1,2})(?::(\d{2}))?\s*(am|pm)?$", re.IGNORECASE)
_DURATION_PATTERN = re.compile(
    r"^(?:(?P<hours>\d+)\s*h)?\s*(?:(?P<minutes>\d+)\s*m(?:in)?)?$",
    re.IGNORECASE,
)
_MAX_DURATION = timedelta(hours=24)


def parse_event_date(value: str) -> date:
    """Aceita DD/MM/YYYY (formato do placeholder) ou ISO YYYY-MM-DD."""
    text = value.strip()
    for fmt in ("%d/%m/%Y", "%Y-%m-%d"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError("invalid_event_date")


def parse_event_time(value: str) -> time:
    """Aceita 12:30pm, 9pm, 09:15 e 14:00."""
    match = _TIME_PATTERN.match(value.strip())
    if match is None:
        raise ValueError("invalid_event_time")
    hour = int(match.group(1))
    minute = int(match.group(2) or 0)
    meridiem = (match.group(3) or "").lower()

    if meridiem:
        if not 1 <= hour <= 12:
            raise ValueError("invalid_event_time")
        hour = hour % 12 + (12 if meridiem == "pm" else 0)
    elif match.group(2) is None:
        # "14" sozinho e ambiguo
        raise ValueError("invalid_event_time")

    if hour > 23 or minute > 59:
        raise ValueError("invalid_event_time")
    return time(hour=hour, minute=minute)


def parse_event_duration(value: str) -> timedelta:
    """Aceita 1h30m, 2h, 45m e 45min (ate 24h)."""
    text = value.strip()
    match = _DURATION_PATTERN.match(text)
    if not text or match is None:
        raise ValueError("invalid_event_duration")
    hours = int(match.group("hours") or 0)
    minutes = int(match.group("minutes") or 0)
    duration = timedelta(hours=hours, minutes=minutes)
    if duration <= timedelta(0) or duration > _MAX_DURATION:
        raise ValueError("invalid_event_duration")
    return duration


def build_event_window(
    date_text: str,
    time_text: str,
    duration_text: str,
    zone: ZoneInfo,
) -> tuple[datetime, datetime]:
    """Combina os tres campos em (inicio, fim) no timezone do calendario."""
    start = datetime.combine(parse_event_date(date_text), parse_event_time(time_text), tzinfo=zone)
    return start, start + parse_event_duration(duration_text)


def map_created_event(payload: dict[str, Any], zone: ZoneInfo) -> CreatedEvent:
    html_link = str(payload.get("htmlLink") or "")
    if not html_link:
        # Sem link nao ha o que exibir no canal
        raise ValueError("missing_event_link")
    return CreatedEvent(
        event_id=str(payload.get("id") or ""),
        html_link=html_link,
        start=_extract_event_datetime(payload.get("start"), zone),
        end=_extract_event_datetime(payload.get("end"), zone),
    )


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None


def _extract_event_datetime(value: Any, zone: ZoneInfo) -> datetime:
    if isinstance(value, dict) and isinstance(value.get("dateTime"), str):
        parsed = datetime.fromisoformat(value["dateTime"].replace("Z", "+00:00"))
        return parsed.replace(tzinfo=zone) if parsed.tzinfo is None else parsed.astimezone(zone)
    raise ValueError("missing_event_datetime")
