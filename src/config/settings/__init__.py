"""Agregador de settings do gitevents.

Re-exporta as settings de cada domínio para import único.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.calendar import (
    CalendarSettings,
    get_calendar_settings,
)
from config.settings.discord import (
    DISCORD_API_BASE_URL,
    DISCORD_API_VERSION,
    DiscordSettings,
    get_discord_settings,
)

__all__ = [
    "DISCORD_API_BASE_URL",
    "DISCORD_API_VERSION",
    "BaseSettings",
    "CalendarSettings",
    "DiscordSettings",
    "Environment",
    "get_base_settings",
    "get_calendar_settings",
    "get_discord_settings",
]
