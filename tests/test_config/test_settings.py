"""Testes de carregamento e validação das settings."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import (
    CalendarSettings,
    DiscordSettings,
    get_base_settings,
    get_calendar_settings,
    get_discord_settings,
)

VALID_KEY = "ab" * 32


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_base_settings.cache_clear()
    get_discord_settings.cache_clear()
    get_calendar_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_discord_settings.cache_clear()
    get_calendar_settings.cache_clear()


def test_discord_settings_loaded_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISCORD_PUBLIC_KEY", f"  {VALID_KEY}\n")
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "bot-token")
    monkeypatch.setenv("DISCORD_APPLICATION_ID", "42")
    monkeypatch.setenv("DISCORD_MAX_RETRIES", "5")

    settings = get_discord_settings()

    assert settings.public_key == VALID_KEY
    assert settings.max_retries == 5
    assert settings.validate() == []
    assert settings.validate_registration() == []
    assert settings.commands_endpoint == "https://discord.com/api/v10/applications/42/commands"


def test_discord_settings_validation_errors() -> None:
    assert DiscordSettings().validate() == ["DISCORD_PUBLIC_KEY não configurado"]
    assert len(DiscordSettings(public_key="abc").validate()) == 1
    assert len(DiscordSettings(public_key=VALID_KEY, max_retries=-1).validate()) == 1
    assert len(DiscordSettings(public_key=VALID_KEY).validate_registration()) == 2


def test_commands_endpoint_requires_application_id() -> None:
    with pytest.raises(ValueError):
        _ = DiscordSettings(public_key=VALID_KEY).commands_endpoint


def test_base_settings_environment_aliases(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_base_settings()

    assert settings.environment == "production"
    assert settings.is_strict is True
    assert settings.log_level == "DEBUG"


def test_base_settings_default_is_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    settings = get_base_settings()

    assert settings.environment == "development"
    assert settings.is_strict is False
    assert settings.service_name == "gitevents"


def test_calendar_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CALENDAR_ENABLED", "true")
    monkeypatch.setenv("GOOGLE_CALENDAR_ID", "events@group.calendar.google.com")
    monkeypatch.setenv("GOOGLE_SERVICE_ACCOUNT_JSON", "   ")
    monkeypatch.setenv("CALENDAR_TIMEZONE", "America/Sao_Paulo")

    settings = get_calendar_settings()

    assert settings.calendar_enabled is True
    assert settings.google_service_account_json is None
    assert settings.calendar_timezone == "America/Sao_Paulo"
    assert settings.validate_enabled() == ["GOOGLE_SERVICE_ACCOUNT_JSON nao configurado"]


def test_disabled_calendar_skips_validation() -> None:
    assert CalendarSettings().validate_enabled() == []
