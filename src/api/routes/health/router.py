"""Endpoints de health check."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_calendar_settings, get_discord_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class ConfigurationCheck:
    """Resultado da checagem de configuração de um componente."""

    status: Literal["ok", "degraded", "failed"]
    errors: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "errors": self.errors}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="gitevents",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe — pronto quando a chave de verificação está configurada.

    Calendário ausente é `degraded`: o bot responde, mas toda submissão falha.
    """
    discord_errors = get_discord_settings().validate()
    discord_check = ConfigurationCheck(
        status="failed" if discord_errors else "ok",
        errors=discord_errors,
    )

    calendar_settings = get_calendar_settings()
    calendar_errors = calendar_settings.validate_enabled()
    if calendar_errors:
        calendar_check = ConfigurationCheck(status="failed", errors=calendar_errors)
    elif not calendar_settings.calendar_enabled:
        calendar_check = ConfigurationCheck(status="degraded", errors=["not_enabled"])
    else:
        calendar_check = ConfigurationCheck(status="ok")

    ready = discord_check.status == "ok" and calendar_check.status != "failed"
    if not ready:
        logger.warning(
            "readiness_check_failed",
            extra={
                "discord": discord_check.status,
                "calendar": calendar_check.status,
            },
        )

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "discord": discord_check.as_dict(),
            "calendar": calendar_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
