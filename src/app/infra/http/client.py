"""Cliente HTTP (httpx) das chamadas administrativas à API do Discord.

Hoje só o registro do comando passa por aqui. Retry limitado em 429, 5xx
de gateway e falhas de transporte:
- 429: espera o `Retry-After` devolvido pela API (rate limit por rota),
  ou `retry_after` do corpo JSON
- demais: backoff exponencial

Uma única conexão (AsyncClient) é reaproveitada entre as tentativas.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)

_RATE_LIMITED = 429
_RETRYABLE_STATUS = frozenset({_RATE_LIMITED, 500, 502, 503, 504})


@dataclass(frozen=True)
class HttpClientConfig:
    """Timeout e política de retry."""

    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 1.0
    backoff_max_seconds: float = 30.0


class HttpError(Exception):
    """Falha HTTP sem dados sensíveis (nunca inclui headers ou token)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class HttpClient:
    """POST JSON com retry; respostas não-retentáveis são devolvidas ao chamador.

    `transport` permite injetar httpx.MockTransport em testes.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Envia o POST.

        Raises:
            HttpError: Tentativas esgotadas (status retentável ou transporte)
        """
        max_retries = self._config.max_retries
        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self._config.timeout_seconds,
        ) as client:
            for attempt in range(max_retries + 1):
                try:
                    response = await client.post(url, json=json, headers=headers)
                except httpx.TransportError as exc:
                    if attempt >= max_retries:
                        raise HttpError("http_transport_error", is_retryable=True) from exc
                    await _sleep(self._backoff_delay(attempt), attempt, "transport_error")
                    continue

                if response.status_code not in _RETRYABLE_STATUS:
                    return response
                if attempt >= max_retries:
                    raise HttpError(
                        "http_retry_exhausted",
                        status_code=response.status_code,
                        is_retryable=True,
                    )
                await _sleep(self._retry_delay(response, attempt), attempt, response.status_code)

        raise HttpError("http_retry_exhausted", is_retryable=True)

    def _retry_delay(self, response: httpx.Response, attempt: int) -> float:
        if response.status_code == _RATE_LIMITED:
            requested = _requested_wait(response)
            if requested is not None:
                return min(requested, self._config.backoff_max_seconds)
        return self._backoff_delay(attempt)

    def _backoff_delay(self, attempt: int) -> float:
        delay = (2**attempt) * self._config.backoff_base_seconds
        return min(delay, self._config.backoff_max_seconds)


def _requested_wait(response: httpx.Response) -> float | None:
    """Segundos pedidos pela API: header `Retry-After` ou `retry_after` do corpo."""
    header = response.headers.get("retry-after")
    if header is not None:
        try:
            return max(float(header), 0.0)
        except ValueError:
            pass
    try:
        body = response.json()
    except ValueError:
        return None
    value = body.get("retry_after") if isinstance(body, dict) else None
    if isinstance(value, int | float) and not isinstance(value, bool):
        return max(float(value), 0.0)
    return None


async def _sleep(seconds: float, attempt: int, reason: int | str) -> None:
    logger.info(
        "http_retry_scheduled",
        extra={"delay_seconds": seconds, "attempt": attempt, "reason": reason},
    )
    await asyncio.sleep(seconds)
