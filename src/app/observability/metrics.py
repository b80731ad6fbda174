"""Métricas registradas como logs estruturados.

Agregáveis depois (Cloud Logging, BigQuery) pelo campo `metric_type`.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "interaction_dispatcher")
        operation: Nome da operação (ex: "create_event")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_interaction(
    envelope: str,
    outcome: str,
    correlation_id: str | None = None,
) -> None:
    """Registra contagem de interações por variante e resultado.

    Args:
        envelope: Variante recebida (ex: "FormSubmission")
        outcome: Resultado do dispatch (ex: "ActionFailed")
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_interaction",
        extra={
            "metric_type": "interaction",
            "component": "interaction_dispatcher",
            "envelope": envelope,
            "outcome": outcome,
            "correlation_id": correlation_id,
        },
    )
