"""Logging estruturado (JSON) do gitevents.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="gitevents")
    logger = get_logger(__name__)
    logger.info("discord_interaction_dispatched", extra={"interaction_type": 2})

Todo record sai com correlation_id, service, level, logger, message e asctime.
Nunca logar corpo de request, assinaturas ou tokens.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
