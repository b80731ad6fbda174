"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CommandRegistrationError,
    ExternalActionError,
    InfrastructureError,
)

__all__ = [
    "CommandRegistrationError",
    "ExternalActionError",
    "InfrastructureError",
]
