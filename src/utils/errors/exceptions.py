"""Exceções de infraestrutura e integrações externas."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de dependências externas."""


class ExternalActionError(InfrastructureError):
    """Ação externa disparada pelo formulário falhou.

    Nunca chega à borda HTTP: o dispatcher converte em ActionFailed.
    """


class CommandRegistrationError(InfrastructureError):
    """Falha ao registrar o comando na API do Discord."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
