"""Contrato da acao externa disparada pelo formulario de novo evento.

O dispatcher depende apenas deste protocolo; o provider concreto e
escolhido no bootstrap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.event import CreatedEvent, EventRequest


@runtime_checkable
class EventActionProtocol(Protocol):
    """Recebe os seis campos do formulario e cria o evento."""

    async def create_event(self, request: EventRequest) -> CreatedEvent:
        """Cria o evento; qualquer falha e sinalizada por excecao."""
        ...
