"""Serviços de aplicação.

Orquestração sem IO direto; implementações concretas de IO ficam em
app/infra/ e entram via protocolos.
"""

from app.services.interaction_dispatcher import InteractionDispatcher

__all__ = ["InteractionDispatcher"]
