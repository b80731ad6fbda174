"""Modelos de dominio de interacoes Discord.

Dois conjuntos fechados de variantes:
- InteractionEnvelope: o que chegou (health check, comando novo, formulario)
- Outcome: o que o dispatcher decidiu responder

Nao ha variante "desconhecida": o decoder rejeita qualquer outro tipo antes
de produzir um envelope.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HealthCheck:
    """Probe de conectividade da plataforma (PING)."""


@dataclass(frozen=True, slots=True)
class NewCommandInvocation:
    """Usuario invocou o comando registrado, sem estado anterior."""


@dataclass(frozen=True, slots=True)
class FormSubmission:
    """Usuario enviou o formulario de novo evento."""

    name: str
    description: str
    location: str
    date: str
    time: str
    duration: str


InteractionEnvelope = HealthCheck | NewCommandInvocation | FormSubmission


@dataclass(frozen=True, slots=True)
class Acknowledge:
    """Resposta de liveness ao PING."""


@dataclass(frozen=True, slots=True)
class PresentForm:
    """Instrui a plataforma a abrir o formulario de novo evento."""


@dataclass(frozen=True, slots=True)
class ActionSucceeded:
    """Acao externa concluida; `reference` e exibida ao canal (ex: link)."""

    reference: str


@dataclass(frozen=True, slots=True)
class ActionFailed:
    """Acao externa falhou; usuario recebe mensagem efemera."""


Outcome = Acknowledge | PresentForm | ActionSucceeded | ActionFailed


__all__ = [
    "Acknowledge",
    "ActionFailed",
    "ActionSucceeded",
    "FormSubmission",
    "HealthCheck",
    "InteractionEnvelope",
    "NewCommandInvocation",
    "Outcome",
    "PresentForm",
]
