"""Protocolos e contratos do core da aplicação."""

from .event_action import EventActionProtocol

__all__ = ["EventActionProtocol"]
