"""Payload builders por canal — construção de respostas para APIs externas.

Estrutura:
- discord/: respostas de interação (PONG, MODAL, mensagens) e erros

Builders são funções puras sobre modelos de domínio, sem IO.
"""

__all__: list[str] = []
