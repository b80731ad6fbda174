"""Connectors por canal — adapters de borda para APIs externas.

Estrutura:
- discord/: verificação de assinatura, decodificação de interações e
  registro do comando `new_event`
"""

__all__: list[str] = []
