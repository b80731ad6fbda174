"""API — camada de borda do canal Discord.

Responsabilidades:
- Receber interações assinadas (webhook)
- Verificar assinatura Ed25519 e decodificar o corpo
- Construir respostas de interação
- Registrar o slash command (operação administrativa)

Subpastas:
- connectors/: assinatura, decodificação e registro de comando
- payload_builders/: respostas de interação e de erro
- routes/: endpoints HTTP (interações, health)

NÃO PODE conter: regras de dispatch ou chamadas à ação externa.
"""
