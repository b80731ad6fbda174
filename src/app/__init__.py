"""App — núcleo do gitevents: domínio, dispatch e infraestrutura.

Subpastas:
- bootstrap/: composition root (logging, validação de settings, wiring)
- domain/: variantes de interação e modelos de evento
- services/: dispatcher de interações
- protocols/: contrato da ação externa
- infra/: Google Calendar e cliente HTTP
- observability/: correlation_id e métricas via logs

Padrão: app decide e executa; api adapta. app nunca importa api.
"""
