"""App: orquestração da sincronização Kontent.ai → Recombee.

Subpastas:
- bootstrap/: composition root (logging, validação de settings, factories)
- use_cases/: casos de uso do catálogo (webhook e carga inicial)
- services/: mapeamento de conteúdo e schema de propriedades (puros)
- domain/: modelos de notificação, content item e content type
- protocols/: contratos da fonte de conteúdo e do catálogo
- observability/: correlation_id e métricas via logs estruturados
- constants/: enums do Kontent.ai

Padrão: app executa; api adapta; config configura; utils apoia.
"""
