"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook, health)
- Validação inicial de request (método, query params, assinatura)
- Delegação para connectors/use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/kontent/: webhook de notificações do Kontent.ai
- routes/health/: liveness/readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
