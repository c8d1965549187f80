"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas
posteriormente pelo backend de logs (Netlify, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Sync outcome: counter de resultados por notificação (synced, deleted,
  skipped, ignored, failed)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "notification_router")
        operation: Nome da operação (ex: "execute")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_sync_outcome(
    outcome: str,
    action: str,
    content_type: str,
    language: str,
    correlation_id: str | None = None,
) -> None:
    """Registra o resultado do processamento de uma notificação.

    Args:
        outcome: synced | deleted | skipped | ignored | failed
        action: Ação da notificação (published, unpublished, ...)
        content_type: Codename do content type
        language: Codename do idioma
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_sync_outcome",
        extra={
            "metric_type": "sync_outcome",
            "component": "notification_router",
            "outcome": outcome,
            "action": action,
            "content_type": content_type,
            "language": language,
            "correlation_id": correlation_id,
        },
    )
