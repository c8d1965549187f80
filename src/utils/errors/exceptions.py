"""Exceções de domínio para falhas recuperáveis de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class ContentSourceError(InfrastructureError):
    """Falha ao consultar a Delivery API do Kontent.ai."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RecommendationSyncError(InfrastructureError):
    """Falha ao enviar batch para o Recombee."""
