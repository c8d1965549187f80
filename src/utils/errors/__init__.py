"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ContentSourceError,
    InfrastructureError,
    RecommendationSyncError,
)

__all__ = [
    "ContentSourceError",
    "InfrastructureError",
    "RecommendationSyncError",
]
