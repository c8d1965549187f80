"""Conector Recombee: declaração de schema e sync de items em batch."""

from .client import (
    RecombeeConfiguration,
    RecombeeSyncClient,
    create_recombee_client,
    create_recombee_sync_client,
)

__all__ = [
    "RecombeeConfiguration",
    "RecombeeSyncClient",
    "create_recombee_client",
    "create_recombee_sync_client",
]
