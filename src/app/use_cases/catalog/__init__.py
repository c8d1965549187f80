"""Use cases de sincronização do catálogo de recomendações."""

from .initialize_catalog import InitializationReport, InitializeCatalogUseCase
from .sync_notifications import (
    FAILED_STATUS_CODE,
    NotificationOutcome,
    SyncNotificationsUseCase,
    SyncOutcome,
    SyncReport,
    coalesce_notifications,
    filter_notifications,
)

__all__ = [
    "FAILED_STATUS_CODE",
    "InitializationReport",
    "InitializeCatalogUseCase",
    "NotificationOutcome",
    "SyncNotificationsUseCase",
    "SyncOutcome",
    "SyncReport",
    "coalesce_notifications",
    "filter_notifications",
]
