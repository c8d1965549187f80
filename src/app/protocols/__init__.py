"""Protocolos e contratos do core da aplicação."""

from .catalog_sync import CatalogSyncProtocol
from .content_source import ContentSourceFactoryProtocol, ContentSourceProtocol

__all__ = [
    "CatalogSyncProtocol",
    "ContentSourceFactoryProtocol",
    "ContentSourceProtocol",
]
