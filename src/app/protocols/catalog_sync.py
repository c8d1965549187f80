"""Protocolo do destino de sincronização (catálogo de recomendações)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from app.domain.content_item import ContentItem, ElementDefinition


class CatalogSyncProtocol(Protocol):
    """Operações em batch sobre o catálogo.

    Cada método resolve para None em caso de sucesso e levanta exceção
    de transporte em caso de falha.
    """

    async def init_structure(self, elements: Iterable[ElementDefinition]) -> None: ...

    async def import_content(self, items: Sequence[ContentItem]) -> None: ...

    async def delete_content(self, ids: Sequence[str]) -> None: ...
