"""Use case de carga inicial do catálogo.

Declara o schema de propriedades a partir do content type e importa
todos os items publicados do tipo no idioma configurado.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols import CatalogSyncProtocol, ContentSourceProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InitializationReport:
    """Resultado da carga inicial."""

    content_type: str
    element_count: int
    imported_items: int


class InitializeCatalogUseCase:
    """Inicializa schema e conteúdo de um content type no catálogo."""

    def __init__(
        self,
        *,
        source_client: ContentSourceProtocol,
        sync_client: CatalogSyncProtocol,
    ) -> None:
        self._source_client = source_client
        self._sync_client = sync_client

    async def execute(self) -> InitializationReport:
        """Executa schema + import completo.

        O schema é declarado antes de qualquer item. Falhas propagam para
        o chamador (CLI), que decide o código de saída.
        """
        content_type = await self._source_client.get_content_type()
        elements = content_type.element_definitions()
        await self._sync_client.init_structure(elements)

        items = await self._source_client.get_all_content_items_of_type()
        await self._sync_client.import_content(items)

        report = InitializationReport(
            content_type=content_type.system.codename,
            element_count=len(elements),
            imported_items=len(items),
        )
        logger.info(
            "catalog_initialized",
            extra={
                "content_type": report.content_type,
                "element_count": report.element_count,
                "imported_items": report.imported_items,
            },
        )
        return report
