"""Protocolos da fonte de conteúdo (Kontent.ai).

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.content_item import ContentItem, ContentType


class ContentSourceProtocol(Protocol):
    """Contrato mínimo de leitura de conteúdo publicado."""

    async def get_content_type(self) -> ContentType: ...

    async def get_content_for_codename(self, codename: str) -> ContentItem | None: ...

    async def get_all_content_items_of_type(self) -> list[ContentItem]: ...


class ContentSourceFactoryProtocol(Protocol):
    """Cria um cliente de leitura escopado por ambiente, tipo e idioma."""

    def __call__(
        self,
        *,
        environment_id: str,
        content_type: str,
        language: str,
    ) -> ContentSourceProtocol: ...
