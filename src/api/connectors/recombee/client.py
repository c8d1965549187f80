"""Cliente de sincronização do catálogo no Recombee.

Envolve o SDK oficial (`recombee-api-client`), que é síncrono: cada
batch roda em uma worker thread via asyncio.to_thread para não bloquear
o event loop enquanto outras notificações são processadas.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from recombee_api_client.api_client import RecombeeClient, Region
from recombee_api_client.api_requests import (
    AddItemProperty,
    Batch,
    DeleteItem,
    SetItemValues,
)
from recombee_api_client.exceptions import APIException

from app.services.content_mapper import map_content_item
from app.services.schema_initializer import build_property_declarations
from utils.errors import RecommendationSyncError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from app.domain.content_item import ContentItem, ElementDefinition
    from config.settings import RecombeeSettings

logger = logging.getLogger(__name__)

# Códigos por request dentro do batch que não indicam falha
_PROPERTY_EXISTS = 409
_ITEM_NOT_FOUND = 404


@dataclass(frozen=True)
class RecombeeConfiguration:
    """Credenciais e roteamento do banco no Recombee."""

    database: str
    key: str
    region: str | None = None
    base_uri: str | None = None


class RecombeeSyncClient:
    """Operações em batch sobre o catálogo de items do Recombee.

    Cada operação gera exatamente uma chamada Batch e termina sem valor
    em caso de sucesso.

    Raises:
        RecommendationSyncError: falha de transporte/API ou request do
            batch rejeitado pelo Recombee
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    async def init_structure(self, elements: Iterable[ElementDefinition]) -> None:
        """Declara as propriedades de item (idempotente)."""
        requests = [
            AddItemProperty(declaration.name, declaration.datatype)
            for declaration in build_property_declarations(elements)
        ]
        await self._send_batch(
            requests,
            operation="init_structure",
            ignored_codes=frozenset({_PROPERTY_EXISTS}),
        )

    async def import_content(self, items: Sequence[ContentItem]) -> None:
        """Cria ou atualiza items (cascade create)."""
        requests = [
            SetItemValues(
                item.recommendation_key,
                map_content_item(item),
                cascade_create=True,
            )
            for item in items
        ]
        if not requests:
            return
        await self._send_batch(requests, operation="import_content")

    async def delete_content(self, ids: Sequence[str]) -> None:
        """Remove items pelas chaves `{id}_{language}`."""
        requests = [DeleteItem(item_id) for item_id in ids]
        if not requests:
            return
        await self._send_batch(
            requests,
            operation="delete_content",
            ignored_codes=frozenset({_ITEM_NOT_FOUND}),
        )

    async def _send_batch(
        self,
        requests: list[Any],
        *,
        operation: str,
        ignored_codes: frozenset[int] = frozenset(),
    ) -> None:
        try:
            results = await asyncio.to_thread(self._client.send, Batch(requests))
        except (APIException, OSError) as exc:
            logger.error(
                "recombee_batch_failed",
                extra={
                    "operation": operation,
                    "request_count": len(requests),
                    "error_type": type(exc).__name__,
                },
            )
            raise RecommendationSyncError(f"recombee_batch_failed:{operation}") from exc

        failed_codes = _failed_codes(results, ignored_codes)
        if failed_codes:
            logger.warning(
                "recombee_batch_partial_failure",
                extra={
                    "operation": operation,
                    "request_count": len(requests),
                    "failed_codes": failed_codes,
                },
            )
            raise RecommendationSyncError(f"recombee_request_rejected:{operation}")

        logger.info(
            "recombee_batch_sent",
            extra={"operation": operation, "request_count": len(requests)},
        )


def _failed_codes(results: Any, ignored_codes: frozenset[int]) -> list[int]:
    if not isinstance(results, list):
        return []
    codes: list[int] = []
    for result in results:
        code = result.get("code", 200) if isinstance(result, dict) else 200
        if code >= 300 and code not in ignored_codes:
            codes.append(code)
    return codes


def create_recombee_client(config: RecombeeConfiguration) -> RecombeeClient:
    """Cria o cliente do SDK respeitando região ou URI base.

    Região tem precedência; sem região, usa `base_uri` quando informado.
    """
    if config.region:
        region = Region[config.region.replace("-", "_").upper()]
        return RecombeeClient(config.database, config.key, region=region)
    options = {"base_uri": config.base_uri} if config.base_uri else {}
    return RecombeeClient(config.database, config.key, options=options)


def create_recombee_sync_client(
    settings: RecombeeSettings | None = None,
) -> RecombeeSyncClient:
    """Factory para criar o cliente de sync a partir das settings."""
    # Import local para evitar dependência circular
    from config.settings import get_recombee_settings

    recombee = settings or get_recombee_settings()
    config = RecombeeConfiguration(
        database=recombee.database,
        key=recombee.key,
        region=recombee.region,
        base_uri=recombee.base_uri,
    )
    return RecombeeSyncClient(create_recombee_client(config))
