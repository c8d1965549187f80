"""Cliente da Delivery API do Kontent.ai (somente leitura).

Toda chamada aplica o idioma configurado. Sem idioma configurado as
buscas retornam vazio/None sem chamada remota, evitando sincronizar
idiomas não configurados por acidente.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError
from app.domain.content_item import ContentItem, ContentType
from config.settings import DELIVERY_API_BASE_URL
from utils.errors import ContentSourceError

if TYPE_CHECKING:
    import httpx

    from config.settings import KontentSettings

logger = logging.getLogger(__name__)

WAIT_FOR_NEW_CONTENT_HEADER = "X-KC-Wait-For-Loading-New-Content"
SOURCE_TRACKING_HEADER = "X-KC-SOURCE"
CONTINUATION_HEADER = "X-Continuation"


@dataclass(frozen=True)
class KontentConfiguration:
    """Escopo de leitura no Kontent.ai.

    Attributes:
        environment_id: ID do ambiente (projeto) no Kontent.ai
        content_type: Codename do content type sincronizado
        language: Codename do idioma; None desativa as buscas
    """

    environment_id: str
    content_type: str
    language: str | None = None


class KontentDeliveryClient:
    """Passthrough para a Delivery API com filtro de idioma."""

    def __init__(
        self,
        config: KontentConfiguration,
        http_client: HttpClient,
        base_url: str = DELIVERY_API_BASE_URL,
        source_header: str | None = None,
    ) -> None:
        self._config = config
        self._http_client = http_client
        self._base_url = f"{base_url.rstrip('/')}/{config.environment_id}"
        self._headers = {WAIT_FOR_NEW_CONTENT_HEADER: "true"}
        if source_header:
            self._headers[SOURCE_TRACKING_HEADER] = source_header

    @property
    def config(self) -> KontentConfiguration:
        return self._config

    async def get_content_type(self) -> ContentType:
        """Busca o content type configurado com as definições de elemento."""
        response = await self._get(f"/types/{self._config.content_type}")
        data = self._parse_json(response, "content_type")
        return self._validate(ContentType, data, "content_type")

    async def get_content_for_codename(self, codename: str) -> ContentItem | None:
        """Busca um content item pelo codename no idioma configurado.

        Returns:
            ContentItem, ou None se não existir (404) ou sem idioma
        """
        if not self._config.language:
            return None

        response = await self._get(
            f"/items/{codename}",
            params={"language": self._config.language},
            allow_not_found=True,
        )
        if response.status_code == 404:
            logger.info(
                "content_item_not_found",
                extra={"codename": codename, "language": self._config.language},
            )
            return None

        data = self._parse_json(response, "content_item")
        raw_item = data.get("item")
        if not raw_item:
            return None
        return self._validate(ContentItem, raw_item, "content_item")

    async def get_all_content_items_of_type(self) -> list[ContentItem]:
        """Lista todos os items do content type via items-feed (paginado)."""
        if not self._config.language:
            return []

        params = {
            "system.type": self._config.content_type,
            "language": self._config.language,
            "system.language": self._config.language,
        }
        items: list[ContentItem] = []
        continuation: str | None = None
        while True:
            headers = {CONTINUATION_HEADER: continuation} if continuation else None
            response = await self._get("/items-feed", params=params, headers=headers)
            data = self._parse_json(response, "items_feed")
            items.extend(
                self._validate(ContentItem, raw_item, "items_feed")
                for raw_item in data.get("items", [])
            )
            continuation = response.headers.get(CONTINUATION_HEADER)
            if not continuation:
                break

        logger.info(
            "content_items_feed_loaded",
            extra={
                "content_type": self._config.content_type,
                "language": self._config.language,
                "item_count": len(items),
            },
        )
        return items

    async def _get(
        self,
        path: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        allow_not_found: bool = False,
    ) -> httpx.Response:
        try:
            response = await self._http_client.get(
                f"{self._base_url}{path}",
                params=params,
                headers={**self._headers, **(headers or {})},
            )
        except HttpError as exc:
            raise ContentSourceError(str(exc), status_code=exc.status_code) from exc

        if response.status_code == 404 and allow_not_found:
            return response
        if response.status_code >= 400:
            raise ContentSourceError(
                "delivery_api_error", status_code=response.status_code
            )
        return response

    @staticmethod
    def _parse_json(response: httpx.Response, resource: str) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            raise ContentSourceError(f"invalid_json:{resource}") from exc
        if not isinstance(data, dict):
            raise ContentSourceError(f"payload_not_object:{resource}")
        return data

    @staticmethod
    def _validate(model: Any, data: Any, resource: str) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise ContentSourceError(f"invalid_payload:{resource}") from exc


def create_delivery_client(
    config: KontentConfiguration,
    settings: KontentSettings | None = None,
) -> KontentDeliveryClient:
    """Factory para criar cliente da Delivery API com config padrão.

    Args:
        config: Escopo (ambiente, content type, idioma)
        settings: KontentSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_kontent_settings

    kontent = settings or get_kontent_settings()
    http_config = HttpClientConfig(
        timeout_seconds=kontent.request_timeout_seconds,
        max_retries=kontent.max_retries,
    )
    return KontentDeliveryClient(
        config,
        HttpClient(http_config),
        base_url=kontent.delivery_base_url,
        source_header=kontent.source_tracking_header,
    )
