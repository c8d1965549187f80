"""Factories de dependências para os use cases do catálogo.

Conecta os conectores concretos (Kontent.ai, Recombee) aos protocolos
consumidos pela camada app. As settings são lidas uma única vez aqui e
passadas explicitamente aos componentes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.kontent import KontentConfiguration, create_delivery_client
from api.connectors.recombee import create_recombee_sync_client
from app.use_cases.catalog import InitializeCatalogUseCase, SyncNotificationsUseCase

if TYPE_CHECKING:
    from api.connectors.kontent import KontentDeliveryClient
    from app.protocols import ContentSourceFactoryProtocol
    from config.settings import KontentSettings, RecombeeSettings


def create_source_client_factory(
    settings: KontentSettings | None = None,
) -> ContentSourceFactoryProtocol:
    """Cria factory de clientes da Delivery API escopados por notificação."""

    def _factory(
        *,
        environment_id: str,
        content_type: str,
        language: str,
    ) -> KontentDeliveryClient:
        config = KontentConfiguration(
            environment_id=environment_id,
            content_type=content_type,
            language=language or None,
        )
        return create_delivery_client(config, settings)

    return _factory


def create_sync_notifications_use_case(
    recombee_settings: RecombeeSettings | None = None,
    kontent_settings: KontentSettings | None = None,
) -> SyncNotificationsUseCase:
    """Monta o roteador de notificações com clientes reais."""
    return SyncNotificationsUseCase(
        sync_client=create_recombee_sync_client(recombee_settings),
        source_client_factory=create_source_client_factory(kontent_settings),
    )


def create_initialize_catalog_use_case(
    config: KontentConfiguration,
    recombee_settings: RecombeeSettings | None = None,
    kontent_settings: KontentSettings | None = None,
) -> InitializeCatalogUseCase:
    """Monta o use case de carga inicial para um content type/idioma."""
    return InitializeCatalogUseCase(
        source_client=create_delivery_client(config, kontent_settings),
        sync_client=create_recombee_sync_client(recombee_settings),
    )
