"""Use case de sincronização do catálogo a partir de notificações de webhook.

Fluxo por invocação:
1. Mantém apenas notificações de content item
2. Mantém apenas content types e idiomas observados
3. Consolida notificações repetidas do mesmo item (`{id}_{language}`)
4. Processa cada notificação de forma concorrente e aguarda todas

Falhas são isoladas por notificação: uma exceção vira um
NotificationOutcome com status 520 e não afeta as demais.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from app.constants.kontent import NotificationAction, ObjectType
from app.observability import record_latency, record_sync_outcome

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence

    from app.domain.notification import Notification, WebhookPayload
    from app.protocols import CatalogSyncProtocol, ContentSourceFactoryProtocol

logger = logging.getLogger(__name__)

FAILED_STATUS_CODE = 520


class SyncOutcome(StrEnum):
    """Resultado do processamento de uma notificação."""

    SYNCED = "synced"
    DELETED = "deleted"
    SKIPPED = "skipped"
    IGNORED = "ignored"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class NotificationOutcome:
    """Resultado por notificação (registrado em log, não devolvido ao webhook)."""

    item_key: str
    action: str
    outcome: SyncOutcome
    status_code: int = 200
    error: str | None = None


@dataclass(frozen=True, slots=True)
class SyncReport:
    """Resumo de uma invocação do webhook."""

    received: int
    relevant: int
    outcomes: tuple[NotificationOutcome, ...]

    @property
    def failed(self) -> tuple[NotificationOutcome, ...]:
        return tuple(o for o in self.outcomes if o.outcome is SyncOutcome.FAILED)

    def count(self, outcome: SyncOutcome) -> int:
        return sum(1 for o in self.outcomes if o.outcome is outcome)


def filter_notifications(
    notifications: Sequence[Notification],
    types_to_watch: Collection[str],
    languages_to_watch: Collection[str],
) -> list[Notification]:
    """Filtra notificações de content item dos tipos e idiomas observados."""
    return [
        notification
        for notification in notifications
        if notification.object_type == ObjectType.CONTENT_ITEM
        and notification.item.type in types_to_watch
        and notification.item.language in languages_to_watch
    ]


def coalesce_notifications(notifications: Sequence[Notification]) -> list[Notification]:
    """Mantém uma notificação por item (`{id}_{language}`).

    Vence a de `last_modified` mais recente; em empate ou sem timestamp,
    vence a que aparece depois no payload. A ordem relativa das
    vencedoras é preservada.
    """
    winners: dict[str, tuple[int, Notification]] = {}
    for index, notification in enumerate(notifications):
        key = notification.item.recommendation_key
        current = winners.get(key)
        if current is None or not _is_older(notification, current[1]):
            winners[key] = (index, notification)
    return [notification for _, notification in sorted(winners.values(), key=lambda w: w[0])]


def _is_older(candidate: Notification, current: Notification) -> bool:
    candidate_at = candidate.item.last_modified_at
    current_at = current.item.last_modified_at
    if candidate_at is None or current_at is None:
        return False
    return candidate_at < current_at


class SyncNotificationsUseCase:
    """Roteia notificações para upsert/delete no catálogo."""

    def __init__(
        self,
        *,
        sync_client: CatalogSyncProtocol,
        source_client_factory: ContentSourceFactoryProtocol,
    ) -> None:
        self._sync_client = sync_client
        self._source_client_factory = source_client_factory

    async def execute(
        self,
        *,
        payload: WebhookPayload,
        types_to_watch: Collection[str],
        languages_to_watch: Collection[str],
        correlation_id: str = "",
    ) -> SyncReport:
        """Processa todas as notificações relevantes do payload.

        Nunca levanta exceção por falha de uma notificação individual.

        Args:
            payload: Payload do webhook já validado
            types_to_watch: Codenames de content type observados
            languages_to_watch: Codenames de idioma observados
            correlation_id: ID de correlação para rastreamento

        Returns:
            SyncReport com um NotificationOutcome por notificação processada
        """
        started_at = time.perf_counter()
        relevant = filter_notifications(
            payload.notifications, types_to_watch, languages_to_watch
        )
        to_process = coalesce_notifications(relevant)

        outcomes = await asyncio.gather(
            *(self._process_isolated(n, correlation_id) for n in to_process)
        )

        report = SyncReport(
            received=len(payload.notifications),
            relevant=len(relevant),
            outcomes=tuple(outcomes),
        )
        logger.info(
            "notifications_processed",
            extra={
                "correlation_id": correlation_id,
                "received": report.received,
                "relevant": report.relevant,
                "processed": len(report.outcomes),
                "failed": len(report.failed),
            },
        )
        record_latency(
            "notification_router",
            "execute",
            (time.perf_counter() - started_at) * 1000,
            correlation_id,
        )
        return report

    async def _process_isolated(
        self,
        notification: Notification,
        correlation_id: str,
    ) -> NotificationOutcome:
        item = notification.item
        try:
            outcome = NotificationOutcome(
                item_key=item.recommendation_key,
                action=notification.action,
                outcome=await self._process(notification),
            )
        except Exception as exc:
            logger.exception(
                "notification_sync_failed",
                extra={
                    "correlation_id": correlation_id,
                    "item_key": item.recommendation_key,
                    "action": notification.action,
                    "error_type": type(exc).__name__,
                },
            )
            outcome = NotificationOutcome(
                item_key=item.recommendation_key,
                action=notification.action,
                outcome=SyncOutcome.FAILED,
                status_code=FAILED_STATUS_CODE,
                error=str(exc) or type(exc).__name__,
            )

        record_sync_outcome(
            outcome.outcome,
            notification.action,
            item.type,
            item.language,
            correlation_id,
        )
        return outcome

    async def _process(self, notification: Notification) -> SyncOutcome:
        item = notification.item

        if notification.action == NotificationAction.PUBLISHED:
            source_client = self._source_client_factory(
                environment_id=notification.environment_id,
                content_type=item.type,
                language=item.language,
            )
            content_item = await source_client.get_content_for_codename(item.codename)
            if content_item is None:
                # Item removido entre a notificação e a busca
                return SyncOutcome.SKIPPED
            await self._sync_client.import_content([content_item])
            return SyncOutcome.SYNCED

        if notification.action == NotificationAction.UNPUBLISHED:
            await self._sync_client.delete_content([item.recommendation_key])
            return SyncOutcome.DELETED

        return SyncOutcome.IGNORED
