"""Testes do roteador de notificações (SyncNotificationsUseCase)."""

from __future__ import annotations

import pytest

from app.domain.notification import WebhookPayload
from app.use_cases.catalog import (
    FAILED_STATUS_CODE,
    SyncNotificationsUseCase,
    SyncOutcome,
    coalesce_notifications,
    filter_notifications,
)
from tests.fakes.fake_catalog import (
    FakeSourceClient,
    FakeSourceClientFactory,
    FakeSyncClient,
    build_content_item,
    build_notification,
)

TYPES = frozenset({"article"})
LANGUAGES = frozenset({"en"})


def _payload(*notifications: dict) -> WebhookPayload:
    return WebhookPayload.model_validate({"notifications": list(notifications)})


def _use_case(
    source: FakeSourceClient | None = None,
    sync: FakeSyncClient | None = None,
) -> tuple[SyncNotificationsUseCase, FakeSourceClientFactory, FakeSyncClient]:
    factory = FakeSourceClientFactory(source or FakeSourceClient())
    sync_client = sync or FakeSyncClient()
    use_case = SyncNotificationsUseCase(
        sync_client=sync_client,
        source_client_factory=factory,
    )
    return use_case, factory, sync_client


class TestFilterNotifications:
    """Filtro por object_type, content type e idioma."""

    def test_keeps_only_watched_content_items(self) -> None:
        payload = _payload(
            build_notification(item_id="1"),
            build_notification(item_id="2", object_type="taxonomy"),
            build_notification(item_id="3", content_type="blog"),
            build_notification(item_id="4", language="cs"),
        )

        result = filter_notifications(payload.notifications, TYPES, LANGUAGES)

        assert [n.item.id for n in result] == ["1"]


class TestCoalesceNotifications:
    """Consolidação de notificações do mesmo item."""

    def test_latest_last_modified_wins(self) -> None:
        payload = _payload(
            build_notification(action="unpublished", last_modified="2024-05-01T12:00:00Z"),
            build_notification(action="published", last_modified="2024-05-01T10:00:00Z"),
        )

        result = coalesce_notifications(payload.notifications)

        assert [n.action for n in result] == ["unpublished"]

    def test_tie_keeps_later_notification(self) -> None:
        payload = _payload(
            build_notification(action="published", last_modified=None),
            build_notification(action="unpublished", last_modified=None),
        )

        result = coalesce_notifications(payload.notifications)

        assert [n.action for n in result] == ["unpublished"]

    def test_distinct_keys_keep_payload_order(self) -> None:
        payload = _payload(
            build_notification(item_id="b"),
            build_notification(item_id="a"),
            build_notification(item_id="b", language="cs"),
        )

        result = coalesce_notifications(payload.notifications)

        assert [n.item.recommendation_key for n in result] == ["b_en", "a_en", "b_cs"]


class TestSyncNotificationsUseCase:
    """Despacho por ação e isolamento de falhas."""

    @pytest.mark.asyncio
    async def test_non_content_item_notifications_make_no_calls(self) -> None:
        use_case, factory, sync = _use_case()
        payload = _payload(
            build_notification(object_type="taxonomy"),
            build_notification(object_type="asset", action="unpublished"),
        )

        report = await use_case.execute(
            payload=payload, types_to_watch=TYPES, languages_to_watch=LANGUAGES
        )

        assert factory.calls == []
        assert sync.import_calls == []
        assert sync.delete_calls == []
        assert report.received == 2
        assert report.outcomes == ()

    @pytest.mark.asyncio
    async def test_unwatched_type_or_language_make_no_calls(self) -> None:
        use_case, factory, sync = _use_case()
        payload = _payload(
            build_notification(content_type="blog"),
            build_notification(language="de", action="unpublished"),
        )

        await use_case.execute(
            payload=payload, types_to_watch=TYPES, languages_to_watch=LANGUAGES
        )

        assert factory.calls == []
        assert sync.import_calls == []
        assert sync.delete_calls == []

    @pytest.mark.asyncio
    async def test_published_fetches_and_imports(self) -> None:
        item = build_content_item()
        use_case, factory, sync = _use_case(FakeSourceClient(items={"hello_world": item}))

        report = await use_case.execute(
            payload=_payload(build_notification()),
            types_to_watch=TYPES,
            languages_to_watch=LANGUAGES,
        )

        assert factory.calls == [
            {"environment_id": "env-1", "content_type": "article", "language": "en"}
        ]
        assert sync.import_calls == [[item]]
        assert report.count(SyncOutcome.SYNCED) == 1

    @pytest.mark.asyncio
    async def test_published_not_found_is_skipped_without_import(self) -> None:
        use_case, _, sync = _use_case(FakeSourceClient(items={}))

        report = await use_case.execute(
            payload=_payload(build_notification()),
            types_to_watch=TYPES,
            languages_to_watch=LANGUAGES,
        )

        assert sync.import_calls == []
        assert report.outcomes[0].outcome is SyncOutcome.SKIPPED
        assert report.failed == ()

    @pytest.mark.asyncio
    async def test_unpublished_deletes_by_composite_key(self) -> None:
        source = FakeSourceClient()
        use_case, factory, sync = _use_case(source)

        report = await use_case.execute(
            payload=_payload(build_notification(action="unpublished", item_id="X")),
            types_to_watch=TYPES,
            languages_to_watch=LANGUAGES,
        )

        assert sync.delete_calls == [["X_en"]]
        assert factory.calls == []
        assert report.outcomes[0].outcome is SyncOutcome.DELETED

    @pytest.mark.asyncio
    async def test_other_actions_are_ignored(self) -> None:
        use_case, factory, sync = _use_case()

        report = await use_case.execute(
            payload=_payload(build_notification(action="changed")),
            types_to_watch=TYPES,
            languages_to_watch=LANGUAGES,
        )

        assert factory.calls == []
        assert sync.import_calls == []
        assert sync.delete_calls == []
        assert report.outcomes[0].outcome is SyncOutcome.IGNORED

    @pytest.mark.asyncio
    async def test_fetch_failure_does_not_affect_sibling(self) -> None:
        ok_item = build_content_item(item_id="ok", codename="ok_item")
        source = FakeSourceClient(
            items={"ok_item": ok_item},
            errors={"broken_item": RuntimeError("delivery api down")},
        )
        use_case, _, sync = _use_case(source)

        report = await use_case.execute(
            payload=_payload(
                build_notification(item_id="broken", codename="broken_item"),
                build_notification(item_id="ok", codename="ok_item"),
            ),
            types_to_watch=TYPES,
            languages_to_watch=LANGUAGES,
        )

        assert sync.import_calls == [[ok_item]]
        assert len(report.failed) == 1
        failed = report.failed[0]
        assert failed.item_key == "broken_en"
        assert failed.status_code == FAILED_STATUS_CODE
        assert failed.error == "delivery api down"
        assert report.count(SyncOutcome.SYNCED) == 1

    @pytest.mark.asyncio
    async def test_sync_failure_is_isolated(self) -> None:
        item = build_content_item()
        use_case, _, sync = _use_case(
            FakeSourceClient(items={"hello_world": item}),
            FakeSyncClient(fail_on_delete=True),
        )

        report = await use_case.execute(
            payload=_payload(
                build_notification(action="unpublished", item_id="gone"),
                build_notification(),
            ),
            types_to_watch=TYPES,
            languages_to_watch=LANGUAGES,
        )

        assert sync.import_calls == [[item]]
        assert [o.outcome for o in report.outcomes] == [
            SyncOutcome.FAILED,
            SyncOutcome.SYNCED,
        ]

    @pytest.mark.asyncio
    async def test_duplicate_notifications_for_same_item_are_coalesced(self) -> None:
        item = build_content_item()
        use_case, _, sync = _use_case(FakeSourceClient(items={"hello_world": item}))

        report = await use_case.execute(
            payload=_payload(
                build_notification(action="unpublished", last_modified="2024-05-01T09:00:00Z"),
                build_notification(action="published", last_modified="2024-05-01T11:00:00Z"),
            ),
            types_to_watch=TYPES,
            languages_to_watch=LANGUAGES,
        )

        assert sync.delete_calls == []
        assert sync.import_calls == [[item]]
        assert report.relevant == 2
        assert len(report.outcomes) == 1
