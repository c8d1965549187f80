"""Testes do cliente de sync Recombee com SDK falso."""

from __future__ import annotations

from typing import Any

import pytest
from recombee_api_client.api_client import Region
from recombee_api_client.api_requests import AddItemProperty, DeleteItem, SetItemValues
from recombee_api_client.exceptions import APIException

from api.connectors.recombee import client as client_module
from api.connectors.recombee import (
    RecombeeConfiguration,
    RecombeeSyncClient,
    create_recombee_client,
)
from app.domain.content_item import ElementDefinition
from tests.fakes.fake_catalog import build_content_item
from utils.errors import RecommendationSyncError


class FakeRecombeeSdk:
    """Substitui RecombeeClient: registra os batches e devolve resultados fixos."""

    def __init__(self, results: list[dict[str, Any]] | None = None, error: Exception | None = None):
        self.batches: list[Any] = []
        self._results = results
        self._error = error

    def send(self, request: Any) -> Any:
        self.batches.append(request)
        if self._error is not None:
            raise self._error
        if self._results is not None:
            return self._results
        return [{"code": 200, "json": "ok"} for _ in request.requests]


@pytest.mark.asyncio
async def test_init_structure_sends_one_batch_of_property_declarations() -> None:
    sdk = FakeRecombeeSdk()
    elements = [
        ElementDefinition(codename="title", type="text"),
        ElementDefinition(codename="published_at", type="date_time"),
        ElementDefinition(codename="notes", type="guidelines"),
    ]

    await RecombeeSyncClient(sdk).init_structure(elements)

    assert len(sdk.batches) == 1
    requests = sdk.batches[0].requests
    assert all(isinstance(r, AddItemProperty) for r in requests)
    # cinco propriedades de sistema + dois elementos conhecidos
    assert len(requests) == 7


@pytest.mark.asyncio
async def test_init_structure_ignores_existing_properties() -> None:
    sdk = FakeRecombeeSdk(results=[{"code": 409, "json": {"error": "exists"}}] * 5)

    await RecombeeSyncClient(sdk).init_structure([])

    assert len(sdk.batches) == 1


@pytest.mark.asyncio
async def test_import_content_uses_cascade_create_with_composite_key() -> None:
    sdk = FakeRecombeeSdk()
    items = [build_content_item(item_id="a"), build_content_item(item_id="b", language="cs")]

    await RecombeeSyncClient(sdk).import_content(items)

    requests = sdk.batches[0].requests
    assert all(isinstance(r, SetItemValues) for r in requests)
    assert [r.item_id for r in requests] == ["a_en", "b_cs"]
    assert requests[0].values["system_codename"] == "hello_world"
    assert requests[0].cascade_create is True


@pytest.mark.asyncio
async def test_delete_content_ignores_missing_items() -> None:
    sdk = FakeRecombeeSdk(results=[{"code": 404, "json": {"error": "not found"}}])

    await RecombeeSyncClient(sdk).delete_content(["X_en"])

    requests = sdk.batches[0].requests
    assert len(requests) == 1
    assert isinstance(requests[0], DeleteItem)
    assert requests[0].item_id == "X_en"


@pytest.mark.asyncio
async def test_empty_input_makes_no_remote_call() -> None:
    sdk = FakeRecombeeSdk()
    client = RecombeeSyncClient(sdk)

    await client.import_content([])
    await client.delete_content([])

    assert sdk.batches == []


@pytest.mark.asyncio
async def test_rejected_request_raises() -> None:
    sdk = FakeRecombeeSdk(results=[{"code": 400, "json": {"error": "bad value"}}])

    with pytest.raises(RecommendationSyncError, match="import_content"):
        await RecombeeSyncClient(sdk).import_content([build_content_item()])


@pytest.mark.asyncio
async def test_sdk_exception_raises_sync_error() -> None:
    sdk = FakeRecombeeSdk(error=APIException("timeout"))

    with pytest.raises(RecommendationSyncError, match="delete_content"):
        await RecombeeSyncClient(sdk).delete_content(["X_en"])


class TestCreateRecombeeClient:
    def test_region_takes_precedence(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []
        monkeypatch.setattr(
            client_module, "RecombeeClient", lambda *a, **kw: calls.append((a, kw))
        )

        create_recombee_client(
            RecombeeConfiguration(
                database="db", key="secret", region="eu-west", base_uri="https://x"
            )
        )

        assert calls == [(("db", "secret"), {"region": Region.EU_WEST})]

    def test_base_uri_used_without_region(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []
        monkeypatch.setattr(
            client_module, "RecombeeClient", lambda *a, **kw: calls.append((a, kw))
        )

        create_recombee_client(
            RecombeeConfiguration(database="db", key="secret", base_uri="rapi.example.test")
        )

        assert calls == [(("db", "secret"), {"options": {"base_uri": "rapi.example.test"}})]
