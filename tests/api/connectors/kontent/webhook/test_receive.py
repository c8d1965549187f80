"""Testes de parse do webhook Kontent.ai."""

from __future__ import annotations

import json

import pytest

from api.connectors.kontent import compute_signature
from api.connectors.kontent.webhook import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)
from tests.fakes.fake_catalog import build_notification

SECRET = "webhook-secret"


def _signed(body: bytes) -> dict[str, str]:
    return {"x-kontent-ai-signature": compute_signature(body, SECRET)}


def test_parses_signed_payload() -> None:
    body = json.dumps({"notifications": [build_notification(item_id="abc")]}).encode()

    payload, signature = parse_webhook_request(body, _signed(body), SECRET)

    assert signature.valid is True
    assert len(payload.notifications) == 1
    notification = payload.notifications[0]
    assert notification.action == "published"
    assert notification.object_type == "content_item"
    assert notification.item.recommendation_key == "abc_en"


def test_unknown_fields_are_ignored() -> None:
    raw = build_notification()
    raw["message"]["api_name"] = "delivery_production"
    raw["extra"] = {"ignored": True}
    body = json.dumps({"notifications": [raw], "version": 2}).encode()

    payload, _ = parse_webhook_request(body, _signed(body), SECRET)

    assert payload.notifications[0].environment_id == "env-1"


def test_signature_checked_before_parsing() -> None:
    body = b"not json at all"

    with pytest.raises(InvalidSignatureError, match="missing_signature"):
        parse_webhook_request(body, {}, SECRET)


def test_invalid_signature_raises() -> None:
    body = b'{"notifications": []}'
    headers = {"x-kontent-ai-signature": compute_signature(body, "other-secret")}

    with pytest.raises(InvalidSignatureError, match="invalid_signature"):
        parse_webhook_request(body, headers, SECRET)


@pytest.mark.parametrize(
    ("body", "error"),
    [
        (b"{not json", "invalid_json"),
        (b"\xc3\x28", "invalid_json"),
        (b"[1, 2, 3]", "payload_not_object"),
        (b'{"notifications": "nope"}', "payload_schema_invalid"),
        (b'{"notifications": [{"data": {}}]}', "payload_schema_invalid"),
    ],
)
def test_malformed_payload_raises_invalid_json(body: bytes, error: str) -> None:
    with pytest.raises(InvalidJsonError, match=error):
        parse_webhook_request(body, _signed(body), SECRET)


def test_null_fields_in_filtered_notification_do_not_reject_batch() -> None:
    asset = build_notification(object_type="asset", item_id="asset-1")
    asset["data"]["system"]["collection"] = None
    body = json.dumps(
        {"notifications": [asset, build_notification(item_id="X", action="unpublished")]}
    ).encode()

    payload, _ = parse_webhook_request(body, _signed(body), SECRET)

    assert [n.object_type for n in payload.notifications] == ["asset", "content_item"]
    assert payload.notifications[1].item.recommendation_key == "X_en"
