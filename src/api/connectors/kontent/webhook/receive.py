"""Parse e validação inicial do webhook do Kontent.ai."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import ValidationError

from api.connectors.kontent.signature import SignatureResult, verify_kontent_signature
from app.domain.notification import WebhookPayload

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida do webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido ou fora do formato esperado no payload do webhook."""


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> tuple[WebhookPayload, SignatureResult]:
    """Valida assinatura e parseia o payload de notificações.

    A assinatura é verificada antes de qualquer parse do corpo.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: Secret do webhook

    Raises:
        InvalidSignatureError: Se assinatura for inválida
        InvalidJsonError: Se o JSON estiver inválido ou fora do schema

    Returns:
        (WebhookPayload, SignatureResult)
    """
    signature_result = verify_kontent_signature(raw_body, headers, secret)
    if not signature_result.valid:
        raise InvalidSignatureError(signature_result.error or "invalid_signature")

    try:
        raw_payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(raw_payload, dict):
        raise InvalidJsonError("payload_not_object")

    try:
        payload = WebhookPayload.model_validate(raw_payload)
    except ValidationError as exc:
        raise InvalidJsonError("payload_schema_invalid") from exc

    return payload, signature_result
