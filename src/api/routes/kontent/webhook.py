"""Endpoint de webhook do Kontent.ai.

Endpoint:
- POST /webhook/kontent?types=article,blog&languages=en,cs

Fluxo:
1. Valida configuração (API key do Recombee, secret do webhook)
2. Valida query params e corpo
3. Valida assinatura HMAC sobre o corpo bruto
4. Sincroniza as notificações e responde 200 "success"

Outros métodos recebem 405 do próprio router, antes de qualquer
validação. Falhas por notificação são isoladas e apenas registradas em
log: o Kontent.ai não suporta reentrega parcial de um batch.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

from api.connectors.kontent.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import get_kontent_settings, get_recombee_settings

if TYPE_CHECKING:
    from app.use_cases.catalog import SyncNotificationsUseCase

logger = logging.getLogger(__name__)

router = APIRouter()

# Lazy-loaded use case (inicializado na primeira requisição válida)
_sync_use_case: SyncNotificationsUseCase | None = None


def _get_sync_use_case() -> SyncNotificationsUseCase:
    """Obtém o roteador de notificações (lazy-loading)."""
    global _sync_use_case
    if _sync_use_case is None:
        from app.bootstrap.dependencies import create_sync_notifications_use_case

        _sync_use_case = create_sync_notifications_use_case(
            recombee_settings=get_recombee_settings(),
            kontent_settings=get_kontent_settings(),
        )
    return _sync_use_case


def _split_param(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _text_response(content: str, status_code: int) -> Response:
    return Response(content=content, media_type="text/plain", status_code=status_code)


@router.post("", response_model=None)
async def receive_webhook(request: Request) -> Response:
    """Recebe notificações do Kontent.ai e sincroniza o catálogo.

    Returns:
        200 "success" (mesmo com falhas isoladas por item), 400 para
        configuração/dados ausentes, 401 para assinatura inválida.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))

    try:
        kontent_settings = get_kontent_settings()
        recombee_settings = get_recombee_settings()
        if not recombee_settings.is_configured or not kontent_settings.webhook_secret:
            logger.error(
                "webhook_missing_configuration",
                extra={
                    "has_recombee_key": recombee_settings.is_configured,
                    "has_webhook_secret": bool(kontent_settings.webhook_secret),
                },
            )
            return _text_response(
                "Missing environment configuration, please check the documentation",
                status.HTTP_400_BAD_REQUEST,
            )

        types_to_watch = _split_param(request.query_params.get("types"))
        languages_to_watch = _split_param(request.query_params.get("languages"))
        raw_body = await request.body()

        if not raw_body or not types_to_watch or not languages_to_watch:
            logger.warning(
                "webhook_missing_data",
                extra={
                    "has_body": bool(raw_body),
                    "has_types": bool(types_to_watch),
                    "has_languages": bool(languages_to_watch),
                },
            )
            return _text_response("Missing Data", status.HTTP_400_BAD_REQUEST)

        try:
            payload, _signature = parse_webhook_request(
                raw_body=raw_body,
                headers=dict(request.headers),
                secret=kontent_settings.webhook_secret,
            )
        except InvalidSignatureError as exc:
            logger.warning("webhook_signature_invalid", extra={"error": str(exc)})
            return _text_response("Unauthorized", status.HTTP_401_UNAUTHORIZED)
        except InvalidJsonError as exc:
            logger.warning("webhook_json_invalid", extra={"error": str(exc)})
            return _text_response("Bad Request", status.HTTP_400_BAD_REQUEST)

        logger.info(
            "webhook_received",
            extra={
                "notification_count": len(payload.notifications),
                "payload_size": len(raw_body),
                "types": types_to_watch,
                "languages": languages_to_watch,
            },
        )

        await _get_sync_use_case().execute(
            payload=payload,
            types_to_watch=frozenset(types_to_watch),
            languages_to_watch=frozenset(languages_to_watch),
            correlation_id=get_correlation_id(),
        )
        return _text_response("success", status.HTTP_200_OK)

    finally:
        reset_correlation_id(token)
