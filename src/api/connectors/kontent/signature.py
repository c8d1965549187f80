"""Validação de assinatura HMAC-SHA256 dos webhooks do Kontent.ai.

O Kontent.ai assina o corpo bruto da requisição com o secret do webhook
e envia o digest em base64 no header `x-kontent-ai-signature`. A
assinatura sempre é calculada sobre os bytes recebidos, nunca sobre um
JSON re-serializado.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

from config.settings import SIGNATURE_HEADER_NAME

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da validação de assinatura."""

    valid: bool
    error: str | None = None


def compute_signature(raw_body: bytes, secret: str) -> str:
    """Calcula a assinatura esperada (base64 do HMAC-SHA256)."""
    digest = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def is_valid_signature(
    raw_body: bytes,
    secret: str | None,
    signature: str | None,
) -> bool:
    """Valida assinatura do corpo bruto em tempo constante.

    Secret ausente, assinatura ausente ou divergente retornam False;
    nunca levanta exceção.
    """
    if not secret or not signature:
        return False
    expected = compute_signature(raw_body, secret)
    return hmac.compare_digest(
        expected.encode("ascii"),
        signature.strip().encode("utf-8", errors="replace"),
    )


def verify_kontent_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Valida o header de assinatura de uma requisição de webhook.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (busca case-insensitive)
        secret: Secret do webhook

    Returns:
        SignatureResult com código de erro quando inválida
    """
    if not secret:
        return SignatureResult(valid=False, error="missing_secret")

    signature = _find_header(headers, SIGNATURE_HEADER_NAME)
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    if not is_valid_signature(raw_body, secret, signature):
        return SignatureResult(valid=False, error="invalid_signature")

    return SignatureResult(valid=True)


def _find_header(headers: Mapping[str, str], name: str) -> str | None:
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None
