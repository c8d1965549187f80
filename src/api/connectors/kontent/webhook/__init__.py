"""Webhook Kontent.ai: assinatura e parsing seguro."""

from ..signature import SignatureResult, verify_kontent_signature
from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)

__all__ = [
    "InvalidJsonError",
    "InvalidSignatureError",
    "SignatureResult",
    "WebhookRequestError",
    "parse_webhook_request",
    "verify_kontent_signature",
]
