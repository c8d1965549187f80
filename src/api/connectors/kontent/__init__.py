"""Conector Kontent.ai: assinatura de webhook e Delivery API."""

from .delivery_client import (
    KontentConfiguration,
    KontentDeliveryClient,
    create_delivery_client,
)
from .signature import (
    SignatureResult,
    compute_signature,
    is_valid_signature,
    verify_kontent_signature,
)

__all__ = [
    "KontentConfiguration",
    "KontentDeliveryClient",
    "SignatureResult",
    "compute_signature",
    "create_delivery_client",
    "is_valid_signature",
    "verify_kontent_signature",
]
