"""Settings específicas do Kontent.ai.

Configurações do webhook (secret HMAC) e da Delivery API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DELIVERY_API_BASE_URL: str = "https://deliver.kontent.ai"
SIGNATURE_HEADER_NAME: str = "x-kontent-ai-signature"


@dataclass(frozen=True)
class KontentSettings:
    """Configurações do Kontent.ai.

    Attributes:
        webhook_secret: Secret para validação HMAC dos webhooks
        delivery_base_url: URL base da Delivery API
        request_timeout_seconds: Timeout para requisições HTTP
        max_retries: Máximo de tentativas em caso de erro transitório
        source_tracking_header: Valor do header X-KC-SOURCE
    """

    webhook_secret: str = ""
    delivery_base_url: str = DELIVERY_API_BASE_URL
    request_timeout_seconds: float = 30.0
    max_retries: int = 3
    source_tracking_header: str = "kontent-recombee-sync;1.0.0"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Kontent.ai.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.webhook_secret:
            errors.append("KONTENT_SECRET não configurado")

        if not self.delivery_base_url.startswith(("http://", "https://")):
            errors.append("KONTENT_DELIVERY_BASE_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("KONTENT_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("KONTENT_MAX_RETRIES deve ser >= 0")

        return errors


def _load_from_env() -> KontentSettings:
    """Carrega KontentSettings a partir de variáveis de ambiente."""
    return KontentSettings(
        webhook_secret=os.getenv("KONTENT_SECRET", ""),
        delivery_base_url=os.getenv(
            "KONTENT_DELIVERY_BASE_URL", DELIVERY_API_BASE_URL
        ).rstrip("/"),
        request_timeout_seconds=float(
            os.getenv("KONTENT_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        max_retries=int(os.getenv("KONTENT_MAX_RETRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_kontent_settings() -> KontentSettings:
    """Retorna instância cacheada de KontentSettings."""
    return _load_from_env()
