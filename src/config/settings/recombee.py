"""Settings específicas do Recombee.

Credenciais do banco de recomendações e roteamento de região.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

VALID_REGIONS = frozenset({"ap-se", "ca-east", "eu-west", "us-west"})


@dataclass(frozen=True)
class RecombeeSettings:
    """Configurações do Recombee.

    Attributes:
        database: ID do banco no Recombee (RECOMBEE_API_ID)
        key: Private token do banco (RECOMBEE_API_KEY)
        region: Região do cluster (ex: eu-west). Opcional.
        base_uri: URI base customizada. Usada apenas sem região.
    """

    database: str = ""
    key: str = ""
    region: str | None = None
    base_uri: str | None = None

    @property
    def is_configured(self) -> bool:
        """Retorna True se há credenciais mínimas para sincronizar."""
        return bool(self.key)

    def validate(self) -> list[str]:
        """Valida configurações do Recombee.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.database:
            errors.append("RECOMBEE_API_ID não configurado")

        if not self.key:
            errors.append("RECOMBEE_API_KEY não configurado")

        if self.region and self.region not in VALID_REGIONS:
            errors.append(f"RECOMBEE_REGION inválida: {self.region}")

        return errors


def _load_from_env() -> RecombeeSettings:
    """Carrega RecombeeSettings de variáveis de ambiente."""
    region = os.getenv("RECOMBEE_REGION", "").strip().lower()
    base_uri = os.getenv("RECOMBEE_BASE_URI", "").strip()
    return RecombeeSettings(
        database=os.getenv("RECOMBEE_API_ID", ""),
        key=os.getenv("RECOMBEE_API_KEY", ""),
        region=region or None,
        base_uri=base_uri or None,
    )


@lru_cache(maxsize=1)
def get_recombee_settings() -> RecombeeSettings:
    """Retorna instância cacheada de RecombeeSettings."""
    return _load_from_env()
