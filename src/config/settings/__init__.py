"""Agregador de settings do serviço de sincronização.

Re-exporta todas as settings e funções de cada módulo.
Organização por integração para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Content source
from config.settings.kontent import (
    DELIVERY_API_BASE_URL,
    SIGNATURE_HEADER_NAME,
    KontentSettings,
    get_kontent_settings,
)

# Recommendation engine
from config.settings.recombee import (
    VALID_REGIONS,
    RecombeeSettings,
    get_recombee_settings,
)

__all__ = [
    # Constants
    "DELIVERY_API_BASE_URL",
    "SIGNATURE_HEADER_NAME",
    "VALID_REGIONS",
    # Base
    "BaseSettings",
    "Environment",
    # Integrations
    "KontentSettings",
    "RecombeeSettings",
    "get_base_settings",
    "get_kontent_settings",
    "get_recombee_settings",
]
