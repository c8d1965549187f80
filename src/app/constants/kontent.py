"""Enums de domínio para webhooks e elementos do Kontent.ai."""

from __future__ import annotations

from enum import StrEnum


class ObjectType(StrEnum):
    """Tipos de objeto notificados pelo webhook."""

    CONTENT_ITEM = "content_item"
    CONTENT_TYPE = "content_type"
    TAXONOMY = "taxonomy"
    ASSET = "asset"
    LANGUAGE = "language"


class NotificationAction(StrEnum):
    """Ações de notificação relevantes para o catálogo."""

    PUBLISHED = "published"
    UNPUBLISHED = "unpublished"


class ElementKind(StrEnum):
    """Tipos de elemento de content item conhecidos.

    Elementos de tipos fora desta lista continuam aceitos nos modelos
    e seguem o caminho padrão (valor bruto / sem declaração de schema).
    """

    TEXT = "text"
    RICH_TEXT = "rich_text"
    NUMBER = "number"
    DATE_TIME = "date_time"
    ASSET = "asset"
    MODULAR_CONTENT = "modular_content"
    TAXONOMY = "taxonomy"
    URL_SLUG = "url_slug"
    MULTIPLE_CHOICE = "multiple_choice"
    CUSTOM = "custom"
