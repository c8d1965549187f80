"""Notificação de webhook do Kontent.ai (formato de entrega atual).

Cada notificação traz `message` (o que aconteceu) e `data.system`
(metadados do objeto afetado). Campos desconhecidos são ignorados.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

_FRACTION_REGEX = re.compile(r"\.(\d{6})\d+")


def parse_timestamp(value: str | None) -> datetime | None:
    """Converte timestamp ISO do Kontent.ai em datetime com timezone.

    A API pode enviar frações com 7 dígitos; o excedente é truncado.
    Valores inválidos retornam None.
    """
    if not value:
        return None
    normalized = _FRACTION_REGEX.sub(r".\1", value.strip())
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _none_to_empty(value: Any) -> Any:
    """Campos string nulos no payload viram string vazia."""
    return "" if value is None else value


# Outros tipos de objeto (asset, taxonomy) podem vir com campos nulos
NullableStr = Annotated[str, BeforeValidator(_none_to_empty)]


class NotificationItem(BaseModel):
    """Metadados do objeto notificado (data.system)."""

    model_config = ConfigDict(extra="ignore")

    id: NullableStr = ""
    name: NullableStr = ""
    codename: NullableStr = ""
    type: NullableStr = ""
    language: NullableStr = ""
    collection: NullableStr = ""
    last_modified: str | None = None
    workflow: str | None = None
    workflow_step: str | None = None

    @property
    def recommendation_key(self) -> str:
        """Chave do item no Recombee: `{id}_{language}`."""
        return f"{self.id}_{self.language}"

    @property
    def last_modified_at(self) -> datetime | None:
        return parse_timestamp(self.last_modified)


class NotificationMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    environment_id: NullableStr = ""
    object_type: NullableStr = ""
    action: NullableStr = ""
    delivery_slot: str | None = None


class NotificationData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    system: NotificationItem = Field(default_factory=NotificationItem)

    @field_validator("system", mode="before")
    @classmethod
    def _null_system(cls, value: Any) -> Any:
        return {} if value is None else value


class Notification(BaseModel):
    """Uma notificação do webhook (efêmera, consumida uma única vez)."""

    model_config = ConfigDict(extra="ignore")

    message: NotificationMessage
    data: NotificationData = Field(default_factory=NotificationData)

    @field_validator("data", mode="before")
    @classmethod
    def _null_data(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def action(self) -> str:
        return self.message.action

    @property
    def object_type(self) -> str:
        return self.message.object_type

    @property
    def environment_id(self) -> str:
        return self.message.environment_id

    @property
    def item(self) -> NotificationItem:
        return self.data.system


class WebhookPayload(BaseModel):
    """Corpo do webhook: lista ordenada de notificações."""

    model_config = ConfigDict(extra="ignore")

    notifications: list[Notification]
