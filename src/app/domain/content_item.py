"""Content items e content types da Delivery API do Kontent.ai.

Modelos buscados sob demanda a cada sincronização e descartados após
o mapeamento; nunca são cacheados.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContentItemSystem(BaseModel):
    """Metadados de sistema de um content item."""

    model_config = ConfigDict(extra="ignore")

    id: str
    codename: str
    name: str = ""
    type: str = ""
    language: str = ""
    collection: str = "default"
    last_modified: str | None = None


class ContentElement(BaseModel):
    """Elemento tipado de um content item.

    `type` é mantido como string para aceitar tipos novos da API; o valor
    bruto depende do tipo (str para text/rich_text, lista de dicts para
    asset/taxonomy/multiple_choice, lista de codenames para
    modular_content, etc.).
    """

    model_config = ConfigDict(extra="allow")

    type: str
    name: str = ""
    value: Any = None


class ContentItem(BaseModel):
    """Content item completo: sistema + elementos por codename."""

    model_config = ConfigDict(extra="ignore")

    system: ContentItemSystem
    elements: dict[str, ContentElement] = Field(default_factory=dict)

    @property
    def recommendation_key(self) -> str:
        """Chave do item no Recombee: `{id}_{language}`."""
        return f"{self.system.id}_{self.system.language}"


class ElementDefinition(BaseModel):
    """Definição de um elemento no content type."""

    model_config = ConfigDict(extra="ignore")

    codename: str
    type: str
    name: str = ""


class ContentTypeSystem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    codename: str
    name: str = ""
    last_modified: str | None = None


class ContentType(BaseModel):
    """Content type com as definições de elemento (chave = codename)."""

    model_config = ConfigDict(extra="ignore")

    system: ContentTypeSystem
    elements: dict[str, dict[str, Any]] = Field(default_factory=dict)

    def element_definitions(self) -> list[ElementDefinition]:
        """Lista as definições de elemento na ordem retornada pela API."""
        return [
            ElementDefinition(
                codename=codename,
                type=str(definition.get("type", "")),
                name=str(definition.get("name", "")),
            )
            for codename, definition in self.elements.items()
        ]
