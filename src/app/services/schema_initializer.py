"""Declaração do schema de propriedades de item no Recombee.

Gera, a partir das definições de elemento do content type, a lista de
propriedades que precisam existir antes de qualquer SetItemValues.
Reexecutar é seguro: propriedades já existentes retornam 409 no batch
e são ignoradas pelo cliente de sync.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from app.constants.kontent import ElementKind
from app.services.content_mapper import (
    SYSTEM_CODENAME,
    SYSTEM_COLLECTION,
    SYSTEM_LANGUAGE,
    SYSTEM_LAST_MODIFIED,
    SYSTEM_TYPE,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.content_item import ElementDefinition

RecombeeDataType = Literal[
    "int", "double", "string", "boolean", "timestamp", "set", "image", "imageList"
]

RECOMBEE_DATATYPES: dict[str, RecombeeDataType] = {
    ElementKind.TEXT: "string",
    ElementKind.RICH_TEXT: "string",
    ElementKind.NUMBER: "int",
    ElementKind.DATE_TIME: "timestamp",
    ElementKind.ASSET: "imageList",
    ElementKind.MODULAR_CONTENT: "set",
    ElementKind.TAXONOMY: "set",
    ElementKind.URL_SLUG: "string",
    ElementKind.MULTIPLE_CHOICE: "set",
    ElementKind.CUSTOM: "string",
}


@dataclass(frozen=True, slots=True)
class PropertyDeclaration:
    """Uma propriedade de item a declarar (AddItemProperty)."""

    name: str
    datatype: RecombeeDataType


SYSTEM_PROPERTIES: tuple[PropertyDeclaration, ...] = (
    PropertyDeclaration(SYSTEM_CODENAME, "string"),
    PropertyDeclaration(SYSTEM_LANGUAGE, "string"),
    PropertyDeclaration(SYSTEM_LAST_MODIFIED, "timestamp"),
    PropertyDeclaration(SYSTEM_COLLECTION, "string"),
    PropertyDeclaration(SYSTEM_TYPE, "string"),
)


def build_property_declarations(
    elements: Iterable[ElementDefinition],
) -> list[PropertyDeclaration]:
    """Monta as declarações de propriedade para um content type.

    Elementos de tipo sem mapeamento (ex: guidelines, snippet) são
    ignorados sem erro.

    Returns:
        Propriedades de sistema seguidas de uma por elemento mapeável
    """
    declarations = list(SYSTEM_PROPERTIES)
    for element in elements:
        datatype = RECOMBEE_DATATYPES.get(element.type)
        if datatype is None:
            continue
        declarations.append(PropertyDeclaration(element.codename, datatype))
    return declarations
