"""Mapeamento de content items para itens do Recombee.

Função pura: ContentItem -> dict plano de propriedades. O mesmo item
mapeado duas vezes produz exatamente o mesmo resultado.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from app.constants.kontent import ElementKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.content_item import ContentItem

RecommendationItem = dict[str, Any]

_TAG_REGEX = re.compile(r"<[^>]*>?", re.MULTILINE)
_CHAR_REF_REGEX = re.compile(r"&#([0-9]{1,3});")
_SPACES_REGEX = re.compile(r" {2,}")

# Propriedades de sistema sempre presentes em todo item
SYSTEM_CODENAME = "system_codename"
SYSTEM_LANGUAGE = "system_language"
SYSTEM_LAST_MODIFIED = "system_last_modified"
SYSTEM_TYPE = "system_type"
SYSTEM_COLLECTION = "system_collection"


def clean_html(value: str) -> str:
    """Converte rich text em texto plano.

    Ordem: troca tags por espaço, decodifica `&#NNN;`, troca `&nbsp;` e
    quebras de linha por espaço e, por fim, colapsa espaços repetidos.

    Exemplo:
        clean_html("A&#65;B<b>bold</b>&nbsp;end\\n2") == "AAB bold end 2"
    """
    text = _TAG_REGEX.sub(" ", value)
    text = _CHAR_REF_REGEX.sub(lambda match: chr(int(match.group(1))), text)
    text = text.replace("&nbsp;", " ")
    text = text.replace("\n", " ")
    return _SPACES_REGEX.sub(" ", text).strip()


def _rich_text(value: Any) -> str:
    return clean_html(value or "")


def _linked_item_codenames(value: Any) -> list[str]:
    return [str(codename) for codename in value or []]


def _taxonomy_codenames(value: Any) -> list[str]:
    return [term["codename"] for term in value or []]


def _asset_urls(value: Any) -> list[str]:
    return [asset["url"] for asset in value or []]


_ELEMENT_TRANSFORMS: dict[str, Callable[[Any], Any]] = {
    ElementKind.RICH_TEXT: _rich_text,
    ElementKind.MODULAR_CONTENT: _linked_item_codenames,
    ElementKind.TAXONOMY: _taxonomy_codenames,
    ElementKind.ASSET: _asset_urls,
}


def map_element_value(kind: str, value: Any) -> Any:
    """Transforma o valor bruto de um elemento conforme o tipo.

    Tipos sem transformação (text, number, date_time, url_slug,
    multiple_choice, custom e tipos desconhecidos) passam inalterados.
    """
    transform = _ELEMENT_TRANSFORMS.get(kind)
    if transform is None:
        return value
    return transform(value)


def map_content_item(item: ContentItem) -> RecommendationItem:
    """Gera o item plano do Recombee a partir de um content item.

    Args:
        item: Content item completo da Delivery API

    Returns:
        Dict com as 5 propriedades de sistema + 1 entrada por elemento
    """
    system = item.system
    properties: RecommendationItem = {
        SYSTEM_CODENAME: system.codename,
        SYSTEM_LANGUAGE: system.language,
        SYSTEM_LAST_MODIFIED: system.last_modified,
        SYSTEM_TYPE: system.type,
        SYSTEM_COLLECTION: system.collection,
    }
    for codename, element in item.elements.items():
        properties[codename] = map_element_value(element.type, element.value)
    return properties
