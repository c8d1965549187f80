"""Serviços de aplicação puros (sem IO)."""

from app.services.content_mapper import clean_html, map_content_item, map_element_value
from app.services.schema_initializer import (
    RECOMBEE_DATATYPES,
    PropertyDeclaration,
    build_property_declarations,
)

__all__ = [
    "RECOMBEE_DATATYPES",
    "PropertyDeclaration",
    "build_property_declarations",
    "clean_html",
    "map_content_item",
    "map_element_value",
]
