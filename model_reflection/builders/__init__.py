"""Source builders turning model metadata back into definition text.

- options: Option suffixes shared by all declarations
- properties: Property declarations
- relationships: Relationship declarations, one renderer per kind
- model: Complete model definitions
"""

from __future__ import annotations

from .model import ModelRenderer, SourceStyle, render_model, to_source_text
from .options import Constant, OptionRenderer, Symbol, format_options, format_value, is_set
from .properties import PropertyRenderer, render_property
from .relationships import (
    ManyToManyRenderer,
    ManyToOneRenderer,
    OneToManyRenderer,
    OneToOneRenderer,
    RelationshipRenderer,
    relationship_renderer_for,
    render_relationship,
)

__all__ = [
    "Constant",
    "ManyToManyRenderer",
    "ManyToOneRenderer",
    "ModelRenderer",
    "OneToManyRenderer",
    "OneToOneRenderer",
    "OptionRenderer",
    "PropertyRenderer",
    "RelationshipRenderer",
    "SourceStyle",
    "Symbol",
    "format_options",
    "format_value",
    "is_set",
    "relationship_renderer_for",
    "render_model",
    "render_property",
    "render_relationship",
    "to_source_text",
]
