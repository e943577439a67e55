"""Model reflection - render ORM model metadata back into model definitions."""

from model_reflection.builders import (
    Constant,
    ModelRenderer,
    PropertyRenderer,
    SourceStyle,
    Symbol,
    render_model,
    render_property,
    render_relationship,
    to_source_text,
)
from model_reflection.exceptions import IncompleteModelError, ReflectionError, UnsupportedRelationshipError
from model_reflection.metadata import ModelMetadata, PropertyMetadata, RelationshipKind, RelationshipMetadata
from model_reflection.types import (
    Boolean,
    Date,
    DateTime,
    Decimal,
    Float,
    Integer,
    PropertyType,
    Resource,
    Serial,
    String,
    Text,
    Time,
)

__version__ = "0.1.0"

__all__ = [
    # Metadata
    "ModelMetadata",
    "PropertyMetadata",
    "RelationshipMetadata",
    "RelationshipKind",
    # Property types
    "PropertyType",
    "String",
    "Text",
    "Integer",
    "Serial",
    "Float",
    "Decimal",
    "Boolean",
    "Date",
    "DateTime",
    "Time",
    "Resource",
    # Rendering
    "ModelRenderer",
    "PropertyRenderer",
    "SourceStyle",
    "Symbol",
    "Constant",
    "render_model",
    "render_property",
    "render_relationship",
    "to_source_text",
    # Errors
    "ReflectionError",
    "IncompleteModelError",
    "UnsupportedRelationshipError",
]
