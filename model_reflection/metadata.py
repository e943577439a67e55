"""Model metadata consumed by the source builders.

These classes describe a model the way an ORM's metadata layer exposes it:
an ordered list of properties, the subset of them forming the key, and the
model's relationships keyed by name. The builders only read attributes, so
any object with the same shape can be rendered as well.

Example:
    person = ModelMetadata(
        name="Person",
        properties=[
            PropertyMetadata(name="id", type=Serial),
            PropertyMetadata(name="name", type=String, options={"required": True}),
        ],
        relationships=[
            RelationshipMetadata(name="profile", kind=RelationshipKind.ONE_TO_ONE, min=1, max=1),
        ],
    )
    print(person.to_source_text())
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from model_reflection.types import is_serial

if TYPE_CHECKING:
    from model_reflection.builders.model import SourceStyle


class RelationshipKind(str, Enum):
    """Cardinality category of a relationship."""

    MANY_TO_ONE = "many_to_one"
    ONE_TO_ONE = "one_to_one"
    ONE_TO_MANY = "one_to_many"
    MANY_TO_MANY = "many_to_many"


class PropertyMetadata(BaseModel):
    """A single model property.

    Args:
        name: Property name
        type: Type marker class (e.g. ``String``) or a qualified type name
        options: Backend options such as ``required``, ``unique`` or ``length``,
            in declaration order
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str
    type: type | str
    options: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_key(self) -> bool:
        return bool(self.options.get("key")) or is_serial(self.type)


class RelationshipMetadata(BaseModel):
    """A relationship between two models.

    ``max`` is ``None`` for an unbounded relationship; ``math.inf`` is
    accepted as well and stored as ``None``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str
    kind: RelationshipKind
    min: int = Field(default=0, ge=0)
    max: int | None = None
    options: dict[str, Any] = Field(default_factory=dict)

    @field_validator("max", mode="before")
    @classmethod
    def _unbounded_max(cls, value: Any) -> Any:
        if isinstance(value, float) and math.isinf(value):
            return None
        return value

    @model_validator(mode="after")
    def _check_bounds(self) -> RelationshipMetadata:
        if self.max is not None and self.max < self.min:
            raise ValueError(f"max ({self.max}) of {self.name!r} is lower than min ({self.min})")
        return self

    @property
    def unbounded(self) -> bool:
        return self.max is None


class ModelMetadata(BaseModel):
    """Metadata of one model: its properties, key and relationships.

    The key is taken from ``key_names`` when given. Otherwise every property
    flagged with the ``key`` option, or typed ``Serial``, is part of the key.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str
    properties: list[PropertyMetadata] = Field(default_factory=list)
    key_names: list[str] | None = None
    relationships: dict[str, RelationshipMetadata] = Field(default_factory=dict)

    @field_validator("relationships", mode="before")
    @classmethod
    def _index_relationships(cls, value: Any) -> Any:
        """Accept a sequence of relationships and key it by relationship name."""
        if isinstance(value, (list, tuple)):
            indexed = {}
            for relationship in value:
                if isinstance(relationship, dict):
                    name = relationship.get("name")
                else:
                    name = getattr(relationship, "name", None)
                if not name:
                    raise ValueError(f"relationship without a name: {relationship!r}")
                indexed[name] = relationship
            return indexed
        return value

    @model_validator(mode="after")
    def _check_property_names(self) -> ModelMetadata:
        names = [prop.name for prop in self.properties]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"{self.name} declares duplicate properties: {', '.join(duplicates)}")

        key_names = self.key_names or []
        repeated = sorted({name for name in key_names if key_names.count(name) > 1})
        if repeated:
            raise ValueError(f"{self.name} repeats key names: {', '.join(repeated)}")

        unknown = [name for name in key_names if name not in names]
        if unknown:
            raise ValueError(f"{self.name} has key names without a property: {', '.join(unknown)}")
        return self

    @property
    def key(self) -> list[PropertyMetadata]:
        """Key properties, in key order."""
        if self.key_names is not None:
            return [self.get_property(name) for name in self.key_names]
        return [prop for prop in self.properties if prop.is_key]

    def get_property(self, name: str) -> PropertyMetadata | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def to_source_text(self, style: SourceStyle | None = None) -> str:
        """Render this model back into its declarative definition.

        Raises:
            IncompleteModelError: If the model has no key properties
            UnsupportedRelationshipError: If a relationship has an unknown kind
        """
        from model_reflection.builders.model import render_model

        return render_model(self, style)
