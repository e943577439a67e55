"""Render a complete model definition.

The definition lists, in this order:
- key properties
- foreign key properties (none are detected yet)
- the remaining properties, in declaration order
- relationships grouped as many-to-one, one-to-one, one-to-many, many-to-many

Example output:

    class Profile

      include DataMapper::Resource

      property :id, Serial

      property :nickname, String

      belongs_to :person

    end
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from model_reflection.builders.properties import render_property
from model_reflection.builders.relationships import RelationshipRenderer, relationship_renderer_for
from model_reflection.exceptions import IncompleteModelError
from model_reflection.metadata import RelationshipKind

if TYPE_CHECKING:
    from model_reflection.metadata import ModelMetadata, PropertyMetadata

logger = logging.getLogger(__name__)

RELATIONSHIP_ORDER = (
    RelationshipKind.MANY_TO_ONE,
    RelationshipKind.ONE_TO_ONE,
    RelationshipKind.ONE_TO_MANY,
    RelationshipKind.MANY_TO_MANY,
)


@dataclass(frozen=True)
class SourceStyle:
    """Layout settings for rendered model definitions.

    Args:
        indent: Indentation of every line inside the class body
        resource_marker: Module included to make the class a persistent resource
    """

    indent: str = "  "
    resource_marker: str = "DataMapper::Resource"


class ModelRenderer:
    """Render one model into its declarative definition."""

    model: ModelMetadata
    style: SourceStyle

    def __init__(self, model: ModelMetadata, style: SourceStyle | None = None):
        self.model = model
        self.style = style or SourceStyle()

    @property
    def key_properties(self) -> list[PropertyMetadata]:
        return list(self.model.key)

    @property
    def foreign_key_properties(self) -> list[PropertyMetadata]:
        return []

    @property
    def regular_properties(self) -> list[PropertyMetadata]:
        excluded = {prop.name for prop in self.key_properties + self.foreign_key_properties}
        return [prop for prop in self.model.properties if prop.name not in excluded]

    def relationship_renderers(self) -> list[RelationshipRenderer]:
        """Renderers for all relationships, in relationship order.

        Raises:
            UnsupportedRelationshipError: If any relationship has an unknown kind
        """
        return [relationship_renderer_for(rel) for rel in self.model.relationships.values()]

    def relationships_of(self, kind: RelationshipKind) -> list[RelationshipRenderer]:
        return [renderer for renderer in self.relationship_renderers() if renderer.kind is kind]

    def is_complete(self) -> bool:
        return len(self.key_properties) > 0

    def render(self) -> str:
        """Render the model definition.

        Returns:
            The model definition, ending with a newline

        Raises:
            IncompleteModelError: If the model has no key properties
            UnsupportedRelationshipError: If any relationship has an unknown kind
        """
        if not self.is_complete():
            raise IncompleteModelError(self.model.name)

        logger.debug(f"Rendering model: {self.model.name}")
        indent = self.style.indent

        # Resolve every relationship before emitting anything
        renderers = self.relationship_renderers()
        grouped = [renderer for kind in RELATIONSHIP_ORDER for renderer in renderers if renderer.kind is kind]

        parts = [
            f"class {self.model.name}\n",
            "\n",
            f"{indent}include {self.style.resource_marker}\n",
        ]
        parts.extend(self._declarations(self.key_properties))
        parts.append("\n")
        parts.extend(self._declarations(self.foreign_key_properties))
        parts.extend(self._declarations(self.regular_properties))
        parts.append("\n")
        parts.extend(f"\n{indent}{renderer.render()}" for renderer in grouped)
        parts.append("\n")
        parts.append("\nend\n")

        logger.info(
            f"Rendered {self.model.name}: {len(self.key_properties)} keys, "
            f"{len(self.regular_properties)} properties, {len(grouped)} relationships"
        )
        return "".join(parts)

    def _declarations(self, properties: list[PropertyMetadata]) -> list[str]:
        return [f"\n{self.style.indent}{render_property(prop)}" for prop in properties]


def render_model(model: ModelMetadata, style: SourceStyle | None = None) -> str:
    """Render a model back into its declarative definition."""
    return ModelRenderer(model, style).render()


def to_source_text(model: ModelMetadata) -> str:
    """Render a model with the default style."""
    return render_model(model)
