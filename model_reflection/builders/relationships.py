"""Render relationship declarations.

Each relationship kind has its own renderer; ``relationship_renderer_for``
picks one from a closed table keyed by ``RelationshipKind``:

- many-to-one:  ``belongs_to :person``
- one-to-one:   ``has 1, :profile``
- one-to-many:  ``has 0..n, :project_tasks``
- many-to-many: ``has 0..n, :tasks, :through => :project_tasks``
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, ClassVar

from model_reflection.builders.options import Constant, OptionRenderer, Symbol, is_set
from model_reflection.exceptions import UnsupportedRelationshipError
from model_reflection.metadata import RelationshipKind

if TYPE_CHECKING:
    from model_reflection.metadata import RelationshipMetadata

logger = logging.getLogger(__name__)


class RelationshipRenderer(OptionRenderer):
    """Render ``<keyword> <cardinality>, :<name><options>``.

    The cardinality is ``min..max``, with ``n`` standing in for an unbounded max.
    """

    kind: ClassVar[RelationshipKind]
    keyword: ClassVar[str] = "has"

    option_priorities = ("through", "constraint")
    # Bounds are rendered as the cardinality, repositories are implied
    irrelevant_options = ("min", "max", "parent_repository_name", "child_repository_name")

    backend: RelationshipMetadata

    @property
    def min(self) -> int:
        return self.backend.min

    @property
    def max(self) -> int | None:
        return self.backend.max

    @property
    def unbounded(self) -> bool:
        return self.max is None or self.max == math.inf

    @property
    def cardinality(self) -> str:
        return f"{self.min}..{'n' if self.unbounded else self.max}"

    def prioritized_options(self) -> list[tuple[str, Any]]:
        prioritized: list[tuple[str, Any]] = []
        through = self.backend_options.get("through")
        if is_set(through):
            # A plain name refers to another relationship, anything else to a model
            value = Constant(through) if isinstance(through, (type, Constant)) else Symbol(through)
            prioritized.append(("through", value))
        constraint = self.backend_options.get("constraint")
        if is_set(constraint):
            prioritized.append(("constraint", Symbol(constraint) if isinstance(constraint, str) else constraint))
        return prioritized

    def render(self) -> str:
        return f"{self.keyword} {self.cardinality}, :{self.name}{self.options()}"


class ManyToOneRenderer(RelationshipRenderer):
    kind = RelationshipKind.MANY_TO_ONE
    keyword = "belongs_to"

    @property
    def cardinality(self) -> str:
        return ""

    def render(self) -> str:
        return f"{self.keyword} :{self.name}{self.options()}"


class OneToOneRenderer(RelationshipRenderer):
    kind = RelationshipKind.ONE_TO_ONE

    @property
    def cardinality(self) -> str:
        if self.min == 1 and self.max == 1:
            return "1"
        return super().cardinality


class OneToManyRenderer(RelationshipRenderer):
    kind = RelationshipKind.ONE_TO_MANY


class ManyToManyRenderer(OneToManyRenderer):
    kind = RelationshipKind.MANY_TO_MANY


RELATIONSHIP_RENDERERS: dict[RelationshipKind, type[RelationshipRenderer]] = {
    renderer.kind: renderer
    for renderer in (ManyToOneRenderer, OneToOneRenderer, OneToManyRenderer, ManyToManyRenderer)
}


def relationship_kind(relationship: RelationshipMetadata) -> RelationshipKind:
    """Get the kind tag of a relationship.

    Raises:
        UnsupportedRelationshipError: If the tag is not a known kind
    """
    kind = getattr(relationship, "kind", None)
    try:
        return RelationshipKind(kind)
    except ValueError as err:
        raise UnsupportedRelationshipError(kind, getattr(relationship, "name", None)) from err


def relationship_renderer_for(relationship: RelationshipMetadata) -> RelationshipRenderer:
    """Pick the renderer for a relationship based on its kind."""
    renderer_cls = RELATIONSHIP_RENDERERS[relationship_kind(relationship)]
    logger.debug(f"Using {renderer_cls.__name__} for relationship: {relationship.name}")
    return renderer_cls(relationship)


def render_relationship(relationship: RelationshipMetadata) -> str:
    """Render a single relationship declaration."""
    return relationship_renderer_for(relationship).render()
