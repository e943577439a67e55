"""Exceptions raised while reflecting a model back into source text.

This module provides the exception classes raised by the source builders.
Rendering is all-or-nothing: when one of these is raised no partial text
is returned.
"""

from __future__ import annotations

from typing import Any


class ReflectionError(Exception):
    """Base class for errors raised by the source builders."""

    pass


class IncompleteModelError(ReflectionError, ValueError):
    """Raised when a model without any key property is rendered.

    A model needs at least one key property to be a valid resource
    definition. The model definition itself has to be fixed; retrying
    will not help.

    Example:
        try:
            render_model(keyless_model)
        except IncompleteModelError as err:
            print(f"{err.model_name} has no key")
    """

    def __init__(self, model_name: str):
        self.model_name = model_name
        super().__init__(f"{model_name} has no key properties")


class UnsupportedRelationshipError(ReflectionError, ValueError):
    """Raised when a relationship carries an unknown kind tag.

    Only many-to-one, one-to-one, one-to-many and many-to-many
    relationships can be rendered. Anything else means the metadata
    layer handed over a relationship it should not have.
    """

    def __init__(self, kind: Any, relationship_name: str | None = None):
        self.kind = kind
        self.relationship_name = relationship_name
        where = f" on {relationship_name!r}" if relationship_name else ""
        super().__init__(f"{kind!r}{where} is no valid relationship kind")
