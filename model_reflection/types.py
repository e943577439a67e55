"""Property type markers used by model metadata.

Property types are plain marker classes. Only their names matter when a
model is rendered, so a property may also carry a qualified type name as
a string (e.g. ``"DataMapper::Types::Serial"``).

Example:
    PropertyMetadata(name="id", type=Serial)
    PropertyMetadata(name="name", type=String, options={"length": 200})
"""

from __future__ import annotations

import re
from typing import Any, ClassVar

RE_NAMESPACE_SEPARATOR = re.compile(r"::|\.")


class PropertyType:
    """Base class for property type markers."""

    type_name: ClassVar[str] = "PropertyType"
    primitive: ClassVar[type | None] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Each marker is known by its own class name, not its parent's
        cls.type_name = cls.__name__

    @classmethod
    def get_type_name(cls) -> str:
        """Get the unqualified name used in a property declaration."""
        return cls.type_name


class String(PropertyType):
    primitive = str


class Text(String):
    pass


class Integer(PropertyType):
    primitive = int


class Serial(Integer):
    """Auto-incrementing integer key."""

    pass


class Float(PropertyType):
    primitive = float


class Decimal(PropertyType):
    pass


class Boolean(PropertyType):
    primitive = bool


class Date(PropertyType):
    pass


class DateTime(PropertyType):
    pass


class Time(PropertyType):
    pass


class Resource:
    """Marker for the anonymous join resource of a many-to-many relationship."""

    pass


def simple_name(ref: Any) -> str:
    """Reduce a type reference to its unqualified name.

    Args:
        ref: A class, or a name qualified with ``::`` or ``.``

    Returns:
        The last segment of the name (``"DataMapper::Types::Serial"`` -> ``"Serial"``)
    """
    if isinstance(ref, type):
        return ref.__name__
    return RE_NAMESPACE_SEPARATOR.split(str(ref))[-1]


def is_serial(ref: Any) -> bool:
    """Check whether a property type is the Serial marker."""
    if isinstance(ref, type):
        return issubclass(ref, Serial)
    return simple_name(ref) == Serial.type_name
