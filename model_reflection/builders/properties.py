"""Render property declarations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from model_reflection.builders.options import OptionRenderer, is_set
from model_reflection.types import is_serial, simple_name

if TYPE_CHECKING:
    from model_reflection.metadata import PropertyMetadata

logger = logging.getLogger(__name__)


class PropertyRenderer(OptionRenderer):
    """Render ``property :<name>, <Type><options>``.

    ``key``, ``required``, ``unique`` and ``unique_index`` come first, in that
    order, when set. A key is implicitly required, so ``required`` is left
    out for keys. Serial properties never carry options.
    """

    option_priorities = ("key", "required", "unique", "unique_index")

    backend: PropertyMetadata

    @property
    def type(self) -> str:
        return simple_name(self.backend.type)

    def prioritized_options(self) -> list[tuple[str, Any]]:
        prioritized = []
        for name in self.option_priorities:
            value = self.backend_options.get(name)
            if not is_set(value):
                continue
            if name == "required" and is_set(self.backend_options.get("key")):
                continue
            prioritized.append((name, value))
        return prioritized

    def options(self) -> str:
        if is_serial(self.backend.type):
            return ""
        return super().options()

    def render(self) -> str:
        return f"property :{self.name}, {self.type}{self.options()}"


def render_property(prop: PropertyMetadata) -> str:
    """Render a single property declaration."""
    source = PropertyRenderer(prop).render()
    logger.debug(f"Rendered property: {prop.name}")
    return source
