"""Option suffixes shared by property and relationship declarations.

A declaration ends with its options, e.g. ``, :required => true, :length => 200``.
Callers pass the options they want first (already filtered and ordered)
and the remaining backend options; ``format_options`` drops the remaining
options that are prioritized or irrelevant and renders the rest in backend
order.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from model_reflection.types import simple_name


class Symbol(str):
    """A name rendered as a symbol literal (``:name``)."""

    __slots__ = ()


class Constant(str):
    """A constant reference rendered bare, reduced to its simple name."""

    __slots__ = ()

    def __new__(cls, ref: Any):
        return super().__new__(cls, simple_name(ref))


def format_value(value: Any) -> str:
    """Render an option value in its literal form.

    Plain string keys of a mapping render as symbols. Ranges must be non-empty
    with step 1, since only inclusive ``a..b`` ranges can be expressed.

    Raises:
        ValueError: If a range is empty or has a step other than 1
    """
    if isinstance(value, Symbol):
        return f":{value}"
    if isinstance(value, Constant):
        return str(value)
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "nil"
    if isinstance(value, type):
        return simple_name(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, range):
        # Inclusive range, e.g. range(1, 51) -> 1..50
        if value.step != 1 or not value:
            raise ValueError(f"only non-empty ranges with step 1 can be rendered, got {value!r}")
        return f"{value.start}..{value[-1]}"
    if isinstance(value, re.Pattern):
        return f"/{value.pattern}/"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    if isinstance(value, Mapping):
        pairs = (
            f"{format_value(Symbol(key) if type(key) is str else key)} => {format_value(item)}"
            for key, item in value.items()
        )
        return "{" + ", ".join(pairs) + "}"
    return str(value)


def is_set(value: Any) -> bool:
    """Check whether an option is set; only ``None`` and ``False`` count as unset."""
    return value is not None and value is not False


def format_options(
    prioritized: Iterable[tuple[str, Any]],
    rest: Mapping[str, Any],
    *,
    priorities: Iterable[str] = (),
    irrelevant: Iterable[str] = (),
) -> str:
    """Render the option suffix of a declaration.

    Args:
        prioritized: Ordered ``(name, value)`` pairs emitted first
        rest: Remaining backend options, emitted in their own order
        priorities: Names handled by ``prioritized``; never taken from ``rest``
        irrelevant: Names never emitted from ``rest``

    Returns:
        ``""`` when there is nothing to render, otherwise ``", "`` followed by
        the ``:name => value`` pairs
    """
    excluded = set(priorities) | set(irrelevant)
    pairs = list(prioritized) + [(name, value) for name, value in rest.items() if name not in excluded]
    if not pairs:
        return ""
    return ", " + ", ".join(f":{name} => {format_value(value)}" for name, value in pairs)


class OptionRenderer:
    """Base class for declarations that end with an option suffix.

    Subclasses set ``option_priorities`` and ``irrelevant_options`` and
    override ``prioritized_options`` to decide which prioritized options are
    emitted and how their values look.
    """

    option_priorities: ClassVar[tuple[str, ...]] = ()
    irrelevant_options: ClassVar[tuple[str, ...]] = ()

    def __init__(self, backend: Any):
        self.backend = backend
        self.backend_options: dict[str, Any] = dict(backend.options)

    @property
    def name(self) -> str:
        return self.backend.name

    def prioritized_options(self) -> list[tuple[str, Any]]:
        return []

    def options(self) -> str:
        return format_options(
            self.prioritized_options(),
            self.backend_options,
            priorities=self.option_priorities,
            irrelevant=self.irrelevant_options,
        )

    def render(self) -> str:
        raise NotImplementedError
