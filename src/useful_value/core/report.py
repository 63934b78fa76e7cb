"""Aggregate classification of a single value across every category.

:func:`classify` is the only consumer-facing entry point.  It runs each
useful-predicate exactly once and freezes the verdicts into a
:class:`Classification` value object.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from useful_value.core.predicates import (
    is_nil,
    is_useful_int,
    is_useful_int_string,
    is_useful_number,
    is_useful_number_string,
    is_useful_string,
)

CATEGORIES: Final[tuple[str, ...]] = (
    "string",
    "number",
    "int",
    "number_string",
    "int_string",
    "nil",
)
"""Category names, in presentation order."""

_CHECKS: Final[dict[str, Callable[[object], bool]]] = {
    "string": is_useful_string,
    "number": is_useful_number,
    "int": is_useful_int,
    "number_string": is_useful_number_string,
    "int_string": is_useful_int_string,
    "nil": is_nil,
}


@dataclass(frozen=True, slots=True)
class Classification:
    """Per-category verdicts for one input value."""

    value: object
    """The classified value, as given."""

    string: bool
    number: bool
    int: bool
    number_string: bool
    int_string: bool
    nil: bool

    def verdicts(self) -> dict[str, bool]:
        """Return ``{category: verdict}`` in :data:`CATEGORIES` order."""
        return {name: getattr(self, name) for name in CATEGORIES}

    def useful_categories(self) -> tuple[str, ...]:
        """Return the categories whose verdict is ``True``."""
        return tuple(name for name in CATEGORIES if getattr(self, name))


def classify(value: object) -> Classification:
    """Classify *value* against every category.

    Never raises; unusual inputs simply come back with every verdict
    ``False``.
    """
    verdicts = {name: check(value) for name, check in _CHECKS.items()}
    return Classification(value=value, **verdicts)
