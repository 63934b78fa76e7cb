"""The "uninitialized" sentinel.

``None`` already means *absent*.  :data:`UNDEFINED` marks a value that was
never set at all, e.g. a keyword default that must be told apart from an
explicit ``None``.  :func:`~useful_value.core.predicates.is_nil` treats
both the same.
"""

from __future__ import annotations

import enum
from typing import Final, Literal


class Undefined(enum.Enum):
    """Single-member enum so type checkers can spell ``Literal[UNDEFINED]``."""

    UNDEFINED = "UNDEFINED"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> Literal[False]:
        return False


UNDEFINED: Final = Undefined.UNDEFINED
