"""Pure "useful" / "useless" predicates over primitive values.

Every function in this module is **total** — it accepts any object,
returns a ``bool``, and never raises.  Each ``is_useless_x`` is the exact
negation of its ``is_useful_x`` counterpart; only the useful variants are
declared as :class:`~typing.TypeGuard` so that a static checker narrows
the argument when they return ``True``.

Type rules
----------
* A *string* is an instance of exactly :class:`str`.  Subclasses are
  wrappers, not strings.
* A *number* is an instance of exactly :class:`int` or :class:`float`.
  ``bool`` is a boolean, not a number; ``Decimal``, ``Fraction`` and
  ``complex`` are excluded as well.
"""

from __future__ import annotations

import math
import re
from typing import Final, TypeGuard

from useful_value.core.sentinels import Undefined

MAX_SAFE_INTEGER: Final[int] = 2**53 - 1
"""Largest integer ``n`` such that ``n`` and ``n + 1`` are exact doubles."""

_NUMBER_TYPES: Final = (int, float)

_NUMBER_STRING_RE: Final = re.compile(r"[0-9.]+")
_INT_STRING_RE: Final = re.compile(r"[0-9]+")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _is_str(value: object) -> TypeGuard[str]:
    return type(value) is str


def _is_number(value: object) -> TypeGuard[int | float]:
    return type(value) in _NUMBER_TYPES


def _is_finite(num: int | float) -> bool:
    if isinstance(num, int):
        return True
    return math.isfinite(num)


def _is_safe_integer(num: int | float) -> bool:
    """Return ``True`` for integral values within ``±MAX_SAFE_INTEGER``.

    ``float`` values must have no fractional part; ``nan`` and ``inf``
    fail :meth:`float.is_integer` and are rejected here too.  Comparison
    between ``int`` and ``float`` is exact in Python, so ``2.0**53`` is
    correctly reported as unsafe.
    """
    if isinstance(num, float) and not num.is_integer():
        return False
    return abs(num) <= MAX_SAFE_INTEGER


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

def is_useless_string(value: object) -> bool:
    """Deem useless anything that is not a ``str``, or the empty string.

    ``None``, :data:`~useful_value.core.sentinels.UNDEFINED`, ``bytes``
    and ``str`` subclasses are all useless.
    """
    return not _is_str(value) or len(value) == 0


def is_useful_string(value: object) -> TypeGuard[str]:
    """Negation of :func:`is_useless_string`; narrows to ``str``."""
    return _is_str(value) and len(value) > 0


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def is_useless_number(value: object) -> bool:
    """Deem useless anything that is not a finite ``int`` or ``float``.

    Covers non-numbers (including ``bool``), ``nan``, ``inf`` and
    ``-inf``.
    """
    return not _is_number(value) or not _is_finite(value)


def is_useful_number(value: object) -> TypeGuard[int | float]:
    """Negation of :func:`is_useless_number`.

    ``-0.0`` is a useful number.
    """
    return _is_number(value) and _is_finite(value)


def is_useless_int(value: object) -> bool:
    """Deem useless anything that is not a finite, safe integer.

    On top of :func:`is_useless_number` this rejects floats with a
    fractional part and integers whose magnitude exceeds
    :data:`MAX_SAFE_INTEGER`.  Integral floats such as ``42.0`` are
    accepted.
    """
    return (
        not _is_number(value)
        or not _is_finite(value)
        or not _is_safe_integer(value)
    )


def is_useful_int(value: object) -> TypeGuard[int | float]:
    """Negation of :func:`is_useless_int`."""
    return (
        _is_number(value)
        and _is_finite(value)
        and _is_safe_integer(value)
    )


# ---------------------------------------------------------------------------
# Digit strings
# ---------------------------------------------------------------------------

def is_useless_number_string(value: object) -> bool:
    """Deem useless anything but a non-empty string of ASCII digits and dots.

    Numbers are useless here: ``123`` is not a number-string, ``"123"``
    is.  Signs, exponents and whitespace are not allowed.  Dots are not
    counted, so ``"1.2.3"`` and ``"."`` pass.
    """
    return not _is_str(value) or _NUMBER_STRING_RE.fullmatch(value) is None


def is_useful_number_string(value: object) -> TypeGuard[str]:
    """Negation of :func:`is_useless_number_string`; narrows to ``str``."""
    return _is_str(value) and _NUMBER_STRING_RE.fullmatch(value) is not None


def is_useless_int_string(value: object) -> bool:
    """Deem useless anything but a non-empty string of ASCII digits."""
    return not _is_str(value) or _INT_STRING_RE.fullmatch(value) is None


def is_useful_int_string(value: object) -> TypeGuard[str]:
    """Negation of :func:`is_useless_int_string`; narrows to ``str``."""
    return _is_str(value) and _INT_STRING_RE.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Nil
# ---------------------------------------------------------------------------

def is_nil(value: object) -> TypeGuard[None | Undefined]:
    """Return ``True`` for ``None`` and ``UNDEFINED``, ``False`` otherwise.

    Falsy values such as ``0``, ``""`` and ``False`` are not nil.
    """
    return value is None or value is Undefined.UNDEFINED
