"""Core layer — the value classifier.

Rules
-----
* No ``print()`` calls and no logging.
* No filesystem or network I/O.
* No imports from ``cli``.
* Every predicate is total: any input, a ``bool`` out, never an exception.
"""

from useful_value.core.predicates import (
    MAX_SAFE_INTEGER,
    is_nil,
    is_useful_int,
    is_useful_int_string,
    is_useful_number,
    is_useful_number_string,
    is_useful_string,
    is_useless_int,
    is_useless_int_string,
    is_useless_number,
    is_useless_number_string,
    is_useless_string,
)
from useful_value.core.report import CATEGORIES, Classification, classify
from useful_value.core.sentinels import UNDEFINED, Undefined

__all__: list[str] = [
    "CATEGORIES",
    "Classification",
    "MAX_SAFE_INTEGER",
    "UNDEFINED",
    "Undefined",
    "classify",
    "is_nil",
    "is_useful_int",
    "is_useful_int_string",
    "is_useful_number",
    "is_useful_number_string",
    "is_useful_string",
    "is_useless_int",
    "is_useless_int_string",
    "is_useless_number",
    "is_useless_number_string",
    "is_useless_string",
]
