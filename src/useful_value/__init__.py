"""useful-value — classify primitive values as "useful" or "useless".

A flat set of pure, total predicates over strings and numbers, plus a
nil check that recognises both ``None`` and :data:`UNDEFINED`.
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
from useful_value.version import __version__

__all__: list[str] = [
    "CATEGORIES",
    "Classification",
    "MAX_SAFE_INTEGER",
    "UNDEFINED",
    "Undefined",
    "__version__",
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
