"""Decode command-line arguments into Python values for classification.

Arguments are read as JSON literals so that ``42``, ``4.2``, ``NaN``,
``true``, ``null`` and ``"42"`` reach the classifier with the type a
caller would expect.  The bare word ``undefined`` maps to
:data:`~useful_value.core.sentinels.UNDEFINED`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from useful_value.core.sentinels import UNDEFINED
from useful_value.exceptions import InvalidLiteralError

logger = logging.getLogger(__name__)

UNDEFINED_LITERAL: str = "undefined"


def decode_literal(text: str, *, strict: bool = False) -> object:
    """Decode a single argument.

    Parameters
    ----------
    text:
        Raw argument as received from the shell.
    strict:
        When ``True``, text that is not a JSON literal raises
        :class:`InvalidLiteralError` instead of being kept as a string.
        This includes JSON the decoder refuses to build, such as integers
        over the interpreter's digit limit or arrays nested too deeply.

    Returns
    -------
    object
        The decoded value, ``UNDEFINED`` for ``undefined``, or *text*
        itself when it is not valid JSON and *strict* is off.
    """
    if text == UNDEFINED_LITERAL:
        logger.debug("%r -> UNDEFINED", text)
        return UNDEFINED

    try:
        value = json.loads(text)
    except (ValueError, RecursionError) as exc:
        if strict:
            raise InvalidLiteralError(
                f"Not a JSON literal: {text!r}",
                hint="Quote strings as JSON (e.g. '\"abc\"') or pass --raw.",
            ) from exc
        logger.debug("%r is not JSON (%s), keeping it as a string", text, exc)
        return text

    logger.debug("%r -> %s %r", text, type(value).__name__, value)
    return value


def decode_literals(
    args: Sequence[str],
    *,
    raw: bool = False,
    strict: bool = False,
) -> list[object]:
    """Decode every argument, or pass them through untouched when *raw*."""
    if raw:
        logger.debug("raw mode: %d argument(s) kept as strings", len(args))
        return list(args)
    return [decode_literal(text, strict=strict) for text in args]
