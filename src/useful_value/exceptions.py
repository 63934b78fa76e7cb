"""Custom exception hierarchy for useful-value.

The predicates in :mod:`useful_value.core` are total and never raise.
Everything below is raised by the CLI layer only, and caught exclusively
by its error boundary (:func:`useful_value.cli.app.cli`).

Hierarchy
---------
UsefulValueError
├── InvalidLiteralError
└── EnvironmentError
"""

from __future__ import annotations


class UsefulValueError(Exception):
    """Base exception for all useful-value errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input decoding ---------------------------------------------------------

class InvalidLiteralError(UsefulValueError):
    """Raised in strict mode when an argument is not a JSON literal."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(UsefulValueError):
    """Raised when an optional runtime dependency is not available."""
