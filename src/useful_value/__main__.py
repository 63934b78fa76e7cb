"""Allow ``python -m useful_value`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m useful_value`` behaves identically to the ``useful-value``
console script.
"""

from __future__ import annotations

from useful_value.cli.app import cli

if __name__ == "__main__":
    cli()
