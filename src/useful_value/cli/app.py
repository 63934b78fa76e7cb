"""CLI application entry point for useful-value.

This module is the **sole error boundary** for the application.  It
catches :class:`~useful_value.exceptions.UsefulValueError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering a short
message and returning a well-defined exit code.

No classification logic lives here; verdicts come from
:func:`useful_value.core.report.classify`.
"""

from __future__ import annotations

import argparse
import logging
import sys

from useful_value.cli import exit_codes
from useful_value.cli.console import console
from useful_value.exceptions import UsefulValueError
from useful_value.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="useful-value",
        description=(
            "Classify values as useful or useless strings, numbers, "
            "integers, number-strings and int-strings."
        ),
        epilog=(
            "Values are read as JSON literals: 42, 4.2, NaN, Infinity, "
            "true, null, '\"42\"'.  'undefined' is the uninitialized "
            "sentinel.  Anything else is classified as a string.  Put -- "
            "before values that start with a dash, e.g. -- -Infinity."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Classify every value as the literal string given.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on values that are not JSON literals.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help="Value to classify.",
    )
    return parser


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_classify(values: list[str], *, raw: bool, strict: bool) -> int:
    """Decode, classify and render every value."""
    from useful_value.cli.literals import decode_literals
    from useful_value.cli.render import print_report_table
    from useful_value.core.report import classify

    decoded = decode_literals(values, raw=raw, strict=strict)
    reports = [classify(value) for value in decoded]
    for report in reports:
        logger.debug("%r is useful as: %s", report.value, report.useful_categories())

    print_report_table(reports)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the useful-value CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.debug)

    if not args.values:
        parser.print_help()
        return exit_codes.SUCCESS

    return _handle_classify(args.values, raw=args.raw, strict=args.strict)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except UsefulValueError as exc:
        console.print_labelled("Error:", str(exc), style="bold red")
        if exc.hint:
            console.print_labelled("Hint:", exc.hint, style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print_labelled(
            "Unexpected error.",
            f"Please report this issue.\n  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
