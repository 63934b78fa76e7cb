"""Stdout/stderr consoles for the CLI, backed by Rich when it is installed.

Rich is never imported at module level so that ``--help`` and
``--version`` keep working without it.  Text that comes from the user
(argument values, exception messages) is always rendered as plain
:class:`rich.text.Text`, never parsed as markup.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from useful_value.exceptions import EnvironmentError

_INSTALL_HINT = "Install with: pip install rich"


def _missing_rich() -> EnvironmentError:
    return EnvironmentError("rich is not installed.", hint=_INSTALL_HINT)


class _ConsoleProxy:
    """Writes to one stream, through Rich when possible.

    Without Rich, :meth:`print` and :meth:`print_labelled` fall back to a
    plain ``print`` on the same stream; :meth:`rich` raises.
    """

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    @property
    def stream(self) -> TextIO:
        return sys.stderr if self._stderr else sys.stdout

    def rich(self) -> Any:
        """Return a fresh ``rich.console.Console`` for this stream."""
        try:
            from rich.console import Console
        except ModuleNotFoundError as exc:
            raise _missing_rich() from exc
        return Console(stderr=self._stderr)

    def print(self, *objects: object) -> None:
        """Print Rich renderables or trusted markup strings."""
        try:
            rich_console = self.rich()
        except EnvironmentError:
            print(*objects, file=self.stream)
            return
        rich_console.print(*objects)

    def print_labelled(self, label: str, text: str, *, style: str) -> None:
        """Print a styled *label* followed by untrusted *text* verbatim."""
        try:
            rich_console = self.rich()
            from rich.text import Text
        except (EnvironmentError, ModuleNotFoundError):
            print(label, text, file=self.stream)
            return
        rich_console.print(Text.assemble((label, style), " ", text))


console = _ConsoleProxy(stderr=True)
"""Diagnostics: errors, hints, interrupts."""

stdout_console = _ConsoleProxy(stderr=False)
"""Results: the classification table."""
