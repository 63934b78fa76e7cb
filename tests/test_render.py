"""Tests for the classification table (cli/render.py).

No Rich rendering snapshots — we check the table shape and the pure
presentation helpers.
"""

from __future__ import annotations

import io

import pytest

from useful_value.cli import exit_codes
from useful_value.cli.app import main
from useful_value.cli.render import (
    USEFUL_MARK,
    USELESS_MARK,
    build_report_table,
    format_value,
    format_verdict,
)
from useful_value.core.report import CATEGORIES, classify
from useful_value.core.sentinels import UNDEFINED


class TestPresentationHelpers:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("42", "'42' (str)"),
            (42, "42 (int)"),
            (None, "None (NoneType)"),
            (UNDEFINED, "UNDEFINED (Undefined)"),
        ],
    )
    def test_format_value(self, value: object, expected: str) -> None:
        assert format_value(value) == expected

    def test_useful_verdict(self) -> None:
        assert USEFUL_MARK in format_verdict(True)

    def test_useless_verdict(self) -> None:
        assert USELESS_MARK in format_verdict(False)


class TestReportTable:
    def test_one_column_per_category_plus_value(self) -> None:
        table = build_report_table([classify(1)])
        assert len(table.columns) == len(CATEGORIES) + 1

    def test_one_row_per_report(self) -> None:
        table = build_report_table([classify(1), classify("a"), classify(None)])
        assert table.row_count == 3

    def test_empty_table(self) -> None:
        assert build_report_table([]).row_count == 0


class TestPrintedOutput:
    def test_table_goes_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["7"])
        assert code == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "Value Classification" in out
        assert USEFUL_MARK in out


class TestValuesAreNotMarkup:
    @pytest.mark.parametrize("text", ["[bold]hi", "[/x]", "[red]x[/red]"])
    def test_brackets_are_shown_verbatim(self, text: str) -> None:
        from rich.console import Console

        out = io.StringIO()
        Console(file=out, width=200).print(build_report_table([classify(text)]))
        assert format_value(text) in out.getvalue()

    def test_unbalanced_closing_tag_renders(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main(["[/x]"])
        assert code == exit_codes.SUCCESS
        assert "[/x]" in capsys.readouterr().out
