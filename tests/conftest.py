"""Shared pytest fixtures and configuration for the useful-value test suite.

Guidelines
----------
* Core tests must be pure — no side effects, no mocking.
* CLI tests call ``main(argv)`` directly instead of spawning a process.
* Rich may be hidden per test via ``sys.modules``; never uninstall it.
"""

from __future__ import annotations

import pytest

from useful_value.core.report import Classification


@pytest.fixture()
def captured_reports(monkeypatch: pytest.MonkeyPatch) -> list[Classification]:
    """Replace table rendering and collect the reports it would have shown."""
    reports: list[Classification] = []

    def _capture(batch: list[Classification]) -> None:
        reports.extend(batch)

    monkeypatch.setattr("useful_value.cli.render.print_report_table", _capture)
    return reports
