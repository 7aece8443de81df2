"""Tests for ReporterProtocol conformance of the bundled reporters."""

import pytest

from shapebind.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    PlainTextReporter,
    ReporterProtocol,
)
from shapebind.domain.model.verdict import MissingMethod
from tests.factories import make_report


def _render(reporter: ReporterProtocol) -> str:
    return reporter.report((make_report(), make_report(impl_name="Empty", verdict=MissingMethod(slot="add"))))


@pytest.mark.parametrize(
    "reporter",
    [ConsoleReporter(ConsoleConfig(color=False)), PlainTextReporter()],
    ids=["console", "plain_text"],
)
class TestReporterProtocol:
    """Every reporter returns text naming each subject."""

    def test_returns_str(self, reporter: ReporterProtocol) -> None:
        assert isinstance(_render(reporter), str)

    def test_names_each_subject(self, reporter: ReporterProtocol) -> None:
        output = _render(reporter)
        assert "Adder implementation Counter" in output
        assert "Adder implementation Empty" in output
