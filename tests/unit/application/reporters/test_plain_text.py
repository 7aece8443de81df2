"""Tests for PlainTextReporter."""

from shapebind.application.reporters.plain_text import PlainTextReporter
from shapebind.domain.model.verdict import MissingMethod
from tests.factories import make_report


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_all_passed(self) -> None:
        output = PlainTextReporter().report((make_report(),))
        assert "Conformance Results" in output
        assert "[PASS] Adder implementation Counter: compatible" in output
        assert "Result: PASSED (0 of 1 failed)" in output

    def test_failure_details(self) -> None:
        report = make_report(impl_name="Empty", verdict=MissingMethod(slot="add"))
        output = PlainTextReporter().report((make_report(), report))
        assert "[FAIL] Adder implementation Empty: is missing method 'add'" in output
        assert "    kind: MISSING_METHOD" in output
        assert "    slot: add" in output
        assert "Result: FAILED (1 of 2 failed)" in output

    def test_ends_with_newline(self) -> None:
        assert PlainTextReporter().report(()).endswith("\n")
