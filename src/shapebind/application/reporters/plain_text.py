"""Plain text reporter.

Stdlib-only reporter for logs and CI output without ANSI codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shapebind.domain.model.report import ConformanceReport


class PlainTextReporter:
    """Plain text reporter: one line per report, detail lines for failures."""

    def report(self, reports: tuple[ConformanceReport, ...]) -> str:
        """Format conformance reports as plain text.

        Args:
            reports: Reports to format.

        Returns:
            Newline-terminated text.
        """
        lines = ["=" * 70, "Conformance Results", "=" * 70]
        for report in reports:
            status = "PASS" if report.passed else "FAIL"
            lines.append(f"[{status}] {report}")
            if not report.passed:
                for key, value in report.verdict.details().items():  # type: ignore[union-attr]
                    lines.append(f"    {key}: {value}")

        failed = sum(1 for r in reports if not r.passed)
        lines.append("=" * 70)
        lines.append(f"Result: {'FAILED' if failed else 'PASSED'} ({failed} of {len(reports)} failed)")
        lines.append("=" * 70)
        return "\n".join(lines) + "\n"
