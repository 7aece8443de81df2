"""Console reporter: ConformanceReport → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from shapebind.domain.model.report import ConformanceReport
    from shapebind.domain.model.verdict import Failure


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_passed: Include passing reports in the listing.
        show_details: Render structured failure detail tables.
        width: Console width in characters.
        color: Emit ANSI color codes.
    """

    show_passed: bool = True
    show_details: bool = True
    width: int = 120
    color: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, reports: tuple[ConformanceReport, ...]) -> str:
        """Format conformance reports as rich formatted string.

        Args:
            reports: Reports to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        self._render_header(console, reports)
        for report in reports:
            if report.passed and not self._config.show_passed:
                continue
            self._render_report(console, report)

        return output.getvalue()

    def _render_header(self, console: Console, reports: tuple[ConformanceReport, ...]) -> None:
        """Render header with pass/fail counts."""
        failed = sum(1 for r in reports if not r.passed)
        console.print()
        console.rule("[bold]CONFORMANCE[/bold]")
        console.print()
        console.print(
            f"[bold]Checked:[/bold] {len(reports)}  "
            f"[green]passed: {len(reports) - failed}[/green]  "
            f"[red]failed: {failed}[/red]"
        )
        console.print()

    def _render_report(self, console: Console, report: ConformanceReport) -> None:
        """Render one report line and, for failures, its detail table."""
        if report.passed:
            console.print(f"[green]PASS[/green] {escape(report.subject)}")
            return

        failure: Failure = report.verdict  # type: ignore[assignment]
        console.print(f"[red]FAIL[/red] {escape(report.subject)}: {escape(failure.describe())}")
        if self._config.show_details:
            console.print(self._detail_table(failure))
        console.print()

    def _detail_table(self, failure: Failure) -> Table:
        """Create key/value table of structured failure detail."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        for key, value in failure.details().items():
            table.add_row(key, escape(value))
        return table
