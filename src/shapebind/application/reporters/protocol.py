"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from shapebind.domain.model.report import ConformanceReport


class ReporterProtocol(Protocol):
    """Protocol for conformance reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, reports: tuple[ConformanceReport, ...]) -> str:
        """Format conformance reports as string.

        Args:
            reports: Reports to format, in display order.

        Returns:
            Formatted string representation.
        """
        ...
