"""Conformance report: one verdict with the names it concerns."""

from __future__ import annotations

from dataclasses import dataclass

from shapebind.domain.model.verdict import Failure, Success


@dataclass(frozen=True, slots=True)
class ConformanceReport:
    """Verdict of checking one shape (and optionally one implementation).

    Attributes:
        shape_name: Interface shape name
        impl_name: Implementation name, None for a shape-only check
        verdict: Outcome
    """

    shape_name: str
    impl_name: str | None
    verdict: Success | Failure

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.shape_name:
            raise ValueError("shape_name must not be empty")
        if self.impl_name is not None and not self.impl_name:
            raise ValueError("impl_name must be None or non-empty")

    @property
    def passed(self) -> bool:
        """Check if verdict is success."""
        return self.verdict.ok

    @property
    def subject(self) -> str:
        """Prefix naming what was checked."""
        if self.impl_name is None:
            return f"Interface {self.shape_name}"
        return f"{self.shape_name} implementation {self.impl_name}"

    def __str__(self) -> str:
        return f"{self.subject}: {self.verdict.describe()}"
