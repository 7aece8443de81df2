"""Conformance exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shapebind.domain.exceptions.base import ShapeBindError

if TYPE_CHECKING:
    from shapebind.domain.model.verdict import Failure, FailureKind


class ConformanceError(ShapeBindError, TypeError):
    """Shape, implementation or pointer failed validation.

    The Python analogue of a compile error: raised at definition or bind
    time, never recovered from on the main execution path.
    Inherits TypeError for semantic correctness (incompatible types).

    Attributes:
        failure: The failed verdict
        shape_name: Interface shape name
        impl_name: Implementation name, None for shape-only checks
    """

    def __init__(self, failure: Failure, shape_name: str, impl_name: str | None = None) -> None:
        # FAIL-FIRST validation
        if failure is None:
            raise TypeError("failure must not be None")
        if failure.ok:
            raise ValueError("ConformanceError requires a failed verdict")
        if not shape_name:
            raise ValueError("shape_name must not be empty")

        self.failure = failure
        self.shape_name = shape_name
        self.impl_name = impl_name

        if impl_name is None:
            subject = f"Interface {shape_name}"
        else:
            subject = f"{shape_name} implementation {impl_name}"
        super().__init__(f"{subject} {failure.describe()}")

    @property
    def kind(self) -> FailureKind:
        """Failure kind of the carried verdict."""
        return self.failure.kind


class AbsentSlotError(ShapeBindError, LookupError):
    """Dispatch through an optional slot the implementation left absent.

    Attributes:
        shape_name: Interface shape name
        slot: Absent slot name
    """

    def __init__(self, shape_name: str, slot: str) -> None:
        if not slot:
            raise ValueError("slot must not be empty")

        self.shape_name = shape_name
        self.slot = slot
        super().__init__(f"{shape_name} slot '{slot}' is absent; guard the call or supply a default")


class UnknownSlotError(ShapeBindError, AttributeError):
    """Dispatch through a slot name the shape does not declare.

    Attributes:
        shape_name: Interface shape name
        slot: Requested slot name
    """

    def __init__(self, shape_name: str, slot: str) -> None:
        self.shape_name = shape_name
        self.slot = slot
        super().__init__(f"{shape_name} declares no slot '{slot}'")
