"""Validated interface shape description."""

from __future__ import annotations

from dataclasses import dataclass

from shapebind.domain.model.signature import Signature


@dataclass(frozen=True, slots=True)
class SlotInfo:
    """One entry of a method table.

    Attributes:
        name: Slot name (matched against implementation member names)
        signature: Expected signature, optionality already unwrapped
        optional: Slot may be left absent by an implementation
    """

    name: str
    signature: Signature
    optional: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("slot name must not be empty")
        if self.signature.first is None or not self.signature.first.is_erased:
            raise ValueError(f"slot '{self.name}' must take an erased pointer first")

    def __str__(self) -> str:
        marker = "?" if self.optional else ""
        return f"{self.name}{marker}{self.signature}"


@dataclass(frozen=True, slots=True)
class ShapeInfo:
    """Interface shape that passed definition validation.

    Attributes:
        shape: The shape class itself
        table: The method-table class
        self_field: Name of the erased self-pointer field
        table_field: Name of the method-table field
        mutable: Self pointer is Ptr[Opaque] (True) or ConstPtr[Opaque] (False)
        slots: Method table entries, in declaration order
    """

    shape: type
    table: type
    self_field: str
    table_field: str
    mutable: bool
    slots: tuple[SlotInfo, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.slots:
            raise ValueError("method table must contain at least one slot")
        names = [s.name for s in self.slots]
        if len(names) != len(set(names)):
            raise ValueError(f"slot names must be unique, got {names}")

    @property
    def name(self) -> str:
        """Shape class name."""
        return self.shape.__name__

    @property
    def required(self) -> tuple[SlotInfo, ...]:
        """Slots every implementation must provide."""
        return tuple(s for s in self.slots if not s.optional)

    @property
    def optional(self) -> tuple[SlotInfo, ...]:
        """Slots an implementation may omit."""
        return tuple(s for s in self.slots if s.optional)
