"""Shape configuration: which fields hold the self pointer and the table."""

from __future__ import annotations

import keyword
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ShapeConfig:
    """Field naming convention for interface shapes.

    Immutable and hashable: part of every verdict cache key.

    Attributes:
        self_field: Name of the erased self-pointer field
        table_field: Name of the method-table field
    """

    self_field: str = "ptr"
    table_field: str = "vtable"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for label, value in (("self_field", self.self_field), ("table_field", self.table_field)):
            if not isinstance(value, str):
                raise TypeError(f"{label} must be str, got {type(value).__name__}")
            if not value.isidentifier() or keyword.iskeyword(value):
                raise ValueError(f"{label} must be a valid identifier, got {value!r}")
        if self.self_field == self.table_field:
            raise ValueError(f"self_field and table_field must differ, both are {self.self_field!r}")


DEFAULT_CONFIG = ShapeConfig()
