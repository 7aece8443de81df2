"""Domain exceptions."""

from shapebind.domain.exceptions.base import ShapeBindError
from shapebind.domain.exceptions.conformance import (
    AbsentSlotError,
    ConformanceError,
    UnknownSlotError,
)

__all__ = [
    "ShapeBindError",
    "ConformanceError",
    "AbsentSlotError",
    "UnknownSlotError",
]
