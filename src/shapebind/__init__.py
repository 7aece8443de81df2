"""shapebind - structural interface verification and dispatch-table binding."""

__version__ = "0.1.0"

from shapebind.domain.exceptions import (
    AbsentSlotError,
    ConformanceError,
    ShapeBindError,
    UnknownSlotError,
)
from shapebind.domain.model import ConstPtr, Opaque, Ptr, ShapeConfig
from shapebind.presentation.api import (
    assert_implements,
    bind,
    cast_function,
    check_implements,
    has_slot,
    implements,
    invoke,
    invoke_or,
    validate_shape,
)

__all__ = [
    "AbsentSlotError",
    "ConformanceError",
    "ConstPtr",
    "Opaque",
    "Ptr",
    "ShapeBindError",
    "ShapeConfig",
    "UnknownSlotError",
    "__version__",
    "assert_implements",
    "bind",
    "cast_function",
    "check_implements",
    "has_slot",
    "implements",
    "invoke",
    "invoke_or",
    "validate_shape",
]
