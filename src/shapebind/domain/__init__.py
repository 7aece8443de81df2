"""shapebind domain layer.

Pure validation logic over type descriptions, no external dependencies.
Every function here is a pure function of its inputs: no caching, no I/O.
"""

from shapebind.domain.binder import ErasedMethod, build_bound, check_pointer
from shapebind.domain.casting import cast_entry, check_cast
from shapebind.domain.comparator import compare
from shapebind.domain.exceptions import (
    AbsentSlotError,
    ConformanceError,
    ShapeBindError,
    UnknownSlotError,
)
from shapebind.domain.matcher import MethodMatch, collect_matches, match_implementation, match_slots
from shapebind.domain.shape_validator import inspect_shape, is_record, validate_shape

__all__ = [
    # Exceptions
    "ShapeBindError",
    "ConformanceError",
    "AbsentSlotError",
    "UnknownSlotError",
    # Comparator
    "compare",
    # Shape validator
    "inspect_shape",
    "is_record",
    "validate_shape",
    # Matcher
    "MethodMatch",
    "collect_matches",
    "match_implementation",
    "match_slots",
    # Binder
    "ErasedMethod",
    "build_bound",
    "check_pointer",
    # Casting
    "cast_entry",
    "check_cast",
]
