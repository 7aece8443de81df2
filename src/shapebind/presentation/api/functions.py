"""Public entry points backed by a process-wide ConformanceChecker.

Example:
    class AdderTable:
        add: Callable[[Ptr[Opaque], int], int]
        sub: Callable[[Ptr[Opaque], int], int] | None

    class Adder:
        ptr: Ptr[Opaque]
        vtable: AdderTable

    @dataclass
    class Counter:
        value: int

        def add(self, v: int) -> int:
            return self.value + v

    adder = bind(Adder, Ptr(Counter(value=1)))
    invoke(adder, "add", 1)          # 2
    invoke_or(adder, "sub", 0, 1)    # 0, sub is absent
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from shapebind.application.services.conformance import ConformanceChecker
from shapebind.domain.exceptions.conformance import AbsentSlotError, UnknownSlotError
from shapebind.domain.model.configuration import DEFAULT_CONFIG, ShapeConfig

if TYPE_CHECKING:
    from shapebind.domain.binder import ErasedMethod
    from shapebind.domain.model.pointer import ConstPtr, Ptr
    from shapebind.domain.model.shape import ShapeInfo
    from shapebind.domain.model.verdict import Failure, Success

_checker = ConformanceChecker()


def default_checker() -> ConformanceChecker:
    """Process-wide checker used by the module-level functions."""
    return _checker


def validate_shape(shape: object) -> Success | Failure:
    """Static well-formedness check of an interface shape."""
    return _checker.validate_shape(shape)


def check_implements(shape: object, impl: object) -> Success | Failure:
    """Static conformance check, no instance required."""
    return _checker.check_implements(shape, impl)


def assert_implements(shape: object, impl: object) -> ShapeInfo:
    """Static conformance check that raises ConformanceError on failure."""
    return _checker.assert_implements(shape, impl)


def bind[S](shape: type[S], pointer: Ptr[object] | ConstPtr[object]) -> S:
    """Construct and validate a bound dispatch object in one step."""
    return _checker.bind(shape, pointer)


def cast_function(expected: object, function: Callable[..., object]) -> ErasedMethod:
    """Signature-checked cast of a function to an erased callable type."""
    return _checker.cast_function(expected, function)


def _entry(bound: object, slot: str, config: ShapeConfig) -> Callable[..., object] | None:
    """Look up a table entry of a bound object.

    Raises:
        UnknownSlotError: If the table has no such slot
    """
    table = getattr(bound, config.table_field)
    try:
        return getattr(table, slot)
    except AttributeError:
        raise UnknownSlotError(type(bound).__name__, slot) from None


def has_slot(bound: object, slot: str, *, config: ShapeConfig = DEFAULT_CONFIG) -> bool:
    """Check if a bound object's slot is present (not an absent optional)."""
    return _entry(bound, slot, config) is not None


def invoke(bound: object, slot: str, *args: object, config: ShapeConfig = DEFAULT_CONFIG) -> object:
    """Dispatch a call through a bound object's method table.

    Args:
        bound: Bound dispatch object
        slot: Slot name
        *args: Arguments after the self pointer
        config: Field naming convention

    Returns:
        Implementation method result

    Raises:
        AbsentSlotError: If the slot is an absent optional
        UnknownSlotError: If the shape declares no such slot
    """
    entry = _entry(bound, slot, config)
    if entry is None:
        raise AbsentSlotError(type(bound).__name__, slot)
    return entry(getattr(bound, config.self_field), *args)


def invoke_or(
    bound: object,
    slot: str,
    default: object,
    *args: object,
    config: ShapeConfig = DEFAULT_CONFIG,
) -> object:
    """Dispatch a call, returning default when the slot is absent.

    Raises:
        UnknownSlotError: If the shape declares no such slot
    """
    entry = _entry(bound, slot, config)
    if entry is None:
        return default
    return entry(getattr(bound, config.self_field), *args)
