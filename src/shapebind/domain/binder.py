"""Binder: materialize a bound dispatch object.

A bound object is an instance of the shape class holding the erased self
pointer and a filled method table. It is built without running the shape's
or the table's ``__init__``; the binder keeps no reference to it afterwards.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shapebind.domain.model.pointer import ConstPtr, Ptr, erase, is_pointer
from shapebind.domain.model.type_ref import ERASED_MUT
from shapebind.domain.model.verdict import (
    SUCCESS,
    Failure,
    MutabilityViolation,
    NotAPointer,
    Success,
)
from shapebind.domain.shape_validator import kind_name

if TYPE_CHECKING:
    from shapebind.domain.matcher import MethodMatch
    from shapebind.domain.model.shape import ShapeInfo


@dataclass(frozen=True, slots=True)
class ErasedMethod:
    """Callable table entry with erased pointer parameters.

    A method whose receiver is implicit (unannotated ``self``, ``Self`` or
    the owner class) is called with the handle's target in first position,
    so it sees its own object rather than the handle. Every other argument,
    explicitly typed pointers included, is passed through unchanged.

    Attributes:
        function: Implementation function
        name: Slot name (for repr and diagnostics)
        receiver: Replace the first argument by its target
    """

    function: Callable[..., object]
    name: str
    receiver: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not callable(self.function):
            raise TypeError(f"function must be callable, got {type(self.function).__name__}")
        if not self.name:
            raise ValueError("name must not be empty")

    def __call__(self, *args: object) -> object:
        if self.receiver and args and is_pointer(args[0]):
            return self.function(args[0].target, *args[1:])  # type: ignore[attr-defined]
        return self.function(*args)

    def __repr__(self) -> str:
        return f"<ErasedMethod {self.name} -> {getattr(self.function, '__qualname__', self.function)!r}>"


def check_pointer(info: ShapeInfo, pointer: object) -> Success | Failure:
    """Check the supplied instance pointer against the shape's pointer kind.

    A mutable shape demands a Ptr; a constant shape accepts either kind.

    Args:
        info: Validated shape
        pointer: Value passed to bind

    Returns:
        SUCCESS, NotAPointer or MutabilityViolation
    """
    if not is_pointer(pointer):
        return NotAPointer(actual=kind_name(pointer))
    if info.mutable and isinstance(pointer, ConstPtr):
        return MutabilityViolation(
            expected=ERASED_MUT.name,
            actual=f"ConstPtr[{type(pointer.target).__name__}]",
        )
    return SUCCESS


def build_bound(
    info: ShapeInfo,
    matches: tuple[MethodMatch, ...],
    pointer: Ptr[object] | ConstPtr[object],
) -> object:
    """Allocate and populate a shape instance.

    Preconditions (checked by the caller): shape validated, matches collected
    for ``type(pointer.target)``, pointer kind compatible.

    Args:
        info: Validated shape
        matches: Method matches in table order
        pointer: Pointer to the implementation instance

    Returns:
        Shape instance; ownership passes to the caller
    """
    table = object.__new__(info.table)
    for match in matches:
        entry: ErasedMethod | None = None
        if match.function is not None and match.signature is not None:
            entry = ErasedMethod(match.function, match.slot.name, receiver=match.signature.receiver)
        object.__setattr__(table, match.slot.name, entry)

    bound = object.__new__(info.shape)
    object.__setattr__(bound, info.self_field, erase(pointer, mutable=info.mutable))
    object.__setattr__(bound, info.table_field, table)
    return bound
