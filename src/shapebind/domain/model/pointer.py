"""Pointer markers: mutable/constant capability handles.

Python references carry no constness, so capability is modelled by two
distinct handle types. They serve both as annotations and as runtime values:

    def add(self: Ptr[Self], v: int) -> int: ...   # annotation
    bind(Adder, Ptr(counter))                       # value

The erased self-pointer of an interface shape is spelled ``Ptr[Opaque]``
(mutable) or ``ConstPtr[Opaque]`` (read-only).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


class Opaque:
    """Erased pointee type. Only meaningful as ``Ptr[Opaque]``/``ConstPtr[Opaque]``."""

    def __new__(cls) -> Opaque:
        """Reject instantiation. FAIL-FIRST."""
        raise TypeError("Opaque is an erased pointee type and cannot be instantiated")


@dataclass(frozen=True, eq=False)
class _Handle[T]:
    """Shared behaviour of Ptr and ConstPtr; never instantiated directly.

    Equality is identity of the target, like comparing addresses.
    The handle keeps no lifetime bookkeeping of its own.

    Attributes:
        target: Referenced object
    """

    target: T

    mutable: ClassVar[bool]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if type(self) is _Handle:
            raise TypeError("use Ptr or ConstPtr, not the shared handle base")
        if isinstance(self.target, _Handle):
            raise TypeError("pointer to pointer is not supported, pass the target directly")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.target is other.target  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), id(self.target)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({type(self.target).__name__} @ {id(self.target):#x})"


class Ptr[T](_Handle[T]):
    """Mutable, non-owning handle to a target object."""

    mutable: ClassVar[bool] = True


class ConstPtr[T](_Handle[T]):
    """Read-only, non-owning handle to a target object.

    Not a subclass of Ptr: a constant handle must never pass where a
    mutable one is demanded.
    """

    mutable: ClassVar[bool] = False


POINTER_TYPES: tuple[type, ...] = (Ptr, ConstPtr)


def is_pointer(value: object) -> bool:
    """Check if value is a runtime pointer (Ptr or ConstPtr instance)."""
    return isinstance(value, POINTER_TYPES)


def erase(pointer: Ptr[object] | ConstPtr[object], *, mutable: bool) -> Ptr[object] | ConstPtr[object]:
    """Re-wrap pointer target as a handle of the requested capability.

    Args:
        pointer: Concrete pointer
        mutable: True for Ptr, False for ConstPtr

    Returns:
        Handle of the requested kind around the same target

    Raises:
        TypeError: If a mutable handle is requested from a constant pointer
    """
    if mutable and not pointer.mutable:
        raise TypeError("cannot widen a ConstPtr into a mutable Ptr")
    if mutable:
        return Ptr(pointer.target)
    return ConstPtr(pointer.target)
