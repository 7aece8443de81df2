"""Normalized type references.

Raw annotations come in many spellings (``None``, ``NoneType``, ``Ptr[Self]``,
``Ptr["Counter"]`` after resolution, bare classes). TypeRef reduces them to
the few categories the compatibility rules care about.
"""

from __future__ import annotations

import types
from dataclasses import dataclass
from enum import Enum, auto
from typing import Self, get_args, get_origin

from shapebind.domain.model.pointer import ConstPtr, Opaque, Ptr


class TypeKind(Enum):
    """Category of a type reference."""

    VALUE = auto()  # any non-pointer annotation
    POINTER = auto()  # Ptr[T] / ConstPtr[T]
    UNANNOTATED = auto()  # parameter or return without annotation


class _Unannotated:
    """Sentinel target for unannotated references."""

    def __repr__(self) -> str:
        return "<unannotated>"


UNANNOTATED = _Unannotated()


@dataclass(frozen=True, slots=True)
class TypeRef:
    """Normalized type reference.

    Attributes:
        kind: VALUE, POINTER or UNANNOTATED
        target: Value type, pointee type, or UNANNOTATED sentinel
        mutable: Pointer capability (only meaningful for POINTER)
    """

    kind: TypeKind
    target: object
    mutable: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.kind is not TypeKind.POINTER and self.mutable:
            raise ValueError(f"only pointers carry mutability, got {self.kind.name}")
        if self.kind is TypeKind.UNANNOTATED and self.target is not UNANNOTATED:
            raise ValueError("unannotated reference must target the UNANNOTATED sentinel")

    @classmethod
    def pointer(cls, target: object, *, mutable: bool) -> TypeRef:
        """Create pointer reference."""
        return cls(kind=TypeKind.POINTER, target=target, mutable=mutable)

    @classmethod
    def value(cls, target: object) -> TypeRef:
        """Create value reference."""
        return cls(kind=TypeKind.VALUE, target=target)

    @classmethod
    def unannotated(cls) -> TypeRef:
        """Create reference for a missing annotation."""
        return cls(kind=TypeKind.UNANNOTATED, target=UNANNOTATED)

    @property
    def is_pointer(self) -> bool:
        """Check if reference is any pointer."""
        return self.kind is TypeKind.POINTER

    @property
    def is_erased(self) -> bool:
        """Check if reference is Ptr[Opaque] or ConstPtr[Opaque]."""
        return self.kind is TypeKind.POINTER and self.target is Opaque

    @property
    def name(self) -> str:
        """Human-readable type name for diagnostics."""
        if self.kind is TypeKind.POINTER:
            wrapper = "Ptr" if self.mutable else "ConstPtr"
            return f"{wrapper}[{type_name(self.target)}]"
        return type_name(self.target)

    def __str__(self) -> str:
        return self.name


ERASED_MUT = TypeRef.pointer(Opaque, mutable=True)
ERASED_CONST = TypeRef.pointer(Opaque, mutable=False)


def type_name(annotation: object) -> str:
    """Render annotation as a short type name.

    Examples:
        int -> "int", None -> "None", Ptr[Counter] -> "Ptr[Counter]"
    """
    if annotation is None or annotation is types.NoneType:
        return "None"
    if annotation is UNANNOTATED:
        return "<unannotated>"
    origin = get_origin(annotation)
    if origin in (Ptr, ConstPtr):
        args = get_args(annotation)
        return f"{origin.__name__}[{type_name(args[0])}]"
    if isinstance(annotation, type):
        return annotation.__name__
    if isinstance(annotation, str):
        return annotation
    return repr(annotation).replace("typing.", "")


def type_ref_of(annotation: object, owner: type | None = None) -> TypeRef:
    """Normalize a resolved annotation.

    Args:
        annotation: Resolved annotation (from typing.get_type_hints)
        owner: Implementation type that ``Self`` refers to, None outside a class

    Returns:
        Normalized TypeRef
    """
    if annotation is UNANNOTATED:
        return TypeRef.unannotated()
    if annotation is None:
        return TypeRef.value(types.NoneType)
    if annotation is Self and owner is not None:
        return TypeRef.value(owner)

    if annotation in (Ptr, ConstPtr):
        # bare Ptr / ConstPtr: pointee unknown, treated as erased
        return TypeRef.pointer(Opaque, mutable=annotation is Ptr)

    origin = get_origin(annotation)
    if origin in (Ptr, ConstPtr):
        (pointee,) = get_args(annotation)
        if pointee is Self and owner is not None:
            pointee = owner
        return TypeRef.pointer(pointee, mutable=origin is Ptr)

    return TypeRef.value(annotation)
