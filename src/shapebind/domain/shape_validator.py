"""Shape validator: definition-level checks of an interface shape.

Validation order is fixed so diagnostics are deterministic:

1. shape is a record type
2. self-pointer field present, typed Ptr[Opaque] or ConstPtr[Opaque]
3. method-table field present, a record, non-empty
4. each slot in table order: callable, erased first parameter,
   no mutable self in a const shape

First violation wins.
"""

from __future__ import annotations

import enum
import typing
from typing import ClassVar, TypeGuard, get_origin

from shapebind.domain.model.configuration import DEFAULT_CONFIG, ShapeConfig
from shapebind.domain.model.shape import ShapeInfo, SlotInfo
from shapebind.domain.model.signature import (
    declared_params,
    is_callable_type,
    signature_of_callable_type,
    unwrap_optional,
)
from shapebind.domain.model.type_ref import type_name, type_ref_of
from shapebind.domain.model.verdict import (
    SUCCESS,
    ConstSelfViolation,
    EmptyMethodTable,
    Failure,
    InvalidSelfPointerType,
    InvalidSlotSignature,
    InvalidSlotType,
    MethodTableNotAStruct,
    MissingMethodTable,
    MissingSelfPointer,
    NotAStruct,
    Success,
    UnresolvedAnnotation,
)


def _builtin_base(candidate: type) -> type | None:
    """First builtin ancestor other than object, if any."""
    for base in candidate.__mro__:
        if base is not object and base.__module__ == "builtins":
            return base
    return None


def is_record(candidate: object) -> TypeGuard[type]:
    """Check if candidate is a record type.

    A record is a user-defined class (plain class or dataclass) whose fields
    are declared through annotations and whose instances have a plain object
    layout. Builtin types, their subclasses (NamedTuple, TypedDict) and enums
    are not records.
    """
    return (
        isinstance(candidate, type)
        and _builtin_base(candidate) is None
        and not issubclass(candidate, enum.Enum)
    )


def kind_name(candidate: object) -> str:
    """Short name of what a non-record candidate is, for diagnostics."""
    if isinstance(candidate, type):
        if issubclass(candidate, enum.Enum):
            return "enum"
        base = _builtin_base(candidate)
        return base.__name__ if base is not None else candidate.__name__
    if get_origin(candidate) is not None:
        return type_name(candidate)
    return type(candidate).__name__


def _field_hints(record: type) -> dict[str, object]:
    """Resolved field annotations, ClassVar entries excluded.

    Raises:
        NameError: If a forward reference cannot be resolved
    """
    hints = typing.get_type_hints(record)
    return {name: hint for name, hint in hints.items() if get_origin(hint) is not ClassVar}


def inspect_shape(shape: object, config: ShapeConfig = DEFAULT_CONFIG) -> ShapeInfo | Failure:
    """Validate shape and describe it.

    Args:
        shape: Candidate interface shape class
        config: Field naming convention

    Returns:
        ShapeInfo on success, else the first failure found
    """
    if not is_record(shape):
        return NotAStruct(actual=kind_name(shape))

    try:
        hints = _field_hints(shape)
    except NameError as exc:
        return UnresolvedAnnotation(owner=shape.__name__, reason=str(exc))

    # self pointer
    if config.self_field not in hints:
        return MissingSelfPointer(field=config.self_field)
    self_annotation = hints[config.self_field]
    self_ref = type_ref_of(self_annotation)
    if not self_ref.is_erased:
        return InvalidSelfPointerType(field=config.self_field, actual=type_name(self_annotation))

    # method table
    if config.table_field not in hints:
        return MissingMethodTable(field=config.table_field)
    table = hints[config.table_field]
    if not is_record(table):
        return MethodTableNotAStruct(field=config.table_field, actual=kind_name(table))

    try:
        table_hints = _field_hints(table)
    except NameError as exc:
        return UnresolvedAnnotation(owner=table.__name__, reason=str(exc))
    if not table_hints:
        return EmptyMethodTable(field=config.table_field)

    # slots, in table order
    slots: list[SlotInfo] = []
    for name, annotation in table_hints.items():
        inner, optional = unwrap_optional(annotation)
        if not is_callable_type(inner):
            return InvalidSlotType(slot=name, actual=type_name(annotation))

        params = declared_params(inner)
        if not params:
            return InvalidSlotSignature(slot=name)
        first = type_ref_of(params[0])
        if not first.is_erased:
            return InvalidSlotSignature(slot=name)
        if not self_ref.mutable and first.mutable:
            return ConstSelfViolation(slot=name)

        slots.append(SlotInfo(name=name, signature=signature_of_callable_type(inner), optional=optional))

    return ShapeInfo(
        shape=shape,
        table=table,
        self_field=config.self_field,
        table_field=config.table_field,
        mutable=self_ref.mutable,
        slots=tuple(slots),
    )


def validate_shape(shape: object, config: ShapeConfig = DEFAULT_CONFIG) -> Success | Failure:
    """Check that a proposed interface shape is well-formed.

    Args:
        shape: Candidate interface shape class
        config: Field naming convention

    Returns:
        SUCCESS or the first failure found
    """
    result = inspect_shape(shape, config)
    if isinstance(result, Failure):
        return result
    return SUCCESS
