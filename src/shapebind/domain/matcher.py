"""Implementation matcher: does a class provide every slot of a shape?

Purely static. Members are looked up with ``inspect.getattr_static`` so no
descriptor runs and no instance is needed.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass

from shapebind.domain.comparator import compare
from shapebind.domain.model.configuration import DEFAULT_CONFIG, ShapeConfig
from shapebind.domain.model.shape import ShapeInfo, SlotInfo
from shapebind.domain.model.signature import Signature, signature_of_function
from shapebind.domain.model.verdict import (
    SUCCESS,
    Failure,
    InvalidImplementationType,
    MissingMethod,
    NotAMethod,
    SignatureError,
    Success,
    UnresolvedAnnotation,
)
from shapebind.domain.shape_validator import inspect_shape, kind_name

_ABSENT = object()


@dataclass(frozen=True, slots=True)
class MethodMatch:
    """Implementation method resolved for one slot.

    Attributes:
        slot: Interface slot
        function: Plain function to call, None for an absent optional slot
        signature: Actual signature, None for an absent optional slot
    """

    slot: SlotInfo
    function: Callable[..., object] | None
    signature: Signature | None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if (self.function is None) != (self.signature is None):
            raise ValueError("function and signature must both be set or both be None")
        if self.function is None and not self.slot.optional:
            raise ValueError(f"required slot '{self.slot.name}' cannot be absent")

    @property
    def present(self) -> bool:
        """Check if the implementation provides this slot."""
        return self.function is not None


def method_function(member: object) -> tuple[Callable[..., object], bool] | None:
    """Extract the plain function behind a class member.

    Args:
        member: Raw class attribute (from getattr_static)

    Returns:
        (function, implicit_self) for plain functions and staticmethods,
        None for anything else (fields, properties, classmethods, classes)
    """
    if isinstance(member, staticmethod):
        return member.__func__, False
    if inspect.isfunction(member):
        return member, True
    return None


def collect_matches(info: ShapeInfo, impl: type) -> tuple[MethodMatch, ...] | Failure:
    """Resolve and check an implementation method for every slot, in table order.

    Args:
        info: Validated shape
        impl: Implementation class

    Returns:
        One MethodMatch per slot, or the first failure found
    """
    matches: list[MethodMatch] = []
    for slot in info.slots:
        member = inspect.getattr_static(impl, slot.name, _ABSENT)
        if member is _ABSENT:
            if slot.optional:
                matches.append(MethodMatch(slot=slot, function=None, signature=None))
                continue
            return MissingMethod(slot=slot.name)

        resolved = method_function(member)
        if resolved is None:
            return NotAMethod(slot=slot.name, actual=kind_name(member))
        function, implicit_self = resolved

        try:
            actual = signature_of_function(function, impl, implicit_self=implicit_self)
        except NameError as exc:
            return UnresolvedAnnotation(owner=f"{impl.__name__}.{slot.name}", reason=str(exc))

        verdict = compare(slot.signature, actual)
        if isinstance(verdict, Failure):
            return SignatureError(slot=slot.name, inner=verdict)

        matches.append(MethodMatch(slot=slot, function=function, signature=actual))

    return tuple(matches)


def match_slots(info: ShapeInfo, impl: object) -> Success | Failure:
    """Check an implementation against an already validated shape.

    Args:
        info: Validated shape
        impl: Candidate implementation class

    Returns:
        SUCCESS or the first failure found
    """
    if not isinstance(impl, type):
        return InvalidImplementationType(actual=kind_name(impl))
    result = collect_matches(info, impl)
    if isinstance(result, Failure):
        return result
    return SUCCESS


def match_implementation(
    shape: object,
    impl: object,
    config: ShapeConfig = DEFAULT_CONFIG,
) -> Success | Failure:
    """Check a concrete class against an interface shape.

    Shape failures are reported first: an ill-formed shape says nothing
    about any implementation.

    Args:
        shape: Interface shape class
        impl: Candidate implementation class
        config: Field naming convention

    Returns:
        SUCCESS or the first failure found
    """
    info = inspect_shape(shape, config)
    if isinstance(info, Failure):
        return info
    return match_slots(info, impl)
