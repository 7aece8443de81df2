"""Method signature value object and its builders."""

from __future__ import annotations

import collections.abc
import inspect
import types
import typing
from dataclasses import dataclass
from typing import Self, get_args, get_origin

from shapebind.domain.model.type_ref import UNANNOTATED, TypeRef, type_ref_of

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True, slots=True)
class Signature:
    """Ordered parameter types plus return type.

    Compared positionally; keyword-only and variadic parameters are not
    part of a signature.

    Attributes:
        params: Parameter type references, in order
        returns: Return type reference
        receiver: First parameter is an implicit method receiver, called
            with the pointer's target rather than the pointer itself
    """

    params: tuple[TypeRef, ...]
    returns: TypeRef
    receiver: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.params, tuple):
            raise TypeError(f"params must be tuple, got {type(self.params).__name__}")
        if self.receiver and not (self.params and self.params[0].is_pointer):
            raise ValueError("receiver requires a pointer as first parameter")

    @property
    def arity(self) -> int:
        """Number of positional parameters."""
        return len(self.params)

    @property
    def first(self) -> TypeRef | None:
        """First parameter (the self slot), None for zero-arity."""
        return self.params[0] if self.params else None

    def __str__(self) -> str:
        params = ", ".join(p.name for p in self.params)
        return f"({params}) -> {self.returns.name}"


def is_callable_type(annotation: object) -> bool:
    """Check if annotation is a ``Callable[...]`` reference (bare or subscripted)."""
    return annotation is collections.abc.Callable or annotation is typing.Callable or (
        get_origin(annotation) is collections.abc.Callable
    )


def unwrap_optional(annotation: object) -> tuple[object, bool]:
    """Unwrap exactly one level of ``X | None``.

    Returns:
        (inner annotation, True) for optional, (annotation, False) otherwise
    """
    origin = get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = get_args(annotation)
        non_none = tuple(a for a in args if a is not type(None))
        if len(args) == 2 and len(non_none) == 1:
            return non_none[0], True
    return annotation, False


def declared_params(annotation: object) -> list[object] | None:
    """Parameter annotations of a ``Callable[[...], R]`` reference.

    Returns:
        List of parameter annotations, None if parameters are not declared
        (bare ``Callable`` or ``Callable[..., R]``)
    """
    args = get_args(annotation)
    if not args or args[0] is Ellipsis:
        return None
    return list(args[0])


def signature_of_callable_type(annotation: object) -> Signature:
    """Build signature from a ``Callable[[P1, P2], R]`` annotation.

    Raises:
        TypeError: If the annotation does not declare its parameters
    """
    params = declared_params(annotation)
    if params is None:
        raise TypeError(f"callable type declares no parameter list: {annotation!r}")
    returns = get_args(annotation)[1]
    return Signature(
        params=tuple(type_ref_of(p) for p in params),
        returns=type_ref_of(returns),
    )


def signature_of_function(
    function: collections.abc.Callable[..., object],
    owner: type | None = None,
    *,
    implicit_self: bool = False,
) -> Signature:
    """Build signature from a Python function's annotations.

    Annotations are resolved against the function's globals, with the owner
    class and ``Self`` available as local names so forward references to the
    owner resolve even for locally-defined classes.

    Args:
        function: Plain function (not bound)
        owner: Class the function belongs to
        implicit_self: First parameter is the receiver; when it is
            unannotated, or annotated as ``Self``/the owner class, it reads
            as ``Ptr[owner]`` and is marked as the receiver

    Returns:
        Signature of positional parameters and return

    Raises:
        NameError: If an annotation cannot be resolved
    """
    localns: dict[str, object] = {"Self": Self}
    if owner is not None:
        localns[owner.__name__] = owner
    hints = typing.get_type_hints(function, localns=localns)
    parameters = [
        p for p in inspect.signature(function).parameters.values() if p.kind in _POSITIONAL
    ]

    params: list[TypeRef] = []
    receiver = False
    for index, parameter in enumerate(parameters):
        annotation = hints.get(parameter.name, UNANNOTATED)
        if index == 0 and implicit_self and owner is not None:
            if annotation is UNANNOTATED or annotation is Self or annotation is owner:
                params.append(TypeRef.pointer(owner, mutable=True))
                receiver = True
                continue
        params.append(type_ref_of(annotation, owner))

    returns = type_ref_of(hints.get("return", UNANNOTATED), owner)
    return Signature(params=tuple(params), returns=returns, receiver=receiver)
