"""Standalone function-pointer cast under the erased-pointer promotion rule."""

from __future__ import annotations

import inspect
from collections.abc import Callable

from shapebind.domain.binder import ErasedMethod
from shapebind.domain.comparator import compare
from shapebind.domain.model.signature import (
    Signature,
    declared_params,
    is_callable_type,
    signature_of_callable_type,
    signature_of_function,
)
from shapebind.domain.model.type_ref import type_name
from shapebind.domain.model.verdict import (
    Failure,
    NotAFunction,
    NotAFunctionType,
    UnresolvedAnnotation,
)
from shapebind.domain.shape_validator import kind_name


def _unwrap(function: object) -> object:
    """Underlying function of a staticmethod object, else function unchanged."""
    if isinstance(function, staticmethod):
        return function.__func__
    return function


def check_cast(expected: object, function: object) -> tuple[Signature, Signature] | Failure:
    """Check that a function may be used as the expected callable type.

    Args:
        expected: ``Callable[[P1, ...], R]`` annotation
        function: Python function, staticmethod object or bound method

    Returns:
        (expected signature, actual signature), or the first failure found
    """
    if not is_callable_type(expected) or declared_params(expected) is None:
        return NotAFunctionType(actual=type_name(expected))
    function = _unwrap(function)
    if not (inspect.isfunction(function) or inspect.ismethod(function)):
        return NotAFunction(actual=kind_name(function))

    want = signature_of_callable_type(expected)
    try:
        got = signature_of_function(function)
    except NameError as exc:
        return UnresolvedAnnotation(owner=function.__qualname__, reason=str(exc))

    verdict = compare(want, got)
    if isinstance(verdict, Failure):
        return verdict
    return want, got


def cast_entry(expected: object, function: Callable[..., object]) -> ErasedMethod | Failure:
    """Wrap function as an erased callable of the expected type.

    Returns:
        ErasedMethod on success, else the failure
    """
    result = check_cast(expected, function)
    if isinstance(result, Failure):
        return result
    plain = _unwrap(function)
    return ErasedMethod(plain, plain.__name__)  # type: ignore[arg-type, attr-defined]
