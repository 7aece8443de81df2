"""Signature comparator: erased-pointer promotion rules.

Expected signature comes from an interface slot, actual from an
implementation method. Checks run in a fixed order and stop at the first
violation:

1. arity
2. return type (always before any parameter, whatever its position)
3. parameters, left to right

Parameter rule:
    expected Ptr[Opaque]       accepts any mutable pointer, rejects constant
    expected ConstPtr[Opaque]  accepts any pointer
    anything else              must be identical
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shapebind.domain.model.verdict import (
    SUCCESS,
    ArityMismatch,
    IllegalPromotion,
    ParameterTypeMismatch,
    ReturnTypeMismatch,
    Success,
)

if TYPE_CHECKING:
    from shapebind.domain.model.signature import Signature
    from shapebind.domain.model.type_ref import TypeRef
    from shapebind.domain.model.verdict import SignatureFailure


def compare(expected: Signature, actual: Signature) -> Success | SignatureFailure:
    """Compare two signatures for compatibility.

    Args:
        expected: Signature the interface slot declares
        actual: Signature the implementation provides

    Returns:
        SUCCESS or the first signature failure found
    """
    if expected.arity != actual.arity:
        return ArityMismatch(expected=expected.arity, actual=actual.arity)

    if expected.returns != actual.returns:
        return ReturnTypeMismatch(expected=expected.returns.name, actual=actual.returns.name)

    for index, (want, got) in enumerate(zip(expected.params, actual.params, strict=True)):
        failure = compare_parameter(index, want, got)
        if failure is not None:
            return failure

    return SUCCESS


def compare_parameter(
    index: int,
    expected: TypeRef,
    actual: TypeRef,
) -> IllegalPromotion | ParameterTypeMismatch | None:
    """Apply the promotion rule to one parameter position.

    Args:
        index: Zero-based parameter position
        expected: Interface parameter type
        actual: Implementation parameter type

    Returns:
        None if compatible, else the failure
    """
    if expected.is_erased and actual.is_pointer:
        if expected.mutable and not actual.mutable:
            return IllegalPromotion(index=index, expected=expected.name, actual=actual.name)
        return None

    if expected != actual:
        return ParameterTypeMismatch(index=index, expected=expected.name, actual=actual.name)
    return None
