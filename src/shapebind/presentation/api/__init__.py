"""Public API.

Public exports:
    validate_shape/check_implements: Static verdicts
    assert_implements/implements: Static checks that abort on failure
    bind: Construct-and-validate a bound dispatch object
    cast_function: Signature-checked erased function cast
    invoke/invoke_or/has_slot: Dispatch helpers for bound objects
"""

from shapebind.presentation.api.decorators import implements
from shapebind.presentation.api.functions import (
    assert_implements,
    bind,
    cast_function,
    check_implements,
    default_checker,
    has_slot,
    invoke,
    invoke_or,
    validate_shape,
)

__all__ = [
    "assert_implements",
    "bind",
    "cast_function",
    "check_implements",
    "default_checker",
    "has_slot",
    "implements",
    "invoke",
    "invoke_or",
    "validate_shape",
]
