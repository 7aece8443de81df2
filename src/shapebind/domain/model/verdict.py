"""Compatibility verdicts.

A verdict is either SUCCESS or exactly one Failure. Each failure kind is its
own frozen dataclass carrying structured detail, so callers can ``match`` on
it and reporters can render it without re-reading shapes or implementations.

Shape failures: NotAStruct .. ConstSelfViolation
Matching failures: InvalidImplementationType .. SignatureError
Signature failures (wrapped in SignatureError): ArityMismatch .. IllegalPromotion
Binding failures: NotAPointer, MutabilityViolation
Cast failures: NotAFunctionType, NotAFunction
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from enum import Enum, auto
from typing import ClassVar


class FailureKind(Enum):
    """Discriminant of a failed verdict."""

    # Shape
    NOT_A_STRUCT = auto()
    MISSING_SELF_POINTER = auto()
    INVALID_SELF_POINTER_TYPE = auto()
    MISSING_METHOD_TABLE = auto()
    METHOD_TABLE_NOT_A_STRUCT = auto()
    EMPTY_METHOD_TABLE = auto()
    INVALID_SLOT_TYPE = auto()
    INVALID_SLOT_SIGNATURE = auto()
    CONST_SELF_VIOLATION = auto()
    UNRESOLVED_ANNOTATION = auto()

    # Matching
    INVALID_IMPLEMENTATION_TYPE = auto()
    MISSING_METHOD = auto()
    NOT_A_METHOD = auto()
    SIGNATURE_ERROR = auto()

    # Signature
    ARITY_MISMATCH = auto()
    RETURN_TYPE_MISMATCH = auto()
    PARAMETER_TYPE_MISMATCH = auto()
    ILLEGAL_PROMOTION = auto()

    # Binding
    NOT_A_POINTER = auto()
    MUTABILITY_VIOLATION = auto()

    # Function cast
    NOT_A_FUNCTION_TYPE = auto()
    NOT_A_FUNCTION = auto()


@dataclass(frozen=True, slots=True)
class Success:
    """Successful verdict. Use the SUCCESS singleton."""

    ok: ClassVar[bool] = True

    def __bool__(self) -> bool:
        return True

    def describe(self) -> str:
        """Human-readable description."""
        return "compatible"


SUCCESS = Success()


@dataclass(frozen=True, slots=True)
class Failure(ABC):
    """Base of all failed verdicts."""

    kind: ClassVar[FailureKind]
    ok: ClassVar[bool] = False

    def __bool__(self) -> bool:
        return False

    @abstractmethod
    def describe(self) -> str:
        """Human-readable description, without shape/implementation prefix."""

    def details(self) -> dict[str, str]:
        """Structured detail as flat string mapping.

        Nested failures (SignatureError.inner) are flattened with their kind.
        """
        result: dict[str, str] = {"kind": self.kind.name}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Failure):
                inner = value.details()
                result[f"{f.name}_kind"] = inner.pop("kind")
                result.update(inner)
            else:
                result[f.name] = str(value)
        return result


type Verdict = Success | Failure


# =============================================================================
# Shape failures
# =============================================================================


@dataclass(frozen=True, slots=True)
class NotAStruct(Failure):
    """Shape is not a record type.

    Attributes:
        actual: What was given instead (kind name)
    """

    kind: ClassVar[FailureKind] = FailureKind.NOT_A_STRUCT

    actual: str

    def describe(self) -> str:
        return f"must be a class with annotated fields, got {self.actual}"


@dataclass(frozen=True, slots=True)
class MissingSelfPointer(Failure):
    """Shape declares no self-pointer field."""

    kind: ClassVar[FailureKind] = FailureKind.MISSING_SELF_POINTER

    field: str

    def describe(self) -> str:
        return f"must have a '{self.field}' field"


@dataclass(frozen=True, slots=True)
class InvalidSelfPointerType(Failure):
    """Self-pointer field is not an erased pointer."""

    kind: ClassVar[FailureKind] = FailureKind.INVALID_SELF_POINTER_TYPE

    field: str
    actual: str

    def describe(self) -> str:
        return (
            f"must have a '{self.field}' field of type Ptr[Opaque] or ConstPtr[Opaque], "
            f"got {self.actual}"
        )


@dataclass(frozen=True, slots=True)
class MissingMethodTable(Failure):
    """Shape declares no method-table field."""

    kind: ClassVar[FailureKind] = FailureKind.MISSING_METHOD_TABLE

    field: str

    def describe(self) -> str:
        return f"must have a '{self.field}' field"


@dataclass(frozen=True, slots=True)
class MethodTableNotAStruct(Failure):
    """Method-table field is not a record of slots."""

    kind: ClassVar[FailureKind] = FailureKind.METHOD_TABLE_NOT_A_STRUCT

    field: str
    actual: str

    def describe(self) -> str:
        return f"{self.field} must be a class with annotated slots, got {self.actual}"


@dataclass(frozen=True, slots=True)
class EmptyMethodTable(Failure):
    """Method table has zero slots."""

    kind: ClassVar[FailureKind] = FailureKind.EMPTY_METHOD_TABLE

    field: str

    def describe(self) -> str:
        return f"must have at least one method in the {self.field}"


@dataclass(frozen=True, slots=True)
class InvalidSlotType(Failure):
    """Slot is not a callable reference (after one level of optionality)."""

    kind: ClassVar[FailureKind] = FailureKind.INVALID_SLOT_TYPE

    slot: str
    actual: str

    def describe(self) -> str:
        return f"method '{self.slot}' must be a Callable, got {self.actual}"


@dataclass(frozen=True, slots=True)
class InvalidSlotSignature(Failure):
    """Slot callable has no parameters or a non-erased first parameter."""

    kind: ClassVar[FailureKind] = FailureKind.INVALID_SLOT_SIGNATURE

    slot: str

    def describe(self) -> str:
        return (
            f"method '{self.slot}' must accept Ptr[Opaque] or ConstPtr[Opaque] "
            "as the first argument"
        )


@dataclass(frozen=True, slots=True)
class ConstSelfViolation(Failure):
    """Constant shape declares a slot with a mutable self argument."""

    kind: ClassVar[FailureKind] = FailureKind.CONST_SELF_VIOLATION

    slot: str

    def describe(self) -> str:
        return f"method '{self.slot}' cannot have a mutable self argument in a const interface"


@dataclass(frozen=True, slots=True)
class UnresolvedAnnotation(Failure):
    """An annotation on the shape or implementation could not be resolved.

    Attributes:
        owner: Class or method whose annotations failed
        reason: Resolution error message
    """

    kind: ClassVar[FailureKind] = FailureKind.UNRESOLVED_ANNOTATION

    owner: str
    reason: str

    def describe(self) -> str:
        return f"cannot resolve annotations of {self.owner}: {self.reason}"


# =============================================================================
# Matching failures
# =============================================================================


@dataclass(frozen=True, slots=True)
class InvalidImplementationType(Failure):
    """Implementation is not a class."""

    kind: ClassVar[FailureKind] = FailureKind.INVALID_IMPLEMENTATION_TYPE

    actual: str

    def describe(self) -> str:
        return f"must be a class, got {self.actual}"


@dataclass(frozen=True, slots=True)
class MissingMethod(Failure):
    """Implementation lacks a required slot."""

    kind: ClassVar[FailureKind] = FailureKind.MISSING_METHOD

    slot: str

    def describe(self) -> str:
        return f"is missing method '{self.slot}'"


@dataclass(frozen=True, slots=True)
class NotAMethod(Failure):
    """Implementation member of the slot's name is not a method."""

    kind: ClassVar[FailureKind] = FailureKind.NOT_A_METHOD

    slot: str
    actual: str

    def describe(self) -> str:
        return f"expected '{self.slot}' to be a method, got {self.actual}"


# =============================================================================
# Signature failures
# =============================================================================


@dataclass(frozen=True, slots=True)
class ArityMismatch(Failure):
    """Parameter counts differ."""

    kind: ClassVar[FailureKind] = FailureKind.ARITY_MISMATCH

    expected: int
    actual: int

    def describe(self) -> str:
        return f"wrong parameter count: expected {self.expected}, got {self.actual}"


@dataclass(frozen=True, slots=True)
class ReturnTypeMismatch(Failure):
    """Return types differ."""

    kind: ClassVar[FailureKind] = FailureKind.RETURN_TYPE_MISMATCH

    expected: str
    actual: str

    def describe(self) -> str:
        return f"wrong return type: expected {self.expected}, got {self.actual}"


@dataclass(frozen=True, slots=True)
class ParameterTypeMismatch(Failure):
    """Non-erased parameter types differ."""

    kind: ClassVar[FailureKind] = FailureKind.PARAMETER_TYPE_MISMATCH

    index: int
    expected: str
    actual: str

    def describe(self) -> str:
        return f"wrong type for parameter {self.index}: expected {self.expected}, got {self.actual}"


@dataclass(frozen=True, slots=True)
class IllegalPromotion(Failure):
    """Constant pointer offered where a mutable erased pointer is expected."""

    kind: ClassVar[FailureKind] = FailureKind.ILLEGAL_PROMOTION

    index: int
    expected: str
    actual: str

    def describe(self) -> str:
        return f"illegal promotion of parameter {self.index} from {self.actual} to mutable {self.expected}"


type SignatureFailure = ArityMismatch | ReturnTypeMismatch | ParameterTypeMismatch | IllegalPromotion

_SIGNATURE_FAILURES = (ArityMismatch, ReturnTypeMismatch, ParameterTypeMismatch, IllegalPromotion)


@dataclass(frozen=True, slots=True)
class SignatureError(Failure):
    """Slot signature incompatible.

    Attributes:
        slot: Offending slot name
        inner: Comparator failure
    """

    kind: ClassVar[FailureKind] = FailureKind.SIGNATURE_ERROR

    slot: str
    inner: SignatureFailure

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.inner, _SIGNATURE_FAILURES):
            raise TypeError(f"inner must be a signature failure, got {type(self.inner).__name__}")

    def describe(self) -> str:
        return f"method '{self.slot}' has {self.inner.describe()}"


# =============================================================================
# Binding failures
# =============================================================================


@dataclass(frozen=True, slots=True)
class NotAPointer(Failure):
    """Bind target is not a Ptr/ConstPtr."""

    kind: ClassVar[FailureKind] = FailureKind.NOT_A_POINTER

    actual: str

    def describe(self) -> str:
        return f"expected Ptr or ConstPtr to implementation, got {self.actual}"


@dataclass(frozen=True, slots=True)
class MutabilityViolation(Failure):
    """Mutable shape bound through a constant pointer."""

    kind: ClassVar[FailureKind] = FailureKind.MUTABILITY_VIOLATION

    expected: str
    actual: str

    def describe(self) -> str:
        return f"requires a mutable pointer ({self.expected}), got {self.actual}"


# =============================================================================
# Cast failures
# =============================================================================


@dataclass(frozen=True, slots=True)
class NotAFunctionType(Failure):
    """Cast target type is not a Callable with declared parameters."""

    kind: ClassVar[FailureKind] = FailureKind.NOT_A_FUNCTION_TYPE

    actual: str

    def describe(self) -> str:
        return f"expected a Callable[[...], R] type, got {self.actual}"


@dataclass(frozen=True, slots=True)
class NotAFunction(Failure):
    """Cast source is not a Python function."""

    kind: ClassVar[FailureKind] = FailureKind.NOT_A_FUNCTION

    actual: str

    def describe(self) -> str:
        return f"expected a function, got {self.actual}"
