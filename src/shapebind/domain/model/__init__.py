"""Domain model: pointers, type references, signatures, shapes, verdicts."""

from shapebind.domain.model.configuration import DEFAULT_CONFIG, ShapeConfig
from shapebind.domain.model.pointer import ConstPtr, Opaque, Ptr, erase, is_pointer
from shapebind.domain.model.report import ConformanceReport
from shapebind.domain.model.shape import ShapeInfo, SlotInfo
from shapebind.domain.model.signature import Signature
from shapebind.domain.model.type_ref import ERASED_CONST, ERASED_MUT, TypeKind, TypeRef
from shapebind.domain.model.verdict import SUCCESS, Failure, FailureKind, Success

__all__ = [
    # Configuration
    "DEFAULT_CONFIG",
    "ShapeConfig",
    # Pointers
    "ConstPtr",
    "Opaque",
    "Ptr",
    "erase",
    "is_pointer",
    # Types
    "ERASED_CONST",
    "ERASED_MUT",
    "Signature",
    "TypeKind",
    "TypeRef",
    # Shapes
    "ShapeInfo",
    "SlotInfo",
    # Verdicts
    "SUCCESS",
    "ConformanceReport",
    "Failure",
    "FailureKind",
    "Success",
]
