"""Design principle compliance tests.

Tests verifying adherence to the package-wide rules:
- FAIL-FIRST Validation: invalid values raise at construction
- Immutability: value objects and verdicts are frozen
- No Silent Fallback: aborting entry points raise, never return None
"""

import dataclasses

import pytest

from shapebind import ConformanceError, ConstPtr, Ptr, bind
from shapebind.application.reporters.console import ConsoleConfig
from shapebind.domain.binder import ErasedMethod
from shapebind.domain.model.configuration import ShapeConfig
from shapebind.domain.model.shape import SlotInfo
from shapebind.domain.model.type_ref import ERASED_MUT, TypeKind, TypeRef
from shapebind.domain.model.verdict import SUCCESS, MissingMethod
from tests.factories import Adder, Counter, make_report, make_shape_info, make_signature

# =============================================================================
# FAIL-FIRST Validation
# =============================================================================


class TestFailFirstValidation:
    """Invalid values are rejected where they are created."""

    def test_config_rejects_bad_identifier(self) -> None:
        with pytest.raises(ValueError, match="identifier"):
            ShapeConfig(self_field="not valid")

    def test_type_ref_rejects_mutable_value(self) -> None:
        with pytest.raises(ValueError, match="mutability"):
            TypeRef(kind=TypeKind.VALUE, target=int, mutable=True)

    def test_slot_rejects_non_erased_first(self) -> None:
        with pytest.raises(ValueError, match="erased pointer"):
            SlotInfo(name="add", signature=make_signature(int))

    def test_pointer_rejects_pointer_target(self) -> None:
        with pytest.raises(TypeError, match="pointer to pointer"):
            ConstPtr(Ptr(Counter()))

    def test_erased_method_rejects_non_callable(self) -> None:
        with pytest.raises(TypeError, match="callable"):
            ErasedMethod("add", "add")  # type: ignore[arg-type]

    def test_console_config_rejects_narrow_width(self) -> None:
        with pytest.raises(ValueError, match="width"):
            ConsoleConfig(width=10)


# =============================================================================
# Immutability
# =============================================================================


class TestImmutability:
    """Value objects cannot be changed after construction."""

    @pytest.mark.parametrize(
        "value",
        [
            ShapeConfig(),
            ERASED_MUT,
            make_signature(Ptr[Counter], int),
            SUCCESS,
            MissingMethod(slot="add"),
            make_report(),
        ],
        ids=["config", "type_ref", "signature", "success", "failure", "report"],
    )
    def test_frozen(self, value: object) -> None:
        field = dataclasses.fields(value)[0].name if dataclasses.fields(value) else "ok"
        with pytest.raises((AttributeError, TypeError)):
            setattr(value, field, None)

    def test_shape_info_slots_are_tuple(self) -> None:
        assert isinstance(make_shape_info(Adder).slots, tuple)


# =============================================================================
# No Silent Fallback
# =============================================================================


class TestNoSilentFallback:
    """Aborting entry points raise instead of degrading."""

    def test_bind_raises_instead_of_returning_none(self) -> None:
        class Empty:
            pass

        with pytest.raises(ConformanceError):
            bind(Adder, Ptr(Empty()))

    def test_bind_refuses_const_pointer_for_mutable_shape(self) -> None:
        with pytest.raises(ConformanceError):
            bind(Adder, ConstPtr(Counter()))
