"""Tests for domain/model/verdict.py."""

import pytest

from shapebind.domain.model.verdict import (
    SUCCESS,
    ArityMismatch,
    ConstSelfViolation,
    Failure,
    FailureKind,
    IllegalPromotion,
    MissingMethod,
    MutabilityViolation,
    NotAStruct,
    ParameterTypeMismatch,
    ReturnTypeMismatch,
    SignatureError,
    Success,
)


class TestSuccess:
    """Tests for the success verdict."""

    def test_singleton_is_truthy(self) -> None:
        assert SUCCESS
        assert SUCCESS.ok
        assert SUCCESS == Success()

    def test_describe(self) -> None:
        assert SUCCESS.describe() == "compatible"


class TestFailure:
    """Tests for failure verdicts."""

    def test_is_falsy(self) -> None:
        failure = MissingMethod(slot="add")
        assert not failure
        assert not failure.ok

    def test_kind_is_per_class(self) -> None:
        assert NotAStruct(actual="int").kind is FailureKind.NOT_A_STRUCT
        assert ConstSelfViolation(slot="add").kind is FailureKind.CONST_SELF_VIOLATION

    def test_equal_by_value(self) -> None:
        assert MissingMethod(slot="add") == MissingMethod(slot="add")
        assert MissingMethod(slot="add") != MissingMethod(slot="sub")

    def test_is_frozen(self) -> None:
        failure = MissingMethod(slot="add")
        with pytest.raises(AttributeError):
            failure.slot = "sub"  # type: ignore[misc]

    def test_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Failure()  # type: ignore[abstract]

    def test_match_statement(self) -> None:
        verdict: Success | Failure = ArityMismatch(expected=2, actual=1)
        match verdict:
            case ArityMismatch(expected=expected, actual=actual):
                assert (expected, actual) == (2, 1)
            case _:
                pytest.fail("ArityMismatch not matched")


class TestFailureDescribe:
    """Messages name the slot and the expected/actual types."""

    def test_missing_method(self) -> None:
        assert MissingMethod(slot="add").describe() == "is missing method 'add'"

    def test_arity(self) -> None:
        assert "expected 2, got 1" in ArityMismatch(expected=2, actual=1).describe()

    def test_return_type(self) -> None:
        message = ReturnTypeMismatch(expected="int", actual="None").describe()
        assert "expected int, got None" in message

    def test_parameter(self) -> None:
        message = ParameterTypeMismatch(index=1, expected="int", actual="str").describe()
        assert "parameter 1" in message
        assert "expected int, got str" in message

    def test_promotion(self) -> None:
        message = IllegalPromotion(index=0, expected="Ptr[Opaque]", actual="ConstPtr[Counter]").describe()
        assert "ConstPtr[Counter]" in message
        assert "Ptr[Opaque]" in message

    def test_signature_error_wraps_inner(self) -> None:
        failure = SignatureError(slot="add", inner=ArityMismatch(expected=2, actual=1))
        assert failure.describe().startswith("method 'add' has wrong parameter count")

    def test_mutability(self) -> None:
        message = MutabilityViolation(expected="Ptr[Opaque]", actual="ConstPtr[Counter]").describe()
        assert "ConstPtr[Counter]" in message


class TestFailureDetails:
    """Tests for the flat detail mapping used by reporters."""

    def test_kind_first(self) -> None:
        details = ParameterTypeMismatch(index=1, expected="int", actual="str").details()
        assert list(details) == ["kind", "index", "expected", "actual"]
        assert details["kind"] == "PARAMETER_TYPE_MISMATCH"
        assert details["index"] == "1"

    def test_nested_failure_flattened(self) -> None:
        details = SignatureError(slot="add", inner=ReturnTypeMismatch(expected="int", actual="str")).details()
        assert details == {
            "kind": "SIGNATURE_ERROR",
            "slot": "add",
            "inner_kind": "RETURN_TYPE_MISMATCH",
            "expected": "int",
            "actual": "str",
        }


class TestSignatureErrorFailFirst:
    """Tests for FAIL-FIRST validation in SignatureError."""

    def test_non_signature_inner_raises(self) -> None:
        with pytest.raises(TypeError, match="inner must be a signature failure"):
            SignatureError(slot="add", inner=MissingMethod(slot="add"))  # type: ignore[arg-type]
