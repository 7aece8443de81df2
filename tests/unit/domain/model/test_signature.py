"""Tests for domain/model/signature.py."""

import typing
from collections.abc import Callable
from typing import Optional, Self

import pytest

from shapebind.domain.model.pointer import ConstPtr, Opaque, Ptr
from shapebind.domain.model.signature import (
    Signature,
    declared_params,
    is_callable_type,
    signature_of_callable_type,
    signature_of_function,
    unwrap_optional,
)
from shapebind.domain.model.type_ref import ERASED_CONST, ERASED_MUT, TypeRef
from tests.factories import Counter, make_signature


class Receivers:
    def implicit(self, v: int) -> int:
        return v

    def self_typed(self: Self, v: int) -> int:
        return v

    def owner_typed(self: "Receivers", v: int) -> int:
        return v

    def pointer_typed(self: ConstPtr[Self]) -> None:
        return None

    def keyword_only(self, v: int, *, scale: int = 1, **extra: object) -> int:
        return v * scale

    def unannotated(self, v):  # noqa: ANN001, ANN202
        return v

    @staticmethod
    def static(p: Ptr[Opaque]) -> str:
        return ""


def unresolvable(v: "Missing") -> int:  # type: ignore[name-defined]  # noqa: F821
    return 0


class TestSignatureCreation:
    """Tests for Signature value object."""

    def test_arity_and_first(self) -> None:
        sig = make_signature(Ptr[Opaque], int)
        assert sig.arity == 2
        assert sig.first == ERASED_MUT

    def test_zero_arity_has_no_first(self) -> None:
        assert make_signature().first is None

    def test_str(self) -> None:
        assert str(make_signature(ConstPtr[Opaque], int, returns=None)) == "(ConstPtr[Opaque], int) -> None"

    def test_params_must_be_tuple(self) -> None:
        with pytest.raises(TypeError, match="params must be tuple"):
            Signature(params=[ERASED_MUT], returns=TypeRef.value(int))  # type: ignore[arg-type]

    def test_receiver_requires_pointer_first(self) -> None:
        with pytest.raises(ValueError, match="receiver requires a pointer"):
            Signature(params=(TypeRef.value(int),), returns=TypeRef.value(int), receiver=True)


class TestCallableTypeHelpers:
    """Tests for Callable annotation helpers."""

    def test_is_callable_type(self) -> None:
        assert is_callable_type(Callable[[int], int])
        assert is_callable_type(Callable)
        assert is_callable_type(typing.Callable[[int], int])
        assert not is_callable_type(int)
        assert not is_callable_type(Callable[[int], int] | None)

    def test_unwrap_optional_pipe(self) -> None:
        inner, optional = unwrap_optional(Callable[[int], int] | None)
        assert optional
        assert inner == Callable[[int], int]

    def test_unwrap_optional_typing(self) -> None:
        inner, optional = unwrap_optional(Optional[Callable[[int], int]])  # noqa: UP045
        assert optional
        assert is_callable_type(inner)

    def test_unwrap_non_optional(self) -> None:
        assert unwrap_optional(int) == (int, False)

    def test_wider_union_is_not_optional(self) -> None:
        annotation = int | str | None
        assert unwrap_optional(annotation) == (annotation, False)

    def test_declared_params(self) -> None:
        assert declared_params(Callable[[Ptr[Opaque], int], int]) == [Ptr[Opaque], int]
        assert declared_params(Callable[[], int]) == []

    def test_undeclared_params(self) -> None:
        assert declared_params(Callable[..., int]) is None
        assert declared_params(Callable) is None


class TestSignatureOfCallableType:
    """Tests for signature_of_callable_type."""

    def test_slot_signature(self) -> None:
        sig = signature_of_callable_type(Callable[[ConstPtr[Opaque], int], None])
        assert sig.params == (ERASED_CONST, TypeRef.value(int))
        assert sig.returns.name == "None"
        assert not sig.receiver

    def test_ellipsis_raises(self) -> None:
        with pytest.raises(TypeError, match="declares no parameter list"):
            signature_of_callable_type(Callable[..., int])


class TestSignatureOfFunction:
    """Tests for signature_of_function."""

    def test_implicit_receiver(self) -> None:
        sig = signature_of_function(Receivers.implicit, Receivers, implicit_self=True)
        assert sig.params == (TypeRef.pointer(Receivers, mutable=True), TypeRef.value(int))
        assert sig.returns == TypeRef.value(int)
        assert sig.receiver

    def test_self_annotation_is_receiver(self) -> None:
        sig = signature_of_function(Receivers.self_typed, Receivers, implicit_self=True)
        assert sig.first == TypeRef.pointer(Receivers, mutable=True)
        assert sig.receiver

    def test_owner_forward_reference_is_receiver(self) -> None:
        sig = signature_of_function(Receivers.owner_typed, Receivers, implicit_self=True)
        assert sig.first == TypeRef.pointer(Receivers, mutable=True)
        assert sig.receiver

    def test_explicit_pointer_is_not_receiver(self) -> None:
        sig = signature_of_function(Receivers.pointer_typed, Receivers, implicit_self=True)
        assert sig.first == TypeRef.pointer(Receivers, mutable=False)
        assert not sig.receiver

    def test_keyword_only_and_variadic_ignored(self) -> None:
        sig = signature_of_function(Receivers.keyword_only, Receivers, implicit_self=True)
        assert sig.arity == 2

    def test_unannotated_parameters(self) -> None:
        sig = signature_of_function(Receivers.unannotated, Receivers, implicit_self=True)
        assert sig.params[1] == TypeRef.unannotated()
        assert sig.returns == TypeRef.unannotated()

    def test_static_has_no_receiver(self) -> None:
        sig = signature_of_function(Receivers.static, Receivers)
        assert sig.params == (ERASED_MUT,)
        assert sig.returns == TypeRef.value(str)
        assert not sig.receiver

    def test_without_implicit_self_first_is_plain(self) -> None:
        sig = signature_of_function(Counter.add)
        assert sig.params[0] == TypeRef.unannotated()

    def test_unresolvable_annotation_raises(self) -> None:
        with pytest.raises(NameError):
            signature_of_function(unresolvable)
