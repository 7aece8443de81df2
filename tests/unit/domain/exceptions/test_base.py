"""Tests for domain/exceptions/base.py."""

import pytest

from shapebind.domain.exceptions.base import ShapeBindError


class TestShapeBindError:
    """Tests for ShapeBindError base exception."""

    def test_is_exception(self) -> None:
        assert issubclass(ShapeBindError, Exception)

    def test_can_raise_and_catch(self) -> None:
        with pytest.raises(ShapeBindError, match="test message"):
            raise ShapeBindError("test message")

    def test_with_args(self) -> None:
        err = ShapeBindError("error", 42)
        assert err.args == ("error", 42)
