"""pytest plugin for shapebind.

Provides fixtures for conformance testing:
    shape_config: Shape field naming convention (override in conftest.py)
    conformance: ConformanceChecker with an isolated verdict cache

Configuration (pytest.ini or pyproject.toml):
    shapebind_self_field: Self-pointer field name (default: "ptr")
    shapebind_table_field: Method table field name (default: "vtable")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from shapebind.presentation.pytest_plugin.fixtures import conformance, shape_config

if TYPE_CHECKING:
    import pytest

__all__ = [
    "conformance",
    "shape_config",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options for field naming."""
    parser.addini("shapebind_self_field", "Self-pointer field name of interface shapes", default="")
    parser.addini("shapebind_table_field", "Method table field name of interface shapes", default="")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "shape_conformance: mark test as interface conformance test",
    )
