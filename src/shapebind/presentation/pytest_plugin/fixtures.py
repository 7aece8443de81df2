"""pytest fixtures for conformance testing.

User overrides shape_config in their conftest.py to use non-default
field names.
"""

from __future__ import annotations

import pytest

from shapebind.application.services import ConformanceChecker, VerdictCache
from shapebind.domain.model.configuration import DEFAULT_CONFIG, ShapeConfig


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


@pytest.fixture(scope="session")
def shape_config(request: pytest.FixtureRequest) -> ShapeConfig:
    """Field naming convention for shapes.

    Reads shapebind_self_field and shapebind_table_field from pytest.ini.

    Returns:
        ShapeConfig
    """
    return ShapeConfig(
        self_field=_get_ini_value(request.config, "shapebind_self_field", DEFAULT_CONFIG.self_field),
        table_field=_get_ini_value(request.config, "shapebind_table_field", DEFAULT_CONFIG.table_field),
    )


@pytest.fixture
def conformance(shape_config: ShapeConfig) -> ConformanceChecker:
    """ConformanceChecker with a fresh verdict cache per test.

    Returns:
        ConformanceChecker isolated from the process-wide cache
    """
    return ConformanceChecker(shape_config, cache=VerdictCache())
