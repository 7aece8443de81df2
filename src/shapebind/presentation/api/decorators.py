"""Class decorator asserting conformance at definition time."""

from __future__ import annotations

from collections.abc import Callable

from shapebind.application.services.conformance import ConformanceChecker
from shapebind.presentation.api.functions import default_checker


def implements[T: type](
    *shapes: type,
    checker: ConformanceChecker | None = None,
) -> Callable[[T], T]:
    """Assert that the decorated class conforms to every given shape.

    Runs when the class statement executes (usually at import), so a
    non-conforming implementation stops the program before it can run.
    The class is returned unchanged.

    Args:
        *shapes: Interface shapes the class must implement
        checker: Checker to use (default: process-wide)

    Returns:
        Decorator returning the class itself

    Raises:
        ValueError: If no shape is given
        ConformanceError: At decoration time, on the first failing shape
    """
    if not shapes:
        raise ValueError("implements() requires at least one shape")

    def decorate(cls: T) -> T:
        active = checker if checker is not None else default_checker()
        for shape in shapes:
            active.assert_implements(shape, cls)
        return cls

    return decorate
