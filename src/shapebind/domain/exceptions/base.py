"""Base exceptions for shapebind domain."""


class ShapeBindError(Exception):
    """Root exception for all shapebind errors.

    All domain exceptions inherit from this.
    Allows catching all shapebind-specific errors.
    """
