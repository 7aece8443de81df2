"""Application services."""

from shapebind.application.services.conformance import ConformanceChecker
from shapebind.application.services.verdict_cache import DEFAULT_CACHE, VerdictCache

__all__ = [
    "ConformanceChecker",
    "DEFAULT_CACHE",
    "VerdictCache",
]
