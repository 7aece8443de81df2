"""Application layer.

- services: ConformanceChecker facade and the process-wide verdict cache
- reporters: Output formatting (rich console, plain text)
"""

from shapebind.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    PlainTextReporter,
    ReporterProtocol,
)
from shapebind.application.services import DEFAULT_CACHE, ConformanceChecker, VerdictCache

__all__ = [
    # Services
    "ConformanceChecker",
    "DEFAULT_CACHE",
    "VerdictCache",
    # Reporters
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
    "ReporterProtocol",
]
