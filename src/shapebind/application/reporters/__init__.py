"""Reporters for conformance results.

ConsoleReporter renders with rich; PlainTextReporter uses stdlib only.
Both return strings and never print.
"""

from shapebind.application.reporters.console import ConsoleConfig, ConsoleReporter
from shapebind.application.reporters.plain_text import PlainTextReporter
from shapebind.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
    "ReporterProtocol",
]
