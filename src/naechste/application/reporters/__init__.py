"""Reporters for lint results.

Every reporter returns a string; the caller decides where it goes.
- JsonReporter: the machine-readable diagnostics document
- PlainTextReporter: stdlib text
- ConsoleReporter: rich-styled text
"""

from naechste.application.reporters._base import BaseReporter
from naechste.application.reporters.console import ConsoleReporter
from naechste.application.reporters.json_reporter import JsonReporter, parse_diagnostics
from naechste.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
    "parse_diagnostics",
]
