"""naechste - convention checker for Next.js style frontend source trees.

Usage:
    from naechste import JsonReporter, lint

    result = lint("my-app", {"rules": {"server_side_exports": {"severity": "error"}}})
    print(JsonReporter().report(result), end="")
    raise SystemExit(result.exit_code)
"""

__version__ = "0.1.0"

from naechste.application.config import resolve_configuration
from naechste.application.reporters import (
    ConsoleReporter,
    JsonReporter,
    PlainTextReporter,
    parse_diagnostics,
)
from naechste.application.services import Linter, lint
from naechste.domain.exceptions import (
    CollectionFrozenError,
    ConfigurationError,
    NaechsteError,
    PatternError,
)
from naechste.domain.model.check_result import CheckResult
from naechste.domain.model.configuration import Configuration
from naechste.domain.model.diagnostic import Diagnostic
from naechste.domain.model.diagnostic_collection import DiagnosticCollection
from naechste.domain.model.enums import Severity

__all__ = [
    "CheckResult",
    "CollectionFrozenError",
    "Configuration",
    "ConfigurationError",
    "ConsoleReporter",
    "Diagnostic",
    "DiagnosticCollection",
    "JsonReporter",
    "Linter",
    "NaechsteError",
    "PatternError",
    "PlainTextReporter",
    "Severity",
    "__version__",
    "lint",
    "parse_diagnostics",
    "resolve_configuration",
]
