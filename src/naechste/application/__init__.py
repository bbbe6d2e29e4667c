"""Application layer for convention checking.

Components:
- config: Raw mapping → Configuration (deep merge over defaults)
- discovery: Deterministic project walk
- static_analysis: Lazy import graph
- rules: Per-file and batch rules with registry
- reporters: Output formatting (JSON, plain text, rich console)
- services: Main facade (Linter)
"""

from naechste.application.config import resolve_configuration
from naechste.application.discovery import WalkResult, walk_project
from naechste.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JsonReporter,
    PlainTextReporter,
    parse_diagnostics,
)
from naechste.application.rules import (
    BaseBatchRule,
    BaseFileRule,
    batch_rules_from_config,
    file_rules_from_config,
    rule_ids,
)
from naechste.application.services import Linter, lint
from naechste.application.static_analysis import LazyImportGraph

__all__ = [
    # Config
    "resolve_configuration",
    # Discovery
    "WalkResult",
    "walk_project",
    # Static analysis
    "LazyImportGraph",
    # Rules
    "BaseBatchRule",
    "BaseFileRule",
    "batch_rules_from_config",
    "file_rules_from_config",
    "rule_ids",
    # Reporters
    "BaseReporter",
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
    "parse_diagnostics",
    # Services
    "Linter",
    "lint",
]
