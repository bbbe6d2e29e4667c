"""JSON reporter for machine-readable output.

Stdlib-only reporter. The default document is exactly

    {"diagnostics": [{"severity", "rule", "message", "file", "line"}, ...]}

with "line" null when a diagnostic has no line.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from naechste.application.reporters._base import BaseReporter
from naechste.domain.model.diagnostic_collection import DiagnosticCollection

if TYPE_CHECKING:
    from naechste.domain.model.check_result import CheckResult


class JsonReporter(BaseReporter):
    """JSON reporter for CI integration and downstream tooling."""

    def __init__(self, *, indent: int | None = 2, include_summary: bool = False) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation (default: 2, None for compact)
            include_summary: Add a "summary" block with counts and pass flag
        """
        self._indent = indent
        self._include_summary = include_summary

    def report(self, result: CheckResult) -> str:
        """Format check results as JSON.

        Args:
            result: Check result with finalized diagnostics

        Returns:
            JSON document, newline-terminated
        """
        data = result.collection.to_dict()
        if self._include_summary:
            data["summary"] = {
                "error_count": result.error_count,
                "warn_count": result.warn_count,
                "passed": result.passed,
            }
        return json.dumps(data, indent=self._indent) + "\n"


def parse_diagnostics(text: str) -> DiagnosticCollection:
    """Rebuild a finalized collection from JSON reporter output.

    Extra top-level keys (such as "summary") are ignored.

    Args:
        text: JSON document

    Returns:
        Finalized DiagnosticCollection

    Raises:
        ValueError: If text is not valid JSON or not the diagnostics shape
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return DiagnosticCollection.from_dict(data)
