"""Plain text reporter.

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from naechste.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from naechste.domain.model.check_result import CheckResult
    from naechste.domain.model.diagnostic import Diagnostic


def format_location(diagnostic: Diagnostic) -> str:
    """Format "file" or "file:line"."""
    if diagnostic.line is None:
        return diagnostic.file
    return f"{diagnostic.file}:{diagnostic.line}"


def format_totals(result: CheckResult) -> str:
    """Format the closing totals line."""
    errors = "error" if result.error_count == 1 else "errors"
    warnings = "warning" if result.warn_count == 1 else "warnings"
    return f"Found {result.error_count} {errors} and {result.warn_count} {warnings}"


class PlainTextReporter(BaseReporter):
    """Plain text reporter, one block per diagnostic.

    Example output:
        error: Server-side export 'getStaticProps' found in client component [server-side-exports]
          --> app/widget.tsx:3

        Found 1 error and 0 warnings
    """

    def report(self, result: CheckResult) -> str:
        """Format check results as plain text.

        Args:
            result: Check result with finalized diagnostics

        Returns:
            Text output, newline-terminated
        """
        if not result.diagnostics:
            return "No issues found!\n"

        lines: list[str] = []
        for diagnostic in result.diagnostics:
            lines.append(
                f"{diagnostic.severity.value}: {diagnostic.message} [{diagnostic.rule}]"
            )
            lines.append(f"  --> {format_location(diagnostic)}")
            lines.append("")
        lines.append(format_totals(result))
        return "\n".join(lines) + "\n"
