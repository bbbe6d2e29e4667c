"""Console reporter: CheckResult → rich formatted string."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from naechste.application.reporters._base import BaseReporter
from naechste.application.reporters.plain_text import format_location, format_totals
from naechste.domain.model.enums import Severity

if TYPE_CHECKING:
    from naechste.domain.model.check_result import CheckResult
    from naechste.domain.model.diagnostic import Diagnostic

_SEVERITY_STYLE = {
    Severity.ERROR: "bold red",
    Severity.WARN: "bold yellow",
}


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    Same content as PlainTextReporter, with colors.
    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, *, width: int = 120, color: bool = True) -> None:
        """Initialize reporter.

        Args:
            width: Console width used for wrapping
            color: Emit ANSI styles (False renders plain text)
        """
        self._width = width
        self._color = color

    def report(self, result: CheckResult) -> str:
        """Format check results as rich formatted string.

        Args:
            result: Check result with finalized diagnostics

        Returns:
            Formatted string with colors
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._color,
            no_color=not self._color,
            width=self._width,
        )

        if not result.diagnostics:
            console.print("[bold green]No issues found![/bold green]")
            return output.getvalue()

        for diagnostic in result.diagnostics:
            self._render_diagnostic(console, diagnostic)

        style = "bold red" if result.error_count else "bold yellow"
        console.print(f"[{style}]{format_totals(result)}[/{style}]")
        return output.getvalue()

    def _render_diagnostic(self, console: Console, diagnostic: Diagnostic) -> None:
        """Render one diagnostic block."""
        style = _SEVERITY_STYLE[diagnostic.severity]
        console.print(
            f"[{style}]{diagnostic.severity.value}[/{style}]: "
            f"{escape(diagnostic.message)} [dim]{escape(f'[{diagnostic.rule}]')}[/dim]"
        )
        console.print(f"  [blue]-->[/blue] {escape(format_location(diagnostic))}")
        console.print()
