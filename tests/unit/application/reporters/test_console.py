"""Tests for reporters/console.py."""

from naechste.application.reporters.console import ConsoleReporter
from naechste.domain.model.check_result import CheckResult
from naechste.domain.model.enums import Severity
from tests.factories import make_diagnostic, make_result


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_no_issues(self) -> None:
        """Empty result prints the success line."""
        output = ConsoleReporter(color=False).report(CheckResult.empty())

        assert output == "No issues found!\n"

    def test_plain_content(self) -> None:
        """Without color the text matches the plain layout."""
        result = make_result(
            make_diagnostic(
                file="app/widget.tsx",
                rule="server-side-exports",
                message="Server-side export 'getStaticProps' found in client component",
                severity=Severity.ERROR,
                line=3,
            )
        )

        output = ConsoleReporter(color=False).report(result)

        assert "error: Server-side export 'getStaticProps' found in client component" in output
        assert "[server-side-exports]" in output
        assert "  --> app/widget.tsx:3" in output
        assert output.rstrip().endswith("Found 1 error and 0 warnings")
        assert "\x1b[" not in output

    def test_markup_escaped(self) -> None:
        """Brackets in messages and paths are printed literally."""
        result = make_result(
            make_diagnostic(file="app/[slug]/page.tsx", message="Bad [bold]thing[/bold]")
        )

        output = ConsoleReporter(color=False).report(result)

        assert "Bad [bold]thing[/bold]" in output
        assert "app/[slug]/page.tsx" in output

    def test_color(self) -> None:
        """color=True emits ANSI styles."""
        result = make_result(make_diagnostic(severity=Severity.ERROR))

        output = ConsoleReporter(color=True).report(result)

        assert "\x1b[" in output
        assert "error" in output
