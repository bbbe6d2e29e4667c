"""Tests for the shared reporter contract."""

import pytest

from naechste.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JsonReporter,
    PlainTextReporter,
)
from naechste.domain.model.check_result import CheckResult
from naechste.domain.ports import ReporterProtocol


class TestReporterContract:
    """Every reporter returns text for the caller to place."""

    @pytest.mark.parametrize(
        "reporter",
        [JsonReporter(), PlainTextReporter(), ConsoleReporter(color=False)],
        ids=["json", "plain", "console"],
    )
    def test_returns_newline_terminated_str(self, reporter: ReporterProtocol) -> None:
        """report() returns str, never prints."""
        output = reporter.report(CheckResult.empty())

        assert isinstance(output, str)
        assert output.endswith("\n")

    def test_base_is_abstract(self) -> None:
        """BaseReporter cannot be used without report()."""
        with pytest.raises(TypeError):
            BaseReporter()  # type: ignore[abstract]
