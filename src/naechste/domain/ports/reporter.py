"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from naechste.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Protocol for check result reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, result: CheckResult) -> str:
        """Format check result as string.

        Args:
            result: Check result to format.

        Returns:
            Formatted string representation.
        """
        ...
