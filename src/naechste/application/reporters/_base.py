"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from naechste.domain.model.check_result import CheckResult


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Output is str, not print(). Caller decides destination.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: CheckResult) -> str:
                return f"{result.error_count} errors"
    """

    @abstractmethod
    def report(self, result: CheckResult) -> str:
        """Format check results.

        Args:
            result: Check result with finalized diagnostics

        Returns:
            Formatted output
        """
