"""Check result aggregate."""

from dataclasses import dataclass

from naechste.domain.model.check_stats import CheckStats
from naechste.domain.model.diagnostic import Diagnostic
from naechste.domain.model.diagnostic_collection import DiagnosticCollection


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of one lint run.

    Immutable aggregate handed to reporters and to the exit-code decision.

    Attributes:
        collection: Finalized diagnostics in canonical order
        stats: Run statistics
    """

    collection: DiagnosticCollection
    stats: CheckStats

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.collection.finalized:
            raise ValueError("collection must be finalized before building a CheckResult")

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Diagnostics in canonical order."""
        return self.collection.diagnostics

    @property
    def error_count(self) -> int:
        """Number of ERROR diagnostics."""
        return self.collection.error_count

    @property
    def warn_count(self) -> int:
        """Number of WARN diagnostics."""
        return self.collection.warn_count

    @property
    def passed(self) -> bool:
        """True when there are no errors. Warnings never fail a run."""
        return self.collection.error_count == 0

    @property
    def exit_code(self) -> int:
        """Process exit status: 0 passed, 1 failed."""
        return 0 if self.passed else 1

    @classmethod
    def empty(cls) -> "CheckResult":
        """Create empty check result (passed, no diagnostics)."""
        return cls(collection=DiagnosticCollection().finalize(), stats=CheckStats.empty())
