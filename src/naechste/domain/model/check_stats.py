"""Run statistics."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Statistics of one lint run. Not part of the JSON contract.

    Attributes:
        files_checked: Files produced by the walker
        rules_run: Enabled rules evaluated
        organization_checks_run: Organization checks evaluated
        import_graph_built: Whether the import graph was needed
        analysis_time_ms: Wall time of the run
    """

    files_checked: int
    rules_run: int
    organization_checks_run: int
    import_graph_built: bool
    analysis_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.files_checked < 0:
            raise ValueError(f"files_checked must be >= 0, got {self.files_checked}")
        if self.rules_run < 0:
            raise ValueError(f"rules_run must be >= 0, got {self.rules_run}")
        if self.organization_checks_run < 0:
            raise ValueError(
                f"organization_checks_run must be >= 0, got {self.organization_checks_run}"
            )
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> "CheckStats":
        """Create empty stats."""
        return cls(
            files_checked=0,
            rules_run=0,
            organization_checks_run=0,
            import_graph_built=False,
            analysis_time_ms=0.0,
        )
