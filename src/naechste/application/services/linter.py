"""Main facade for linting a project tree.

Linter is the primary entry point. Composition-based: accepts rules,
reporting is left to the caller.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TYPE_CHECKING, Any, Self

from naechste.application.config import resolve_configuration
from naechste.application.discovery import io_warning, walk_project
from naechste.application.rules import batch_rules_from_config, file_rules_from_config
from naechste.application.rules.file_organization import FileOrganizationRule
from naechste.application.static_analysis import LazyImportGraph
from naechste.domain.model.check_result import CheckResult
from naechste.domain.model.check_stats import CheckStats
from naechste.domain.model.configuration import Configuration
from naechste.domain.model.diagnostic_collection import DiagnosticCollection

if TYPE_CHECKING:
    from naechste.domain.model.diagnostic import Diagnostic
    from naechste.domain.model.file_entry import FileEntry
    from naechste.domain.ports.rule import BatchRuleProtocol, FileRuleProtocol

logger = logging.getLogger(__name__)


class Linter:
    """Main facade for convention checking.

    Walks the project, runs per-file rules for every file, then batch
    rules over the whole file set, and returns a finalized CheckResult.

    Factory methods:
    - from_config(): Rules based on Configuration or a raw mapping

    Example:
        linter = Linter.from_config(Path("my-app"), {"rules": {...}})
        result = linter.check()
        if not result.passed:
            print(f"Errors: {result.error_count}")
    """

    def __init__(
        self,
        root: Path,
        config: Configuration,
        *,
        file_rules: Sequence[FileRuleProtocol] = (),
        batch_rules: Sequence[BatchRuleProtocol] = (),
        max_workers: int | None = None,
    ) -> None:
        """Initialize linter with dependencies.

        Args:
            root: Project root directory
            config: Resolved configuration (walker settings)
            file_rules: Per-file rules to run
            batch_rules: Batch rules to run after per-file rules
            max_workers: Threads for per-file rules, None or 1 = sequential

        Raises:
            ValueError: If max_workers < 1
        """
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._root = Path(root)
        self._config = config
        self._file_rules = tuple(file_rules)
        self._batch_rules = tuple(batch_rules)
        self._max_workers = max_workers

    @classmethod
    def from_config(
        cls,
        root: Path | str,
        config: Configuration | Mapping[str, Any] | None = None,
        *,
        max_workers: int | None = None,
    ) -> Self:
        """Create linter with rules based on config.

        Args:
            root: Project root directory
            config: Resolved Configuration, raw mapping, or None for defaults
            max_workers: Threads for per-file rules

        Returns:
            Linter with enabled rules

        Raises:
            ConfigurationError: If a raw mapping does not resolve
        """
        if not isinstance(config, Configuration):
            config = resolve_configuration(config)
        return cls(
            Path(root),
            config,
            file_rules=file_rules_from_config(config),
            batch_rules=batch_rules_from_config(config),
            max_workers=max_workers,
        )

    def check(self) -> CheckResult:
        """Run all rules over the project and return the result.

        Returns:
            CheckResult with finalized diagnostics and stats

        Raises:
            ValueError: If root is not a directory
        """
        start_time = time.perf_counter()

        walk = walk_project(self._root, self._config)
        files = walk.files

        collection = DiagnosticCollection()
        collection.extend(walk.io_diagnostics)
        collection.extend(self._run_file_rules(files))

        graph = LazyImportGraph(files)
        for rule in self._batch_rules:
            collection.extend(rule.evaluate(files, graph))

        if self._config.report_io_warnings:
            collection.extend(
                io_warning(entry.relative, entry.read_error)
                for entry in files
                if entry.read_error is not None
            )

        collection.finalize()
        stats = self._build_stats(len(files), graph.is_built, time.perf_counter() - start_time)
        result = CheckResult(collection=collection, stats=stats)
        logger.debug(
            "Checked %d files: %d errors, %d warnings",
            stats.files_checked,
            result.error_count,
            result.warn_count,
        )

        return result

    def _run_file_rules(self, files: Sequence[FileEntry]) -> list[Diagnostic]:
        """Run per-file rules, in parallel when max_workers > 1.

        Output order does not depend on scheduling: results are
        collected in file order and sorted on finalize anyway.
        """
        if not self._file_rules:
            return []
        if self._max_workers is None or self._max_workers == 1:
            per_file = [self._check_file(entry) for entry in files]
        else:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                per_file = list(pool.map(self._check_file, files))
        return [diagnostic for found in per_file for diagnostic in found]

    def _check_file(self, entry: FileEntry) -> list[Diagnostic]:
        found: list[Diagnostic] = []
        for rule in self._file_rules:
            found.extend(rule.evaluate(entry))
        return found

    def _build_stats(self, file_count: int, graph_built: bool, elapsed_s: float) -> CheckStats:
        organization_checks = sum(
            len(rule.checks) for rule in self._batch_rules if isinstance(rule, FileOrganizationRule)
        )
        return CheckStats(
            files_checked=file_count,
            rules_run=len(self._file_rules) + len(self._batch_rules),
            organization_checks_run=organization_checks,
            import_graph_built=graph_built,
            analysis_time_ms=elapsed_s * 1000,
        )


def lint(
    root: Path | str,
    config: Configuration | Mapping[str, Any] | None = None,
    *,
    max_workers: int | None = None,
) -> CheckResult:
    """Lint a project tree with the given configuration.

    Args:
        root: Project root directory
        config: Resolved Configuration, raw mapping, or None for defaults
        max_workers: Threads for per-file rules

    Returns:
        Finalized CheckResult

    Raises:
        ConfigurationError: If the configuration is invalid
        ValueError: If root is not a directory
    """
    return Linter.from_config(root, config, max_workers=max_workers).check()
