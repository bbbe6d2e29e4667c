"""Rule protocols.

Two kinds of rule share the same activation pattern:
from_config() returns None when the rule is disabled.

Per-file rules are pure functions of one FileEntry and their options.
Batch rules see the whole file set and may ask for the import graph.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol, Self

if TYPE_CHECKING:
    from collections.abc import Sequence

    from naechste.domain.model.configuration import Configuration
    from naechste.domain.model.diagnostic import Diagnostic
    from naechste.domain.model.enums import RuleKind
    from naechste.domain.model.file_entry import FileEntry
    from naechste.domain.model.import_graph import ImportGraph


class ImportGraphSource(Protocol):
    """Build-once provider of the import graph."""

    def get(self) -> ImportGraph:
        """Return the graph, building it on first call only."""
        ...

    @property
    def is_built(self) -> bool:
        """True once get() has built the graph."""
        ...


class FileRuleProtocol(Protocol):
    """Contract for per-file rules.

    No shared mutable state between evaluate() calls, so files may be
    evaluated in any order or concurrently.
    """

    rule_id: ClassVar[str]
    kind: ClassVar[RuleKind]

    def evaluate(self, entry: FileEntry) -> tuple[Diagnostic, ...]:
        """Evaluate one file.

        Args:
            entry: File to check

        Returns:
            Diagnostics for this file (empty if it conforms)
        """
        ...

    @classmethod
    def from_config(cls, config: Configuration) -> Self | None:
        """Create rule from config, None if disabled."""
        ...


class BatchRuleProtocol(Protocol):
    """Contract for rules evaluated once over the whole file set."""

    rule_id: ClassVar[str]
    kind: ClassVar[RuleKind]

    def evaluate(
        self,
        files: Sequence[FileEntry],
        graph: ImportGraphSource,
    ) -> tuple[Diagnostic, ...]:
        """Evaluate all files.

        Args:
            files: Walked files in canonical order
            graph: Lazy import graph, only touched when needed

        Returns:
            Diagnostics found
        """
        ...

    @classmethod
    def from_config(cls, config: Configuration) -> Self | None:
        """Create rule from config, None if disabled."""
        ...
