"""Import graph builder from walked files."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import TYPE_CHECKING

from naechste.domain.model.import_graph import ImportGraph
from naechste.infrastructure.extractors import extract_imports

if TYPE_CHECKING:
    from naechste.domain.model.file_entry import FileEntry

logger = logging.getLogger(__name__)


class ImportGraphBuilder:
    """Builds ImportGraph from FileEntry sequence.

    Every file gets an entry, files without imports (or unreadable
    ones) map to an empty tuple.

    Stateless - no state between build() calls.
    """

    def build(self, files: Sequence[FileEntry]) -> ImportGraph:
        """Build ImportGraph from files.

        Args:
            files: Walked files

        Returns:
            ImportGraph keyed by relative path
        """
        imports: dict[str, tuple[str, ...]] = {}
        for entry in files:
            text = entry.text
            imports[entry.relative] = extract_imports(text) if text is not None else ()
        return ImportGraph(imports=imports)


class LazyImportGraph:
    """Build-once ImportGraphSource over a fixed file set.

    The graph is built on the first get() and reused afterwards; it is
    never rebuilt within a run. Thread-safe.
    """

    def __init__(
        self,
        files: Sequence[FileEntry],
        builder: ImportGraphBuilder | None = None,
    ) -> None:
        """Initialize with the run's files.

        Args:
            files: Walked files the graph covers
            builder: Graph builder (default: ImportGraphBuilder())
        """
        self._files = tuple(files)
        self._builder = builder or ImportGraphBuilder()
        self._graph: ImportGraph | None = None
        self._lock = threading.Lock()
        self._build_count = 0

    def get(self) -> ImportGraph:
        """Return the graph, building it on first call only."""
        with self._lock:
            if self._graph is None:
                self._graph = self._builder.build(self._files)
                self._build_count += 1
                logger.debug(
                    "Built import graph: %d files, %d edges",
                    self._graph.file_count,
                    self._graph.edge_count,
                )
            return self._graph

    @property
    def is_built(self) -> bool:
        """True once get() has built the graph."""
        return self._graph is not None

    @property
    def build_count(self) -> int:
        """How many times the graph was built (0 or 1)."""
        return self._build_count
