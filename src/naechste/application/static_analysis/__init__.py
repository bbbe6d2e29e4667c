"""Cross-file static analysis: lazy import graph."""

from naechste.application.static_analysis.graph_builder import (
    ImportGraphBuilder,
    LazyImportGraph,
)

__all__ = [
    "ImportGraphBuilder",
    "LazyImportGraph",
]
