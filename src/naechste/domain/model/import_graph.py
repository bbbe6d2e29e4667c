"""File → raw import specifier graph."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class ImportEdge:
    """Importer file → raw, unresolved import specifier.

    Attributes:
        importer: Importer path relative to the project root
        specifier: Specifier exactly as written ("@/components/ui/button")
    """

    importer: str
    specifier: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.importer:
            raise ValueError("importer must not be empty")
        if not self.specifier:
            raise ValueError("specifier must not be empty")


@dataclass(frozen=True, slots=True)
class ImportGraph:
    """Read-only map of each file to the specifiers it imports.

    Built once per run, never mutated. Specifiers are not resolved to
    files: bundler aliases and relative paths stay raw text.

    Attributes:
        imports: Importer relative path → specifiers in source order
    """

    imports: Mapping[str, tuple[str, ...]]

    def __post_init__(self) -> None:
        """Freeze the mapping."""
        if not isinstance(self.imports, MappingProxyType):
            object.__setattr__(self, "imports", MappingProxyType(dict(self.imports)))

    def imports_of(self, importer: str) -> tuple[str, ...]:
        """Specifiers imported by one file. O(1). Unknown file → ()."""
        return self.imports.get(importer, ())

    @property
    def importers(self) -> tuple[str, ...]:
        """All files in the graph, sorted."""
        return tuple(sorted(self.imports))

    def edges(self) -> Iterator[ImportEdge]:
        """All edges, importer-sorted, specifiers in source order."""
        for importer in self.importers:
            for specifier in self.imports[importer]:
                yield ImportEdge(importer=importer, specifier=specifier)

    @property
    def file_count(self) -> int:
        """Number of files in the graph."""
        return len(self.imports)

    @property
    def edge_count(self) -> int:
        """Total number of edges."""
        return sum(len(specs) for specs in self.imports.values())

    @classmethod
    def empty(cls) -> ImportGraph:
        """Create empty import graph."""
        return cls(imports={})
