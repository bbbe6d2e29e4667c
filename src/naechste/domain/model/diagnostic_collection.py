"""Diagnostic collection: append-only, then finalized into canonical order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from naechste.domain.exceptions import CollectionFrozenError
from naechste.domain.model.diagnostic import Diagnostic
from naechste.domain.model.enums import Severity


class DiagnosticCollection:
    """Ordered diagnostics of one run.

    Append-only while rules evaluate. finalize() sorts by
    (file, rule, message) and freezes the collection; after that
    the order is stable and counts are final.

    Iteration, len() and equality work in both states.
    """

    __slots__ = ("_items", "_finalized")

    def __init__(self, diagnostics: Iterable[Diagnostic] = ()) -> None:
        """Initialize with optional initial diagnostics (insertion order kept)."""
        self._items: list[Diagnostic] = list(diagnostics)
        self._finalized = False

    def add(self, diagnostic: Diagnostic) -> None:
        """Append one diagnostic.

        Raises:
            CollectionFrozenError: If already finalized
        """
        if self._finalized:
            raise CollectionFrozenError
        self._items.append(diagnostic)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append diagnostics in order.

        Raises:
            CollectionFrozenError: If already finalized
        """
        if self._finalized:
            raise CollectionFrozenError
        self._items.extend(diagnostics)

    def finalize(self) -> DiagnosticCollection:
        """Sort into canonical order and freeze. Idempotent.

        Returns:
            self, for chaining
        """
        if not self._finalized:
            self._items.sort(key=lambda d: d.sort_key)
            self._finalized = True
        return self

    @property
    def finalized(self) -> bool:
        """True once finalize() ran."""
        return self._finalized

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Snapshot of current diagnostics."""
        return tuple(self._items)

    @property
    def error_count(self) -> int:
        """Number of ERROR diagnostics."""
        return sum(1 for d in self._items if d.severity is Severity.ERROR)

    @property
    def warn_count(self) -> int:
        """Number of WARN diagnostics."""
        return sum(1 for d in self._items if d.severity is Severity.WARN)

    def to_dict(self) -> dict[str, object]:
        """Convert to the JSON contract: {"diagnostics": [...]}."""
        return {"diagnostics": [d.to_dict() for d in self._items]}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> DiagnosticCollection:
        """Rebuild a finalized collection from the JSON contract.

        Raises:
            ValueError: If "diagnostics" is missing or not a list
        """
        raw = data.get("diagnostics")
        if not isinstance(raw, Sequence) or isinstance(raw, str):
            raise ValueError("'diagnostics' must be a list")
        items: list[Diagnostic] = []
        for entry in raw:
            if not isinstance(entry, Mapping):
                raise ValueError(f"diagnostic entry must be an object, got {entry!r}")
            items.append(Diagnostic.from_dict(entry))
        return cls(items).finalize()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiagnosticCollection):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else "open"
        return f"DiagnosticCollection({len(self._items)} diagnostics, {state})"
