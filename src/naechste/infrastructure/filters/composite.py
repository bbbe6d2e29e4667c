"""Filter composition."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from naechste.domain.model.file_entry import FileEntry
    from naechste.infrastructure.filters.types import Filter


def all_of(*filters: Filter) -> Filter:
    """Combine filters so an entry is selected only when every one accepts it.

    Filters are applied in order and evaluation stops at the first
    rejection, so cheap filters belong first. No filters selects
    everything.

    Example:
        selector = all_of(include_paths(check.match.glob), exclude_paths(*excludes))
    """

    def _filter(entry: FileEntry) -> bool:
        return all(f(entry) for f in filters)

    return _filter
