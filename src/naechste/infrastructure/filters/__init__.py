"""Infrastructure layer: stateless file filters.

Filters are pure functions: Filter = Callable[[FileEntry], bool]
True = include entry, False = exclude entry.

Usage:
    from naechste.infrastructure.filters import all_of, exclude_paths, include_paths

    flt = all_of(include_paths("**/*.tsx"), exclude_paths("**/page.tsx"))
    selected = [e for e in entries if flt(e)]
"""

from naechste.infrastructure.filters.composite import all_of
from naechste.infrastructure.filters.path import (
    exclude_paths,
    expand_braces,
    include_paths,
    is_under_any_prefix,
    matches_glob,
    matches_name,
)
from naechste.infrastructure.filters.types import Filter

__all__ = [
    "Filter",
    "all_of",
    "exclude_paths",
    "expand_braces",
    "include_paths",
    "is_under_any_prefix",
    "matches_glob",
    "matches_name",
]
