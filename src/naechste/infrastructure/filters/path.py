"""Path filters and glob matching.

Globs use fnmatch semantics on project-relative POSIX paths:
* matches any characters INCLUDING /, so "**/page.tsx" and "*/page.tsx"
behave alike. A pattern is also tried against "/" + path, which lets
"**/page.tsx" match a root-level "page.tsx". Single-level brace groups
("*.{ts,tsx}") are expanded before matching. Matching is case-sensitive
on every platform.
"""

from __future__ import annotations

import fnmatch
import re
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from naechste.domain.model.file_entry import FileEntry
    from naechste.infrastructure.filters.types import Filter

_BRACE_GROUP = re.compile(r"\{([^{}]*)\}")


@lru_cache(maxsize=512)
def expand_braces(pattern: str) -> tuple[str, ...]:
    """Expand {a,b} groups into alternative patterns.

    Example:
        >>> expand_braces("*.{ts,tsx}")
        ('*.ts', '*.tsx')
    """
    match = _BRACE_GROUP.search(pattern)
    if match is None:
        return (pattern,)
    head = pattern[: match.start()]
    tail = pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return tuple(expanded)


def matches_glob(relative: str, pattern: str) -> bool:
    """Check a project-relative path against a glob.

    Args:
        relative: Path relative to project root ("app/page.tsx")
        pattern: Glob ("**/page.tsx", "components/*.{ts,tsx}")

    Returns:
        True if the path matches
    """
    rooted = f"/{relative}"
    return any(
        fnmatch.fnmatchcase(relative, alt) or fnmatch.fnmatchcase(rooted, alt)
        for alt in expand_braces(pattern)
    )


def matches_name(name: str, pattern: str) -> bool:
    """Check a bare file name against a glob (no directory part)."""
    return any(fnmatch.fnmatchcase(name, alt) for alt in expand_braces(pattern))


def include_paths(*patterns: str) -> Filter:
    """Create filter that includes files matching any pattern.

    Args:
        *patterns: Globs over the relative path (e.g., "app/**").

    Returns:
        Filter that returns True for entries matching any pattern.
    """

    def _filter(entry: FileEntry) -> bool:
        return any(matches_glob(entry.relative, p) for p in patterns)

    return _filter


def exclude_paths(*patterns: str) -> Filter:
    """Create filter that excludes files matching any pattern.

    Args:
        *patterns: Globs to exclude (e.g., "**/page.tsx").

    Returns:
        Filter that returns False for entries matching any pattern.
        No patterns = every entry passes.
    """

    def _filter(entry: FileEntry) -> bool:
        return not any(matches_glob(entry.relative, p) for p in patterns)

    return _filter


def is_under_any_prefix(directory: str, prefixes: tuple[str, ...]) -> bool:
    """Check whether a relative directory lies under one of the prefixes.

    Comparison is per path segment: "components/ui" covers
    "components/ui" and "components/ui/forms", not "components/uikit".

    Args:
        directory: Relative directory ("" for project root)
        prefixes: Relative prefixes, slashes at either end ignored

    Returns:
        True if directory equals or is below any prefix
    """
    dir_parts = tuple(p for p in directory.split("/") if p)
    for prefix in prefixes:
        prefix_parts = tuple(p for p in prefix.split("/") if p)
        if prefix_parts and dir_parts[: len(prefix_parts)] == prefix_parts:
            return True
    return False
