"""Component nesting depth rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

from naechste.application.rules._base import BaseFileRule
from naechste.domain.model.configuration import NestingDepthOptions

if TYPE_CHECKING:
    from naechste.domain.model.diagnostic import Diagnostic
    from naechste.domain.model.file_entry import FileEntry

ROUTE_ROOTS: frozenset[str] = frozenset({"app", "pages"})


def nesting_depth(parts: tuple[str, ...]) -> int | None:
    """Compute depth of a file under a routing root.

    Depth counts path segments from the routing root directory
    (inclusive) to the file name (inclusive). The root must be the
    first segment, or the second one below "src".

    Examples:
        ("app", "page.tsx") → 2
        ("app", "a", "b", "c", "page.tsx") → 5
        ("src", "pages", "index.tsx") → 2
        ("components", "Button.tsx") → None

    Args:
        parts: Relative path segments, file name last

    Returns:
        Depth, None if the file is not under a routing root
    """
    start = 1 if parts and parts[0] == "src" else 0
    if len(parts) - start < 2 or parts[start] not in ROUTE_ROOTS:
        return None
    return len(parts) - start


class NestingDepthRule(BaseFileRule):
    """Flags files nested too deeply under app/ or pages/."""

    rule_id = "component-nesting-depth"
    options_type = NestingDepthOptions

    def evaluate(self, entry: FileEntry) -> tuple[Diagnostic, ...]:
        depth = nesting_depth(entry.parts)
        maximum = self._options.max_nesting_depth
        if depth is None or depth <= maximum:
            return ()
        return (
            self.diagnostic(
                entry, f"Component nesting depth {depth} exceeds maximum of {maximum}"
            ),
        )
