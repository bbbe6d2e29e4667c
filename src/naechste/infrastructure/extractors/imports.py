"""Import specifier extraction."""

from __future__ import annotations

import re

from naechste.infrastructure.extractors.source import blank_comments

_SPEC = r"""(['"])([^'"\n]+)\1"""

_IMPORT_PATTERNS: tuple[re.Pattern[str], ...] = (
    # import x from 'a' / import { a, b } from 'a' / export * from 'a'
    re.compile(rf"\b(?:import|export)\s+(?:type\s+)?[\w$*{{}}\s,]+?\s*from\s*{_SPEC}"),
    # import 'side-effect'
    re.compile(rf"\bimport\s*{_SPEC}"),
    # import('lazy')
    re.compile(rf"\bimport\s*\(\s*{_SPEC}\s*\)"),
    # require('cjs')
    re.compile(rf"\brequire\s*\(\s*{_SPEC}\s*\)"),
)


def extract_imports(text: str) -> tuple[str, ...]:
    """Extract raw import specifiers.

    Covers static imports, side-effect imports, re-exports, dynamic
    import() and require() with literal arguments. Specifiers are not
    resolved. Each appears once, in source order.

    Args:
        text: Raw source

    Returns:
        Specifiers as written
    """
    source = blank_comments(text)
    found: list[tuple[int, str]] = []
    for pattern in _IMPORT_PATTERNS:
        for match in pattern.finditer(source):
            found.append((match.start(2), match.group(2)))

    found.sort()
    seen: set[str] = set()
    result: list[str] = []
    for _, specifier in found:
        if specifier in seen:
            continue
        seen.add(specifier)
        result.append(specifier)
    return tuple(result)
