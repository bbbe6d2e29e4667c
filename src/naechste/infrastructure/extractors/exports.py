"""Named export extraction."""

from __future__ import annotations

import re
from dataclasses import dataclass

from naechste.infrastructure.extractors.source import blank_comments, line_of

_IDENT = r"[A-Za-z_$][\w$]*"

# Line start, or right after another statement on the same line
_STATEMENT_START = r"(?:^|(?<=[;{}]))[ \t]*"

_DECLARATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        rf"{_STATEMENT_START}export\s+(?:async\s+)?function\s*\*?\s*({_IDENT})", re.MULTILINE
    ),
    re.compile(
        rf"{_STATEMENT_START}export\s+(?:declare\s+)?(?:const|let|var)\s+({_IDENT})",
        re.MULTILINE,
    ),
    re.compile(
        rf"{_STATEMENT_START}export\s+(?:abstract\s+)?class\s+({_IDENT})", re.MULTILINE
    ),
)

_EXPORT_LIST = re.compile(rf"{_STATEMENT_START}export\s*\{{([^}}]*)\}}", re.MULTILINE)
_LIST_ITEM = re.compile(rf"^(?:type\s+)?({_IDENT})(?:\s+as\s+({_IDENT}))?$")


@dataclass(frozen=True, slots=True)
class ExportedName:
    """Identifier exported by a file.

    Attributes:
        name: Exported identifier
        line: 1-based line of the export statement
    """

    name: str
    line: int


def extract_exports(text: str) -> tuple[ExportedName, ...]:
    """Extract named top-level exports.

    Recognizes `export [async] function X`, `export const|let|var X`,
    `export class X` and `export { a, b as c }` (exported name is the
    alias). A statement starts a line or follows ";", "{" or "}".
    Default exports are not named exports. Names appear once, ordered
    by position.

    Args:
        text: Raw source

    Returns:
        Exported names with their lines
    """
    source = blank_comments(text)
    found: list[tuple[int, str]] = []

    for pattern in _DECLARATION_PATTERNS:
        for match in pattern.finditer(source):
            found.append((match.start(1), match.group(1)))

    for match in _EXPORT_LIST.finditer(source):
        for raw in match.group(1).split(","):
            item = " ".join(raw.split())
            item_match = _LIST_ITEM.match(item)
            if item_match is None:
                continue
            exported = item_match.group(2) or item_match.group(1)
            found.append((match.start(), exported))

    found.sort()
    seen: set[str] = set()
    result: list[ExportedName] = []
    for offset, name in found:
        if name in seen:
            continue
        seen.add(name)
        result.append(ExportedName(name=name, line=line_of(source, offset)))
    return tuple(result)
