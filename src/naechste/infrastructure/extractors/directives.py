"""Client directive detection."""

from __future__ import annotations

import re

from naechste.infrastructure.extractors.source import blank_comments

CLIENT_DIRECTIVE = "use client"

# One directive statement: a string literal in any quote style, optional ';'
_DIRECTIVE = re.compile(r"""\s*(['"`])([^'"`\n]*)\1[ \t]*;?""")


def has_client_directive(text: str) -> bool:
    """Check whether source starts with a 'use client' directive.

    Only the directive prologue counts: leading string-literal statements
    before any other code. Comments, blank lines, a BOM and a shebang
    line may precede it. Quote style does not matter.

    Args:
        text: Raw source

    Returns:
        True if 'use client' appears in the directive prologue
    """
    source = text.removeprefix("\ufeff")
    if source.startswith("#!"):
        newline = source.find("\n")
        source = "" if newline == -1 else source[newline:]
    source = blank_comments(source)

    pos = 0
    while True:
        match = _DIRECTIVE.match(source, pos)
        if match is None:
            return False
        if match.group(2).strip() == CLIENT_DIRECTIVE:
            return True
        pos = match.end()
