"""Comment blanking for JS/TS source text."""

from __future__ import annotations

_QUOTES = frozenset("'\"`")


def blank_comments(text: str) -> str:
    """Replace // and /* */ comments with spaces.

    String literals are skipped so "https://..." survives. Newlines are
    kept, so offsets and line numbers in the result match the input.

    Args:
        text: Raw source

    Returns:
        Source of the same length with comment characters blanked
    """
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if char == "/" and nxt == "/":
            end = text.find("\n", i)
            end = n if end == -1 else end
            out.append(" " * (end - i))
            i = end
        elif char == "/" and nxt == "*":
            end = text.find("*/", i + 2)
            end = n if end == -1 else end + 2
            out.append("".join("\n" if c == "\n" else " " for c in text[i:end]))
            i = end
        elif char in _QUOTES:
            end = _string_end(text, i)
            out.append(text[i:end])
            i = end
        else:
            out.append(char)
            i += 1
    return "".join(out)


def _string_end(text: str, start: int) -> int:
    """Index just past the string literal opened at start."""
    quote = text[start]
    i = start + 1
    n = len(text)
    while i < n:
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == quote:
            return i + 1
        if char == "\n" and quote != "`":
            # unterminated single-line string: stop at end of line
            return i
        i += 1
    return n


def line_of(text: str, offset: int) -> int:
    """1-based line number of offset in text."""
    return text.count("\n", 0, offset) + 1
