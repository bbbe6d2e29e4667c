"""Filename style consistency rule.

A file name is classified by splitting it into words (on hyphens,
underscores and case transitions), rebuilding it in the configured
style and comparing the result with the original. "my-component"
survives a kebab-case rebuild unchanged, "MyComponent" does not.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from naechste.application.rules._base import BaseFileRule
from naechste.application.rules._naming import is_exempt_from_naming
from naechste.domain.model.configuration import FilenameStyleOptions
from naechste.domain.model.enums import FilenameStyle

if TYPE_CHECKING:
    from naechste.domain.model.diagnostic import Diagnostic
    from naechste.domain.model.file_entry import FileEntry

_SEPARATORS = re.compile(r"[-_]")
# Acronym before a capitalized word | optional capital + lower/digits | caps/digits run
_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z0-9]+")


def split_words(name: str) -> tuple[str, ...]:
    """Split a name into lower-case words.

    Examples:
        "my-component" → ("my", "component")
        "MyComponent" → ("my", "component")
        "HTMLParser" → ("html", "parser")
        "user_profile2" → ("user", "profile2")
    """
    words: list[str] = []
    for part in _SEPARATORS.split(name):
        words.extend(word.lower() for word in _WORD.findall(part))
    return tuple(words)


def render(words: tuple[str, ...], style: FilenameStyle) -> str:
    """Join words in the given style."""
    match style:
        case FilenameStyle.KEBAB_CASE:
            return "-".join(words)
        case FilenameStyle.SNAKE_CASE:
            return "_".join(words)
        case FilenameStyle.PASCAL_CASE:
            return "".join(word.capitalize() for word in words)
        case FilenameStyle.CAMEL_CASE:
            if not words:
                return ""
            return words[0] + "".join(word.capitalize() for word in words[1:])


def matches_style(name: str, style: FilenameStyle) -> bool:
    """True if name is already written in style.

    Characters outside words and separators (dots, spaces, "$") never
    survive the rebuild, so such names match no style.
    """
    words = split_words(name)
    return bool(words) and render(words, style) == name


class FilenameStyleRule(BaseFileRule):
    """Flags file names not written in the configured casing style.

    The part of the name before the first dot is classified, so
    "Button.test.tsx" is judged as "Button". Framework-reserved names,
    config files, dotfiles and dynamic route segments are skipped
    before classification.
    """

    rule_id = "filename-style-consistency"
    options_type = FilenameStyleOptions

    def evaluate(self, entry: FileEntry) -> tuple[Diagnostic, ...]:
        if is_exempt_from_naming(entry):
            return ()
        style = self._options.filename_style
        if matches_style(entry.base_name, style):
            return ()
        return (
            self.diagnostic(
                entry, f"Filename '{entry.stem}' does not match expected style: {style.value}"
            ),
        )
