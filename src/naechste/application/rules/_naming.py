"""File name classification shared by naming rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from naechste.domain.model.file_entry import FileEntry

# Framework-reserved names: routing files, middleware, entry points.
SPECIAL_FILE_NAMES: frozenset[str] = frozenset(
    {
        "page",
        "layout",
        "template",
        "loading",
        "error",
        "global-error",
        "not-found",
        "route",
        "default",
        "middleware",
        "instrumentation",
        "index",
        "_app",
        "_document",
    }
)

CONFIG_FILE_NAMES: frozenset[str] = frozenset({"tsconfig", "jsconfig"})

COMPANION_MARKERS: tuple[str, ...] = (".test.", ".spec.", ".stories.", ".story.")

COMPONENT_EXTENSIONS: frozenset[str] = frozenset({".tsx", ".jsx"})


def is_special_file(entry: FileEntry) -> bool:
    """True for framework-reserved names ("page.tsx", "_app.js")."""
    return entry.stem in SPECIAL_FILE_NAMES or entry.base_name in SPECIAL_FILE_NAMES


def is_config_file(entry: FileEntry) -> bool:
    """True for tool config files ("next.config.mjs", "tsconfig.json")."""
    stem = entry.stem
    return stem.endswith(".config") or stem in CONFIG_FILE_NAMES


def is_dynamic_segment(entry: FileEntry) -> bool:
    """True for dynamic route names ("[id].tsx", "[...slug].tsx")."""
    return entry.name.startswith("[")


def is_exempt_from_naming(entry: FileEntry) -> bool:
    """Files whose names are dictated by tooling, never style-checked."""
    return (
        entry.name.startswith(".")
        or is_special_file(entry)
        or is_config_file(entry)
        or is_dynamic_segment(entry)
    )


def is_companion_file(entry: FileEntry) -> bool:
    """True for test and story files ("Button.test.tsx")."""
    name = entry.name
    return any(marker in name for marker in COMPANION_MARKERS)


def is_component_file(entry: FileEntry) -> bool:
    """Component-like: JSX extension, not a companion, not tooling-named."""
    return (
        entry.extension in COMPONENT_EXTENSIONS
        and not is_companion_file(entry)
        and not is_exempt_from_naming(entry)
    )
