"""Project discovery: deterministic walk of candidate files."""

from naechste.application.discovery.walker import (
    IO_WARNING_RULE,
    WalkResult,
    io_warning,
    walk_project,
)

__all__ = [
    "IO_WARNING_RULE",
    "WalkResult",
    "io_warning",
    "walk_project",
]
