"""Deterministic project traversal."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from naechste.domain.model.diagnostic import Diagnostic
from naechste.domain.model.enums import Severity
from naechste.domain.model.file_entry import FileEntry

if TYPE_CHECKING:
    from naechste.domain.model.configuration import Configuration

logger = logging.getLogger(__name__)

IO_WARNING_RULE = "io-warning"


@dataclass(frozen=True, slots=True)
class WalkResult:
    """Files found by one walk.

    Attributes:
        files: Candidate files sorted by relative path
        io_diagnostics: Skipped paths, empty when report_io_warnings is off
    """

    files: tuple[FileEntry, ...]
    io_diagnostics: tuple[Diagnostic, ...] = ()


def io_warning(relative: str, reason: str) -> Diagnostic:
    """Build the non-blocking diagnostic for a skipped path."""
    return Diagnostic(
        severity=Severity.WARN,
        rule=IO_WARNING_RULE,
        message=f"Skipped unreadable path: {reason}",
        file=relative,
    )


def walk_project(root: Path, config: Configuration) -> WalkResult:
    """Collect candidate files under root.

    Recurses into every directory except those named in
    config.ignored_dirs. Symlinked directories are followed once;
    a directory already on the walk (same device and inode) is a cycle
    and is skipped. Permission errors and broken links skip the path
    and the walk continues.

    Ordering is lexicographic by relative POSIX path, independent of
    the order the filesystem enumerates entries.

    Args:
        root: Project root directory
        config: Resolved configuration (ignored dirs, extensions)

    Returns:
        WalkResult with sorted files and I/O diagnostics

    Raises:
        ValueError: If root is not a directory
    """
    if not root.is_dir():
        raise ValueError(f"root must be a directory: {root}")

    root = root.resolve()
    files: list[FileEntry] = []
    problems: list[tuple[str, str]] = []
    visited: set[tuple[int, int]] = set()

    def relative_of(path: Path) -> str:
        rel = path.relative_to(root).as_posix()
        return "." if rel in ("", ".") else rel

    def visit(directory: Path) -> None:
        try:
            stat = directory.stat()
        except OSError as exc:
            problems.append((relative_of(directory), exc.strerror or type(exc).__name__))
            return
        identity = (stat.st_dev, stat.st_ino)
        if identity in visited:
            problems.append((relative_of(directory), "symlink cycle"))
            return
        visited.add(identity)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            problems.append((relative_of(directory), exc.strerror or type(exc).__name__))
            return

        for entry in entries:
            path = directory / entry.name
            try:
                is_dir = entry.is_dir()
                is_file = not is_dir and entry.is_file()
            except OSError as exc:
                problems.append((relative_of(path), exc.strerror or type(exc).__name__))
                continue

            if is_dir:
                if entry.name not in config.ignored_dirs:
                    visit(path)
            elif is_file:
                if path.suffix.lower() in config.extensions:
                    files.append(FileEntry.from_path(root, path))
            elif entry.is_symlink():
                problems.append((relative_of(path), "broken symlink"))

        visited.discard(identity)

    visit(root)
    files.sort(key=lambda f: f.relative)

    for relative, reason in problems:
        logger.warning("Skipping %s: %s", relative, reason)
    logger.debug("Walked %s: %d files, %d skipped paths", root, len(files), len(problems))

    diagnostics: tuple[Diagnostic, ...] = ()
    if config.report_io_warnings:
        diagnostics = tuple(io_warning(relative, reason) for relative, reason in problems)
    return WalkResult(files=tuple(files), io_diagnostics=diagnostics)
