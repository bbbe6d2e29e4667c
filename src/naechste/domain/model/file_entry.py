"""Candidate source file of one run."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileEntry:
    """One walked file.

    Identity fields are immutable. Text content and the sibling listing
    are loaded on first access and cached, so every file is read at most
    once per run however many rules inspect it. A read failure is cached
    too: text is None and read_error holds the reason.

    Not slotted: cached_property needs an instance __dict__.

    Attributes:
        path: Absolute path on disk
        relative: Path relative to the project root, POSIX separators
        extension: Lower-cased suffix with leading dot (".tsx")
    """

    path: Path
    relative: str
    extension: str = field(default="")

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path.is_absolute():
            raise ValueError(f"path must be absolute, got {self.path}")
        if not self.relative or self.relative.startswith("/"):
            raise ValueError(f"relative must be a non-empty relative path, got {self.relative!r}")
        if "\\" in self.relative:
            raise ValueError(f"relative must use '/' separators, got {self.relative!r}")
        if not self.extension:
            object.__setattr__(self, "extension", PurePosixPath(self.relative).suffix.lower())

    @classmethod
    def from_path(cls, root: Path, path: Path) -> FileEntry:
        """Create entry for a file below root.

        Args:
            root: Absolute project root
            path: Absolute file path under root
        """
        relative = path.relative_to(root).as_posix()
        return cls(path=path, relative=relative, extension=path.suffix.lower())

    @property
    def name(self) -> str:
        """File name with all extensions ("Button.test.tsx")."""
        return PurePosixPath(self.relative).name

    @property
    def stem(self) -> str:
        """Name without the last extension ("Button.test", "next.config")."""
        return PurePosixPath(self.relative).stem

    @property
    def base_name(self) -> str:
        """Name up to the first dot ("Button" for "Button.test.tsx")."""
        name = self.name
        if name.startswith("."):
            return name
        return name.split(".", 1)[0]

    @property
    def directory(self) -> str:
        """Parent directory relative to root, "" for root-level files."""
        parent = PurePosixPath(self.relative).parent.as_posix()
        return "" if parent == "." else parent

    @property
    def parts(self) -> tuple[str, ...]:
        """Relative path segments, file name last."""
        return PurePosixPath(self.relative).parts

    @cached_property
    def _content(self) -> tuple[str | None, str | None]:
        try:
            return self.path.read_text(encoding="utf-8", errors="replace"), None
        except OSError as exc:
            logger.warning("Cannot read %s: %s", self.relative, exc.strerror or exc)
            return None, exc.strerror or type(exc).__name__

    @property
    def text(self) -> str | None:
        """File content, None if it could not be read."""
        return self._content[0]

    @property
    def read_error(self) -> str | None:
        """Why reading failed, None if the file was read (or never requested)."""
        if "_content" not in self.__dict__:
            return None
        return self._content[1]

    @cached_property
    def sibling_names(self) -> tuple[str, ...]:
        """Sorted names of regular files in the same directory (self included)."""
        parent = self.path.parent
        try:
            with os.scandir(parent) as entries:
                names = [e.name for e in entries if e.is_file()]
        except OSError as exc:
            logger.warning("Cannot list %s: %s", parent, exc.strerror or exc)
            return ()
        return tuple(sorted(names))
