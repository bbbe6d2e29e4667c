"""File organization checks: selection, sibling requirements, location rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TypeAlias

from naechste.domain.exceptions import PatternError


def glob_defect(pattern: str) -> str | None:
    """Return why a glob pattern is invalid, or None if it is usable.

    fnmatch never rejects a pattern, so unbalanced character classes
    and brace groups are detected here instead of matching literally.
    Inside a character class every character is literal, so "[[]id]"
    (the escaped form of "[id]") is valid.
    """
    if not pattern:
        return "pattern must not be empty"
    brace_open = False
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == "[":
            # "]" right after "[" or "[!" belongs to the class
            end = index + 1
            if end < len(pattern) and pattern[end] == "!":
                end += 1
            if end < len(pattern) and pattern[end] == "]":
                end += 1
            end = pattern.find("]", end)
            if end == -1:
                return "unterminated character class '['"
            index = end + 1
            continue
        if char == "{":
            if brace_open:
                return "nested '{' groups are not supported"
            brace_open = True
        elif char == "}":
            if not brace_open:
                return "unbalanced '}'"
            brace_open = False
        index += 1
    if brace_open:
        return "unterminated brace group '{'"
    return None


@dataclass(frozen=True, slots=True)
class MatchPattern:
    """Which files an organization check selects.

    Attributes:
        glob: Glob over the project-relative path
        exclude_glob: Globs that remove files from the selection
    """

    glob: str
    exclude_glob: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class SiblingExact:
    """Require a file with exactly this name in the same directory."""

    name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("sibling_exact name must not be empty")
        if "/" in self.name or "\\" in self.name:
            raise ValueError(f"sibling_exact name must be a bare file name, got {self.name!r}")

    def describe(self) -> str:
        return f"'{self.name}'"


@dataclass(frozen=True, slots=True)
class SiblingGlob:
    """Require at least one file in the same directory matching this glob."""

    glob: str

    def describe(self) -> str:
        return f"matching '{self.glob}'"


Requirement: TypeAlias = SiblingExact | SiblingGlob


@dataclass(frozen=True, slots=True)
class WhenImportedBy:
    """Import condition that gates location enforcement.

    Attributes:
        importer_glob: Glob selecting importer files
        import_path_matches: Regexes searched in raw import specifiers
    """

    importer_glob: str
    import_path_matches: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class EnforceLocation:
    """Allowed directory prefixes for selected files.

    Attributes:
        must_be_under: Project-relative directory prefixes
        message: Custom diagnostic message, None for the generated one
    """

    must_be_under: tuple[str, ...]
    message: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.must_be_under:
            raise ValueError("must_be_under must not be empty")
        if any(not prefix.strip("/") for prefix in self.must_be_under):
            raise ValueError("must_be_under entries must not be empty")

    @property
    def normalized_prefixes(self) -> tuple[str, ...]:
        """Prefixes without leading/trailing slashes."""
        return tuple(prefix.strip("/") for prefix in self.must_be_under)


@dataclass(frozen=True, slots=True)
class OrganizationCheck:
    """One configured file organization check.

    All globs and regexes are validated on construction; an invalid one
    raises PatternError naming this check. A check with neither require
    nor enforce_location is allowed and does nothing.

    Attributes:
        id: Unique id within the configuration
        match: File selection
        require: Sibling requirements, evaluated for every selected file
        when_imported_by: Optional import condition for enforce_location
        enforce_location: Optional location rule
        description: Free text, informational only
    """

    id: str
    match: MatchPattern
    require: tuple[Requirement, ...] = ()
    when_imported_by: WhenImportedBy | None = None
    enforce_location: EnforceLocation | None = None
    description: str | None = None
    import_regexes: tuple[re.Pattern[str], ...] = field(
        init=False, repr=False, compare=False, default=()
    )

    def __post_init__(self) -> None:
        """Validate invariants and compile patterns. FAIL-FIRST."""
        if not self.id:
            raise ValueError("organization check id must not be empty")

        globs = [self.match.glob, *self.match.exclude_glob]
        globs.extend(r.glob for r in self.require if isinstance(r, SiblingGlob))
        if self.when_imported_by is not None:
            globs.append(self.when_imported_by.importer_glob)
        for pattern in globs:
            reason = glob_defect(pattern)
            if reason is not None:
                raise PatternError(self.id, pattern, reason)

        if self.when_imported_by is None:
            return
        if not self.when_imported_by.import_path_matches:
            raise PatternError(self.id, "", "import_path_matches must not be empty")
        compiled: list[re.Pattern[str]] = []
        for pattern in self.when_imported_by.import_path_matches:
            try:
                compiled.append(re.compile(pattern))
            except re.error as exc:
                raise PatternError(self.id, pattern, str(exc)) from exc
        object.__setattr__(self, "import_regexes", tuple(compiled))

    @property
    def rule_id(self) -> str:
        """Rule id used on this check's diagnostics."""
        return f"file-organization:{self.id}"

    @property
    def is_noop(self) -> bool:
        """True when the check has nothing to enforce."""
        return not self.require and self.enforce_location is None
