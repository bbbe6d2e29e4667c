"""Test factories for creating domain objects and project trees.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from naechste.application.config import resolve_configuration
from naechste.domain.model.check_result import CheckResult
from naechste.domain.model.check_stats import CheckStats
from naechste.domain.model.configuration import Configuration
from naechste.domain.model.diagnostic import Diagnostic
from naechste.domain.model.diagnostic_collection import DiagnosticCollection
from naechste.domain.model.enums import Severity
from naechste.domain.model.file_entry import FileEntry
from naechste.domain.model.organization import (
    EnforceLocation,
    MatchPattern,
    OrganizationCheck,
    Requirement,
    WhenImportedBy,
)

# Placeholder component body used when content does not matter
DEFAULT_SOURCE = "export default function Component() {\n  return null;\n}\n"


def write_tree(root: Path, files: Mapping[str, str]) -> Path:
    """Create files under root.

    Args:
        root: Directory to populate (usually tmp_path)
        files: Relative POSIX path → file content

    Returns:
        root, for chaining
    """
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def make_entry(root: Path, relative: str, content: str | None = DEFAULT_SOURCE) -> FileEntry:
    """Create a FileEntry, writing the file when content is given.

    Args:
        root: Project root (absolute)
        relative: Path relative to root
        content: File content, None to leave the file absent

    Returns:
        FileEntry for the file
    """
    path = root / relative
    if content is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return FileEntry.from_path(root, path)


def make_diagnostic(
    file: str = "app/page.tsx",
    rule: str = "server-side-exports",
    message: str = "message",
    severity: Severity = Severity.WARN,
    line: int | None = None,
) -> Diagnostic:
    """Create a Diagnostic for tests."""
    return Diagnostic(severity=severity, rule=rule, message=message, file=file, line=line)


def make_result(*diagnostics: Diagnostic) -> CheckResult:
    """Create a CheckResult with a finalized collection of diagnostics."""
    return CheckResult(
        collection=DiagnosticCollection(diagnostics).finalize(),
        stats=CheckStats.empty(),
    )


def rule_config(
    key: str,
    *,
    severity: str = "warn",
    enabled: bool = True,
    **options: Any,
) -> dict[str, Any]:
    """Raw configuration enabling a single rule among the defaults.

    Args:
        key: Rule config key ("component_nesting_depth")
        severity: "warn" or "error"
        enabled: Rule enabled flag
        **options: Rule options

    Returns:
        Raw configuration mapping
    """
    return {"rules": {key: {"enabled": enabled, "severity": severity, "options": options}}}


def only_rule(key: str, *, severity: str = "warn", **options: Any) -> Configuration:
    """Resolved configuration with every rule but one disabled.

    Args:
        key: Rule config key to keep enabled
        severity: Severity of that rule
        **options: Its options

    Returns:
        Configuration
    """
    keys = (
        "server_side_exports",
        "component_nesting_depth",
        "filename_style_consistency",
        "missing_companion_files",
        "file_organization",
    )
    rules: dict[str, Any] = {k: {"enabled": False} for k in keys}
    rules[key] = {"enabled": True, "severity": severity, "options": options}
    return resolve_configuration({"rules": rules})


def make_check(
    check_id: str = "check",
    glob: str = "**/*.tsx",
    *,
    exclude: tuple[str, ...] = (),
    require: tuple[Requirement, ...] = (),
    importer_glob: str | None = None,
    import_matches: tuple[str, ...] = (),
    must_be_under: tuple[str, ...] = (),
    message: str | None = None,
) -> OrganizationCheck:
    """Create an OrganizationCheck for tests.

    Args:
        check_id: Check id
        glob: match.glob
        exclude: match.exclude_glob
        require: Sibling requirements
        importer_glob: when_imported_by.importer_glob (None = no clause)
        import_matches: when_imported_by.import_path_matches
        must_be_under: enforce_location.must_be_under (empty = no clause)
        message: enforce_location.message

    Returns:
        OrganizationCheck instance
    """
    when = None
    if importer_glob is not None:
        when = WhenImportedBy(importer_glob=importer_glob, import_path_matches=import_matches)
    location = None
    if must_be_under:
        location = EnforceLocation(must_be_under=must_be_under, message=message)
    return OrganizationCheck(
        id=check_id,
        match=MatchPattern(glob=glob, exclude_glob=exclude),
        require=require,
        when_imported_by=when,
        enforce_location=location,
    )
