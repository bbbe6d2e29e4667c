"""File organization rule.

Runs every configured OrganizationCheck over the whole file set:

1. Select files matching match.glob and no exclude_glob.
2. For each selected file, check sibling requirements.
3. If when_imported_by is set, location enforcement applies only to
   files referenced by a matching importer (see _importer_of).
4. Enforce must_be_under on applicable files.

Import specifiers are matched as raw text; aliases such as "@/" are
never resolved to paths.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from naechste.application.rules._base import BaseBatchRule
from naechste.domain.model.configuration import DEFAULT_EXTENSIONS, FileOrganizationOptions
from naechste.domain.model.diagnostic import Diagnostic
from naechste.domain.model.organization import (
    EnforceLocation,
    OrganizationCheck,
    SiblingExact,
    SiblingGlob,
)
from naechste.infrastructure.filters import (
    all_of,
    exclude_paths,
    include_paths,
    is_under_any_prefix,
    matches_name,
)

if TYPE_CHECKING:
    from naechste.domain.model.file_entry import FileEntry
    from naechste.domain.model.import_graph import ImportGraph
    from naechste.domain.ports.rule import ImportGraphSource

logger = logging.getLogger(__name__)

_INDEX_NAME = "index"


def specifier_target(specifier: str) -> str:
    """Last path segment of a specifier without a script extension.

    Examples:
        "@/components/ui/Button" → "Button"
        "./Button.tsx" → "Button"
        "../forms/" → "forms"
    """
    last = specifier.rstrip("/").rsplit("/", 1)[-1]
    path = PurePosixPath(last)
    if path.suffix.lower() in DEFAULT_EXTENSIONS:
        return path.stem
    return last


def references_file(specifier: str, entry: FileEntry) -> bool:
    """True if a raw specifier names the file (by name, not by resolution).

    "@/components/Button" references "src/ui/Button.tsx". An index file
    is referenced through its directory: "@/components/forms" references
    "components/forms/index.ts".
    """
    target = specifier_target(specifier)
    if not target:
        return False
    stem = PurePosixPath(entry.name).stem
    if target == stem:
        return True
    if stem == _INDEX_NAME and entry.directory:
        return target == PurePosixPath(entry.directory).name
    return False


class FileOrganizationRule(BaseBatchRule):
    """Evaluates file organization checks in configuration order.

    Diagnostics use the rule id "file-organization:<check id>".
    Location violations are reported once per file.
    """

    rule_id = "file-organization"
    options_type = FileOrganizationOptions

    @property
    def checks(self) -> tuple[OrganizationCheck, ...]:
        """Configured checks in evaluation order."""
        return self._options.file_organization_checks

    def evaluate(
        self,
        files: Sequence[FileEntry],
        graph: ImportGraphSource,
    ) -> tuple[Diagnostic, ...]:
        """Run all checks.

        Args:
            files: Walked files in canonical order
            graph: Lazy import graph, built only for when_imported_by checks

        Returns:
            Diagnostics of all checks
        """
        imports = graph.get() if self._options.needs_import_graph else None
        diagnostics: list[Diagnostic] = []
        for check in self.checks:
            if check.is_noop:
                logger.warning(
                    "Organization check %s has neither require nor enforce_location", check.id
                )
                continue
            diagnostics.extend(self._run_check(check, files, imports))
        return tuple(diagnostics)

    def _run_check(
        self,
        check: OrganizationCheck,
        files: Sequence[FileEntry],
        imports: ImportGraph | None,
    ) -> list[Diagnostic]:
        selector = all_of(
            include_paths(check.match.glob),
            exclude_paths(*check.match.exclude_glob),
        )
        selected = [entry for entry in files if selector(entry)]
        logger.debug("Organization check %s selected %d files", check.id, len(selected))

        gated = check.when_imported_by is not None and check.enforce_location is not None
        candidates: list[tuple[FileEntry, tuple[str, ...]]] = []
        if gated and imports is not None:
            candidates = self._matching_imports(check, files, imports)

        diagnostics: list[Diagnostic] = []
        for entry in selected:
            diagnostics.extend(self._check_requirements(check, entry))

            location = check.enforce_location
            if location is None:
                continue
            importer: FileEntry | None = None
            if gated:
                importer = self._importer_of(entry, candidates)
                if importer is None:
                    continue  # Not imported the way the check cares about
            if is_under_any_prefix(entry.directory, location.normalized_prefixes):
                continue
            diagnostics.append(self._location_diagnostic(check, location, entry, importer))
        return diagnostics

    def _check_requirements(self, check: OrganizationCheck, entry: FileEntry) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        siblings = [name for name in entry.sibling_names if name != entry.name]
        for requirement in check.require:
            match requirement:
                case SiblingExact(name=name):
                    satisfied = name in siblings
                case SiblingGlob(glob=pattern):
                    satisfied = any(matches_name(sibling, pattern) for sibling in siblings)
            if satisfied:
                continue
            message = (
                f"Missing required companion file {requirement.describe()} "
                f"next to '{entry.relative}'"
            )
            diagnostics.append(self._diagnostic(check, entry, message))
        return diagnostics

    @staticmethod
    def _matching_imports(
        check: OrganizationCheck,
        files: Sequence[FileEntry],
        graph: ImportGraph,
    ) -> list[tuple[FileEntry, tuple[str, ...]]]:
        """Importers selected by importer_glob with their regex-matching specifiers."""
        if check.when_imported_by is None:
            return []
        is_importer = include_paths(check.when_imported_by.importer_glob)
        candidates: list[tuple[FileEntry, tuple[str, ...]]] = []
        for entry in files:
            if not is_importer(entry):
                continue
            specifiers = tuple(
                spec
                for spec in graph.imports_of(entry.relative)
                if any(regex.search(spec) for regex in check.import_regexes)
            )
            if specifiers:
                candidates.append((entry, specifiers))
        return candidates

    @staticmethod
    def _importer_of(
        entry: FileEntry,
        candidates: list[tuple[FileEntry, tuple[str, ...]]],
    ) -> FileEntry | None:
        """First importer whose matching specifiers reference entry."""
        for importer, specifiers in candidates:
            if importer.relative == entry.relative:
                continue
            if any(references_file(spec, entry) for spec in specifiers):
                return importer
        return None

    def _location_diagnostic(
        self,
        check: OrganizationCheck,
        location: EnforceLocation,
        entry: FileEntry,
        importer: FileEntry | None,
    ) -> Diagnostic:
        if location.message:
            message = location.message
        else:
            prefixes = ", ".join(location.must_be_under)
            if importer is not None:
                message = (
                    f"File is imported by '{importer.relative}' "
                    f"but is not located under any of: {prefixes}"
                )
            else:
                message = f"File is not located under any of: {prefixes}"
        return self._diagnostic(check, entry, message)

    def _diagnostic(self, check: OrganizationCheck, entry: FileEntry, message: str) -> Diagnostic:
        return Diagnostic(
            severity=self.severity,
            rule=check.rule_id,
            message=message,
            file=entry.relative,
        )
