"""Missing companion files rule."""

from __future__ import annotations

import glob
from typing import TYPE_CHECKING

from naechste.application.rules._base import BaseFileRule
from naechste.application.rules._naming import (
    COMPONENT_EXTENSIONS,
    is_companion_file,
    is_component_file,
)
from naechste.domain.model.configuration import CompanionFilesOptions
from naechste.infrastructure.filters import matches_name

if TYPE_CHECKING:
    from naechste.domain.model.diagnostic import Diagnostic
    from naechste.domain.model.enums import Severity
    from naechste.domain.model.file_entry import FileEntry

PAGE_NAME = "page"


class CompanionFilesRule(BaseFileRule):
    """Flags component files lacking required sibling files.

    Categories checked for a component file:
    - test: when require_test_files
    - story: when require_story_files
    - integration_tests: when patterns are configured
    - each custom category: when patterns are configured
    Page files ("page.tsx") are checked for page_user_scenarios only.

    A category is satisfied by any sibling matching any of its patterns,
    with "{name}" replaced by the component's base name.
    One diagnostic per unsatisfied category.
    """

    rule_id = "missing-companion-files"
    options_type = CompanionFilesOptions

    def __init__(self, severity: Severity, options: CompanionFilesOptions) -> None:
        """Initialize with severity and options, precomputing component categories."""
        super().__init__(severity, options)
        self._component_categories = self._categories(options)

    @staticmethod
    def _categories(options: CompanionFilesOptions) -> tuple[tuple[str, tuple[str, ...]], ...]:
        patterns = options.companion_file_patterns
        categories: list[tuple[str, tuple[str, ...]]] = []
        if options.require_test_files:
            categories.append(("test", patterns.test))
        if options.require_story_files:
            categories.append(("story", patterns.story))
        if patterns.integration_tests:
            categories.append(("integration_tests", patterns.integration_tests))
        for name in sorted(patterns.custom):
            if patterns.custom[name]:
                categories.append((name, patterns.custom[name]))
        return tuple(categories)

    def _categories_for(self, entry: FileEntry) -> tuple[tuple[str, tuple[str, ...]], ...]:
        if entry.base_name == PAGE_NAME and entry.extension in COMPONENT_EXTENSIONS:
            if is_companion_file(entry):
                return ()
            scenarios = self._options.companion_file_patterns.page_user_scenarios
            return (("page_user_scenarios", scenarios),) if scenarios else ()
        if is_component_file(entry):
            return self._component_categories
        return ()

    def evaluate(self, entry: FileEntry) -> tuple[Diagnostic, ...]:
        categories = self._categories_for(entry)
        if not categories:
            return ()

        siblings = entry.sibling_names
        escaped = glob.escape(entry.base_name)
        diagnostics: list[Diagnostic] = []
        for category, patterns in categories:
            expanded = tuple(p.replace("{name}", escaped) for p in patterns)
            if any(matches_name(s, p) for s in siblings if s != entry.name for p in expanded):
                continue
            shown = ", ".join(p.replace("{name}", entry.base_name) for p in patterns)
            diagnostics.append(
                self.diagnostic(
                    entry,
                    f"Missing {category} companion file for '{entry.name}' "
                    f"(expected one of: {shown})",
                )
            )
        return tuple(diagnostics)
