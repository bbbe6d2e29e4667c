"""Resolved configuration: per-rule settings with typed options.

This is the fully defaulted, validated value the engine runs on.
Building it from raw mappings is application/config's job.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

from naechste.domain.model.enums import FilenameStyle, Severity
from naechste.domain.model.organization import OrganizationCheck

DEFAULT_IGNORED_DIRS: frozenset[str] = frozenset(
    {"node_modules", ".next", ".git", "dist", "build", "coverage", "out", ".turbo"}
)
DEFAULT_EXTENSIONS: frozenset[str] = frozenset({".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs"})

DEFAULT_TEST_PATTERNS: tuple[str, ...] = ("{name}.test.*", "{name}.spec.*")
DEFAULT_STORY_PATTERNS: tuple[str, ...] = ("{name}.stories.*", "{name}.story.*")

# Rule id → configuration key, in evaluation order.
RULE_CONFIG_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "server-side-exports": "server_side_exports",
        "component-nesting-depth": "component_nesting_depth",
        "filename-style-consistency": "filename_style_consistency",
        "missing-companion-files": "missing_companion_files",
        "file-organization": "file_organization",
    }
)


@dataclass(frozen=True, slots=True)
class ServerSideExportsOptions:
    """server-side-exports has no options; the denylist is fixed."""


@dataclass(frozen=True, slots=True)
class NestingDepthOptions:
    """Options for component-nesting-depth.

    Attributes:
        max_nesting_depth: Largest allowed depth (>= 1)
    """

    max_nesting_depth: int = 3

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if isinstance(self.max_nesting_depth, bool) or not isinstance(self.max_nesting_depth, int):
            raise ValueError(f"max_nesting_depth must be int, got {self.max_nesting_depth!r}")
        if self.max_nesting_depth < 1:
            raise ValueError(f"max_nesting_depth must be >= 1, got {self.max_nesting_depth}")


@dataclass(frozen=True, slots=True)
class FilenameStyleOptions:
    """Options for filename-style-consistency."""

    filename_style: FilenameStyle = FilenameStyle.KEBAB_CASE


@dataclass(frozen=True, slots=True)
class CompanionFilePatterns:
    """Sibling patterns per companion category.

    Patterns are globs over names in the component's directory.
    "{name}" is replaced by the component's base name.

    Attributes:
        test: Patterns satisfying the test category
        story: Patterns satisfying the story category
        integration_tests: Extra category, required when non-empty
        page_user_scenarios: Extra category for page files, required when non-empty
        custom: Category name → patterns, each required when non-empty
    """

    test: tuple[str, ...] = DEFAULT_TEST_PATTERNS
    story: tuple[str, ...] = DEFAULT_STORY_PATTERNS
    integration_tests: tuple[str, ...] = ()
    page_user_scenarios: tuple[str, ...] = ()
    custom: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.test:
            raise ValueError("test patterns must not be empty")
        if not self.story:
            raise ValueError("story patterns must not be empty")
        for category in self.custom:
            if not category:
                raise ValueError("custom companion category name must not be empty")


@dataclass(frozen=True, slots=True)
class CompanionFilesOptions:
    """Options for missing-companion-files."""

    require_test_files: bool = False
    require_story_files: bool = False
    companion_file_patterns: CompanionFilePatterns = field(default_factory=CompanionFilePatterns)


@dataclass(frozen=True, slots=True)
class FileOrganizationOptions:
    """Options for file-organization.

    Attributes:
        file_organization_checks: Checks in evaluation order, ids unique
    """

    file_organization_checks: tuple[OrganizationCheck, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        seen: set[str] = set()
        for check in self.file_organization_checks:
            if check.id in seen:
                raise ValueError(f"duplicate organization check id {check.id!r}")
            seen.add(check.id)

    @property
    def needs_import_graph(self) -> bool:
        """True if any check declares when_imported_by."""
        return any(c.when_imported_by is not None for c in self.file_organization_checks)


RuleOptions: TypeAlias = (
    ServerSideExportsOptions
    | NestingDepthOptions
    | FilenameStyleOptions
    | CompanionFilesOptions
    | FileOrganizationOptions
)


@dataclass(frozen=True, slots=True)
class RuleSettings:
    """Resolved settings of one rule.

    Attributes:
        enabled: Rule runs only if True
        severity: Severity of every diagnostic the rule emits
        options: Rule-specific typed options
    """

    enabled: bool
    severity: Severity
    options: RuleOptions


@dataclass(frozen=True, slots=True)
class Configuration:
    """Immutable, fully resolved run configuration.

    Attributes:
        rules: Rule id → settings, in rule registry order
        ignored_dirs: Directory names never descended into
        extensions: Candidate file extensions (with leading dot)
        report_io_warnings: Record skipped paths as io-warning diagnostics
    """

    rules: Mapping[str, RuleSettings]
    ignored_dirs: frozenset[str] = DEFAULT_IGNORED_DIRS
    extensions: frozenset[str] = DEFAULT_EXTENSIONS
    report_io_warnings: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.extensions:
            raise ValueError("extensions must not be empty")
        for ext in self.extensions:
            if not ext.startswith("."):
                raise ValueError(f"extension must start with '.', got {ext!r}")
        if not isinstance(self.rules, MappingProxyType):
            object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))
