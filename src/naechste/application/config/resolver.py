"""Resolve raw configuration mappings into a Configuration.

Input is an already-parsed mapping (from JSON, JSONC or YAML, the
parsing itself is the caller's job). It is deep-merged over the
built-in defaults, then every value is type-checked and converted
into the immutable domain model. Any defect raises ConfigurationError
before a single file is evaluated.

Raw shape:
    {
        "rules": {
            "<config key or rule id>": {
                "enabled": true,
                "severity": "warn" | "error",
                "options": {...}
            }
        },
        "ignored_dirs": [...],
        "extensions": [...],
        "report_io_warnings": true
    }
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from naechste.application.config.merge import deep_merge, merge_lists
from naechste.domain.exceptions import ConfigurationError
from naechste.domain.model.configuration import (
    DEFAULT_EXTENSIONS,
    DEFAULT_IGNORED_DIRS,
    DEFAULT_STORY_PATTERNS,
    DEFAULT_TEST_PATTERNS,
    RULE_CONFIG_KEYS,
    CompanionFilePatterns,
    CompanionFilesOptions,
    Configuration,
    FileOrganizationOptions,
    FilenameStyleOptions,
    NestingDepthOptions,
    RuleOptions,
    RuleSettings,
    ServerSideExportsOptions,
)
from naechste.domain.model.enums import FilenameStyle, Severity
from naechste.domain.model.organization import (
    EnforceLocation,
    MatchPattern,
    OrganizationCheck,
    Requirement,
    SiblingExact,
    SiblingGlob,
    WhenImportedBy,
)

logger = logging.getLogger(__name__)

# Accepted and ignored: file composition happens before resolution.
_IGNORED_TOP_LEVEL_KEYS = frozenset({"$schema", "extends"})
_TOP_LEVEL_KEYS = frozenset({"rules", "ignored_dirs", "extensions", "report_io_warnings"})
_RULE_KEYS = frozenset({"enabled", "severity", "options"})
_CHECK_KEYS = frozenset(
    {"id", "description", "match", "require", "when_imported_by", "enforce_location"}
)
_PATTERN_CATEGORIES = frozenset(
    {"test", "story", "integration_tests", "page_user_scenarios", "custom"}
)

_KEY_TO_RULE_ID: Mapping[str, str] = MappingProxyType(
    {key: rule_id for rule_id, key in RULE_CONFIG_KEYS.items()}
)


def default_raw_configuration() -> dict[str, Any]:
    """Built-in defaults in raw form. Fresh dict on every call."""
    return {
        "rules": {
            key: {"enabled": True, "severity": Severity.WARN.value, "options": {}}
            for key in RULE_CONFIG_KEYS.values()
        },
        "ignored_dirs": sorted(DEFAULT_IGNORED_DIRS),
        "extensions": sorted(DEFAULT_EXTENSIONS),
        "report_io_warnings": True,
    }


def resolve_configuration(raw: Mapping[str, Any] | None = None) -> Configuration:
    """Merge raw configuration over defaults and validate it.

    Args:
        raw: Parsed configuration mapping, None for pure defaults

    Returns:
        Immutable Configuration with every rule present

    Raises:
        ConfigurationError: If any key or value is invalid
        PatternError: If an organization check holds an invalid glob/regex
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError("<root>", f"expected a mapping, got {type(raw).__name__}")

    user = dict(raw)
    for key in sorted(user.keys() & _IGNORED_TOP_LEVEL_KEYS):
        logger.debug("Ignoring configuration key %s", key)
        del user[key]
    unknown = sorted(user.keys() - _TOP_LEVEL_KEYS)
    if unknown:
        raise ConfigurationError(unknown[0], "unknown configuration key")
    if "rules" in user:
        user["rules"] = _canonical_rule_keys(user["rules"])

    merged = deep_merge(default_raw_configuration(), user)

    rules: dict[str, RuleSettings] = {}
    for rule_id, key in RULE_CONFIG_KEYS.items():
        rules[rule_id] = _resolve_rule(rule_id, merged["rules"][key], f"rules.{key}")

    return Configuration(
        rules=rules,
        ignored_dirs=frozenset(_string_list(merged["ignored_dirs"], "ignored_dirs")),
        extensions=_extensions(merged["extensions"]),
        report_io_warnings=_bool(merged["report_io_warnings"], "report_io_warnings"),
    )


def _canonical_rule_keys(raw_rules: object) -> dict[str, Any]:
    """Rename rule ids to config keys, rejecting unknown and duplicate entries."""
    rules = _mapping(raw_rules, "rules")
    canonical: dict[str, Any] = {}
    for name, value in rules.items():
        if name in _KEY_TO_RULE_ID:
            key = name
        elif name in RULE_CONFIG_KEYS:
            key = RULE_CONFIG_KEYS[name]
        else:
            raise ConfigurationError(f"rules.{name}", "unknown rule")
        if key in canonical:
            raise ConfigurationError(f"rules.{name}", "rule configured twice")
        canonical[key] = value
    return canonical


def _resolve_rule(rule_id: str, raw: object, path: str) -> RuleSettings:
    entry = _mapping(raw, path)
    unknown = sorted(entry.keys() - _RULE_KEYS)
    if unknown:
        raise ConfigurationError(f"{path}.{unknown[0]}", "unknown rule setting")
    try:
        severity = Severity.parse(entry["severity"])
    except ValueError as exc:
        raise ConfigurationError(f"{path}.severity", str(exc)) from exc
    options = _mapping(entry["options"], f"{path}.options")
    return RuleSettings(
        enabled=_bool(entry["enabled"], f"{path}.enabled"),
        severity=severity,
        options=_OPTION_PARSERS[rule_id](options, f"{path}.options"),
    )


# =============================================================================
# Option records
# =============================================================================


def _server_side_exports(options: Mapping[str, Any], path: str) -> ServerSideExportsOptions:
    return ServerSideExportsOptions()


def _nesting_depth(options: Mapping[str, Any], path: str) -> NestingDepthOptions:
    if "max_nesting_depth" not in options:
        return NestingDepthOptions()
    try:
        return NestingDepthOptions(max_nesting_depth=options["max_nesting_depth"])
    except ValueError as exc:
        raise ConfigurationError(f"{path}.max_nesting_depth", str(exc)) from exc


def _filename_style(options: Mapping[str, Any], path: str) -> FilenameStyleOptions:
    if "filename_style" not in options:
        return FilenameStyleOptions()
    try:
        return FilenameStyleOptions(filename_style=FilenameStyle.parse(options["filename_style"]))
    except ValueError as exc:
        raise ConfigurationError(f"{path}.filename_style", str(exc)) from exc


def _companion_files(options: Mapping[str, Any], path: str) -> CompanionFilesOptions:
    patterns_path = f"{path}.companion_file_patterns"
    raw_patterns = _mapping(options.get("companion_file_patterns", {}), patterns_path)
    unknown = sorted(raw_patterns.keys() - _PATTERN_CATEGORIES)
    if unknown:
        raise ConfigurationError(f"{patterns_path}.{unknown[0]}", "unknown companion category")

    custom: dict[str, tuple[str, ...]] = {}
    raw_custom = _mapping(raw_patterns.get("custom", {}), f"{patterns_path}.custom")
    for category, globs in raw_custom.items():
        custom[category] = _string_list(globs, f"{patterns_path}.custom.{category}")

    try:
        patterns = CompanionFilePatterns(
            test=_string_list(
                raw_patterns.get("test", DEFAULT_TEST_PATTERNS), f"{patterns_path}.test"
            ),
            story=_string_list(
                raw_patterns.get("story", DEFAULT_STORY_PATTERNS), f"{patterns_path}.story"
            ),
            integration_tests=_string_list(
                raw_patterns.get("integration_tests", ()), f"{patterns_path}.integration_tests"
            ),
            page_user_scenarios=_string_list(
                raw_patterns.get("page_user_scenarios", ()), f"{patterns_path}.page_user_scenarios"
            ),
            custom=MappingProxyType(custom),
        )
    except ValueError as exc:
        raise ConfigurationError(patterns_path, str(exc)) from exc

    return CompanionFilesOptions(
        require_test_files=_bool(
            options.get("require_test_files", False), f"{path}.require_test_files"
        ),
        require_story_files=_bool(
            options.get("require_story_files", False), f"{path}.require_story_files"
        ),
        companion_file_patterns=patterns,
    )


def _file_organization(options: Mapping[str, Any], path: str) -> FileOrganizationOptions:
    checks_path = f"{path}.file_organization_checks"
    raw_checks = options.get("file_organization_checks", [])
    if not isinstance(raw_checks, list):
        raise ConfigurationError(checks_path, f"expected a list, got {type(raw_checks).__name__}")
    checks = tuple(
        _organization_check(item, f"{checks_path}[{index}]")
        for index, item in enumerate(raw_checks)
    )
    try:
        return FileOrganizationOptions(file_organization_checks=checks)
    except ValueError as exc:
        raise ConfigurationError(checks_path, str(exc)) from exc


_OPTION_PARSERS: Mapping[str, Callable[[Mapping[str, Any], str], RuleOptions]] = MappingProxyType(
    {
        "server-side-exports": _server_side_exports,
        "component-nesting-depth": _nesting_depth,
        "filename-style-consistency": _filename_style,
        "missing-companion-files": _companion_files,
        "file-organization": _file_organization,
    }
)


# =============================================================================
# Organization checks
# =============================================================================


def _organization_check(raw: object, path: str) -> OrganizationCheck:
    """Build one OrganizationCheck.

    PatternError from the check's own validation propagates unchanged,
    it already names the check id and the offending pattern.
    """
    entry = _mapping(raw, path)
    unknown = sorted(entry.keys() - _CHECK_KEYS)
    if unknown:
        raise ConfigurationError(f"{path}.{unknown[0]}", "unknown organization check key")

    match_raw = _mapping(_required(entry, "match", path), f"{path}.match")
    match = MatchPattern(
        glob=_string(_required(match_raw, "glob", f"{path}.match"), f"{path}.match.glob"),
        exclude_glob=_string_list(match_raw.get("exclude_glob", []), f"{path}.match.exclude_glob"),
    )

    raw_require = entry.get("require", [])
    if not isinstance(raw_require, list):
        raise ConfigurationError(f"{path}.require", "expected a list")
    require = tuple(
        _requirement(item, f"{path}.require[{index}]") for index, item in enumerate(raw_require)
    )

    when_imported_by = None
    if entry.get("when_imported_by") is not None:
        when_path = f"{path}.when_imported_by"
        when_raw = _mapping(entry["when_imported_by"], when_path)
        when_imported_by = WhenImportedBy(
            importer_glob=_string(
                _required(when_raw, "importer_glob", when_path), f"{when_path}.importer_glob"
            ),
            import_path_matches=_string_list(
                _required(when_raw, "import_path_matches", when_path),
                f"{when_path}.import_path_matches",
            ),
        )

    enforce_location = None
    if entry.get("enforce_location") is not None:
        location_path = f"{path}.enforce_location"
        location_raw = _mapping(entry["enforce_location"], location_path)
        message = location_raw.get("message")
        try:
            enforce_location = EnforceLocation(
                must_be_under=_string_list(
                    _required(location_raw, "must_be_under", location_path),
                    f"{location_path}.must_be_under",
                ),
                message=None if message is None else _string(message, f"{location_path}.message"),
            )
        except ValueError as exc:
            raise ConfigurationError(location_path, str(exc)) from exc

    description = entry.get("description")
    if description is not None:
        description = _string(description, f"{path}.description")
    try:
        return OrganizationCheck(
            id=_string(_required(entry, "id", path), f"{path}.id"),
            match=match,
            require=require,
            when_imported_by=when_imported_by,
            enforce_location=enforce_location,
            description=description,
        )
    except ConfigurationError:
        raise
    except ValueError as exc:
        raise ConfigurationError(path, str(exc)) from exc


def _requirement(raw: object, path: str) -> Requirement:
    entry = _mapping(raw, path)
    match entry.get("kind"):
        case "sibling_exact":
            try:
                return SiblingExact(name=_string(_required(entry, "name", path), f"{path}.name"))
            except ConfigurationError:
                raise
            except ValueError as exc:
                raise ConfigurationError(f"{path}.name", str(exc)) from exc
        case "sibling_glob":
            return SiblingGlob(glob=_string(_required(entry, "glob", path), f"{path}.glob"))
        case kind:
            raise ConfigurationError(
                f"{path}.kind", f"expected 'sibling_exact' or 'sibling_glob', got {kind!r}"
            )


# =============================================================================
# Primitive coercion
# =============================================================================


def _required(entry: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in entry:
        raise ConfigurationError(f"{path}.{key}", "required value is missing")
    return entry[key]


def _mapping(value: object, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(path, f"expected a mapping, got {type(value).__name__}")
    return value


def _bool(value: object, path: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(path, f"expected true or false, got {value!r}")
    return value


def _string(value: object, path: str) -> str:
    if not isinstance(value, str) or not value:
        raise ConfigurationError(path, f"expected a non-empty string, got {value!r}")
    return value


def _string_list(value: object, path: str) -> tuple[str, ...]:
    """Validate a list of strings.

    Lists without a default have nothing to merge into, so a leading "+"
    or "=" marker is dropped the same way merging over an empty list would.
    """
    if not isinstance(value, list | tuple):
        raise ConfigurationError(path, f"expected a list of strings, got {type(value).__name__}")
    items = merge_lists([], list(value))
    return tuple(_string(item, f"{path}[{index}]") for index, item in enumerate(items))


def _extensions(value: object) -> frozenset[str]:
    """Normalize extensions to lower-case with a leading dot ("tsx" → ".tsx")."""
    items = _string_list(value, "extensions")
    if not items:
        raise ConfigurationError("extensions", "at least one extension is required")
    return frozenset(ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in items)
