"""Domain model: immutable values of a lint run."""

from naechste.domain.model.check_result import CheckResult
from naechste.domain.model.check_stats import CheckStats
from naechste.domain.model.configuration import (
    CompanionFilePatterns,
    CompanionFilesOptions,
    Configuration,
    FileOrganizationOptions,
    FilenameStyleOptions,
    NestingDepthOptions,
    RULE_CONFIG_KEYS,
    RuleSettings,
    ServerSideExportsOptions,
)
from naechste.domain.model.diagnostic import Diagnostic
from naechste.domain.model.diagnostic_collection import DiagnosticCollection
from naechste.domain.model.enums import FilenameStyle, RuleKind, Severity
from naechste.domain.model.file_entry import FileEntry
from naechste.domain.model.import_graph import ImportEdge, ImportGraph
from naechste.domain.model.organization import (
    EnforceLocation,
    MatchPattern,
    OrganizationCheck,
    SiblingExact,
    SiblingGlob,
    WhenImportedBy,
)

__all__ = [
    "CheckResult",
    "CheckStats",
    "CompanionFilePatterns",
    "CompanionFilesOptions",
    "Configuration",
    "Diagnostic",
    "DiagnosticCollection",
    "EnforceLocation",
    "FileEntry",
    "FileOrganizationOptions",
    "FilenameStyle",
    "FilenameStyleOptions",
    "ImportEdge",
    "ImportGraph",
    "MatchPattern",
    "NestingDepthOptions",
    "OrganizationCheck",
    "RULE_CONFIG_KEYS",
    "RuleKind",
    "RuleSettings",
    "ServerSideExportsOptions",
    "Severity",
    "SiblingExact",
    "SiblingGlob",
    "WhenImportedBy",
]
