"""Lint rules.

Per-file rules check one FileEntry at a time:
- ServerSideExportsRule: server-only exports in client components
- NestingDepthRule: depth under app/ or pages/
- FilenameStyleRule: casing of file names
- CompanionFilesRule: test/story/custom sibling files

Batch rules see the whole file set:
- FileOrganizationRule: configured organization checks
"""

from naechste.application.rules._base import BaseBatchRule, BaseFileRule
from naechste.application.rules._registry import (
    batch_rules_from_config,
    file_rules_from_config,
    rule_ids,
)
from naechste.application.rules.companion_files import CompanionFilesRule
from naechste.application.rules.file_organization import FileOrganizationRule
from naechste.application.rules.filename_style import FilenameStyleRule
from naechste.application.rules.nesting_depth import NestingDepthRule
from naechste.application.rules.server_side_exports import ServerSideExportsRule

__all__ = [
    # Base
    "BaseBatchRule",
    "BaseFileRule",
    # Rules
    "CompanionFilesRule",
    "FileOrganizationRule",
    "FilenameStyleRule",
    "NestingDepthRule",
    "ServerSideExportsRule",
    # Factory functions
    "batch_rules_from_config",
    "file_rules_from_config",
    "rule_ids",
]
