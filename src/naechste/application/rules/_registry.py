"""Rule registry.

Central registry of all rules with factory functions. The set of rules
is closed: configuration enables, configures and disables them, it
never names new ones.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from naechste.application.rules._base import BaseBatchRule, BaseFileRule
from naechste.application.rules.companion_files import CompanionFilesRule
from naechste.application.rules.file_organization import FileOrganizationRule
from naechste.application.rules.filename_style import FilenameStyleRule
from naechste.application.rules.nesting_depth import NestingDepthRule
from naechste.application.rules.server_side_exports import ServerSideExportsRule

if TYPE_CHECKING:
    from naechste.domain.model.configuration import Configuration

# Registry - tuple for immutability
# Order matters: per-file rules run in this order for every file
_FILE_RULES: tuple[type[BaseFileRule], ...] = (
    ServerSideExportsRule,
    NestingDepthRule,
    FilenameStyleRule,
    CompanionFilesRule,
)

# Batch rules run after all per-file rules
_BATCH_RULES: tuple[type[BaseBatchRule], ...] = (FileOrganizationRule,)


def rule_ids() -> tuple[str, ...]:
    """All known rule ids in evaluation order."""
    return tuple(cls.rule_id for cls in (*_FILE_RULES, *_BATCH_RULES))


def file_rules_from_config(config: Configuration) -> tuple[BaseFileRule, ...]:
    """Instantiate enabled per-file rules.

    Rules are created using their from_config() factory method.
    If from_config() returns None, the rule is disabled.

    Args:
        config: Resolved configuration

    Returns:
        Tuple of enabled per-file rules
    """
    rules: list[BaseFileRule] = []
    for rule_cls in _FILE_RULES:
        rule = rule_cls.from_config(config)
        if rule is not None:
            rules.append(rule)
    return tuple(rules)


def batch_rules_from_config(config: Configuration) -> tuple[BaseBatchRule, ...]:
    """Instantiate enabled batch rules.

    Args:
        config: Resolved configuration

    Returns:
        Tuple of enabled batch rules
    """
    rules: list[BaseBatchRule] = []
    for rule_cls in _BATCH_RULES:
        rule = rule_cls.from_config(config)
        if rule is not None:
            rules.append(rule)
    return tuple(rules)
