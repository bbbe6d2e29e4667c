"""Base rule classes.

Provide default implementations of FileRuleProtocol and BatchRuleProtocol.
Concrete rules inherit from these.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, ClassVar, Self

from naechste.domain.model.diagnostic import Diagnostic
from naechste.domain.model.enums import RuleKind, Severity

if TYPE_CHECKING:
    from naechste.domain.model.configuration import Configuration
    from naechste.domain.model.file_entry import FileEntry
    from naechste.domain.ports.rule import ImportGraphSource


class _ConfiguredRule:
    """Shared activation logic: severity + typed options from Configuration.

    Concrete rules must:
    1. Set `rule_id` and `options_type` class attributes
    2. Implement `evaluate()`

    Example:
        class MyRule(BaseFileRule):
            rule_id = "my-rule"
            options_type = MyOptions

            def evaluate(self, entry: FileEntry) -> tuple[Diagnostic, ...]:
                if entry.name.startswith("tmp"):
                    return (self.diagnostic(entry, "Temporary file"),)
                return ()
    """

    rule_id: ClassVar[str]
    kind: ClassVar[RuleKind]
    options_type: ClassVar[type]

    def __init__(self, severity: Severity, options: Any) -> None:
        """Initialize with resolved severity and options.

        Args:
            severity: Severity of every emitted diagnostic
            options: Rule options, instance of options_type

        Raises:
            TypeError: If options has the wrong type
        """
        if not isinstance(options, self.options_type):
            raise TypeError(
                f"{self.rule_id} expects {self.options_type.__name__}, "
                f"got {type(options).__name__}"
            )
        self._severity = severity
        self._options = options

    @property
    def severity(self) -> Severity:
        """Severity of emitted diagnostics."""
        return self._severity

    @classmethod
    def from_config(cls, config: Configuration) -> Self | None:
        """Create rule from config.

        Args:
            config: Resolved configuration

        Returns:
            Rule instance if enabled, None if disabled or not configured
        """
        settings = config.rules.get(cls.rule_id)
        if settings is None or not settings.enabled:
            return None  # Disabled
        return cls(settings.severity, settings.options)

    def diagnostic(self, entry: FileEntry, message: str, line: int | None = None) -> Diagnostic:
        """Build a diagnostic of this rule for one file."""
        return Diagnostic(
            severity=self._severity,
            rule=self.rule_id,
            message=message,
            file=entry.relative,
            line=line,
        )


class BaseFileRule(_ConfiguredRule, ABC):
    """Base class for per-file rules implementing FileRuleProtocol."""

    kind = RuleKind.PER_FILE

    @abstractmethod
    def evaluate(self, entry: FileEntry) -> tuple[Diagnostic, ...]:
        """Evaluate one file.

        Args:
            entry: File to check

        Returns:
            Diagnostics for this file (empty if it conforms)
        """


class BaseBatchRule(_ConfiguredRule, ABC):
    """Base class for batch rules implementing BatchRuleProtocol."""

    kind = RuleKind.BATCH

    @abstractmethod
    def evaluate(
        self,
        files: Sequence[FileEntry],
        graph: ImportGraphSource,
    ) -> tuple[Diagnostic, ...]:
        """Evaluate all files.

        Args:
            files: Walked files in canonical order
            graph: Lazy import graph, only touched when needed

        Returns:
            Diagnostics found
        """
