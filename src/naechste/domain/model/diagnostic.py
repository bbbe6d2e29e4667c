"""Diagnostic value object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from naechste.domain.model.enums import Severity


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported rule outcome.

    Attributes:
        severity: WARN or ERROR
        rule: Rule id (e.g. "server-side-exports")
        message: Human-readable message
        file: File path relative to the project root (POSIX separators)
        line: 1-based line number, None when the rule works per file
    """

    severity: Severity
    rule: str
    message: str
    file: str
    line: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.severity, Severity):
            raise TypeError(f"severity must be Severity, got {type(self.severity).__name__}")
        if not self.rule:
            raise ValueError("rule must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        if not self.file:
            raise ValueError("file must not be empty")
        if self.line is not None and self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")

    @property
    def sort_key(self) -> tuple[str, str, str, int, str]:
        """Canonical order: file, rule, message (line and severity break ties)."""
        return (
            self.file,
            self.rule,
            self.message,
            self.line if self.line is not None else 0,
            self.severity.value,
        )

    def to_dict(self) -> dict[str, object]:
        """Convert to the JSON contract shape."""
        return {
            "severity": self.severity.value,
            "rule": self.rule,
            "message": self.message,
            "file": self.file,
            "line": self.line,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Diagnostic:
        """Rebuild from the JSON contract shape.

        Raises:
            ValueError: If a field is missing or invalid
        """
        line = data.get("line")
        if line is not None and not isinstance(line, int):
            raise ValueError(f"line must be int or null, got {line!r}")
        return cls(
            severity=Severity.parse(data.get("severity")),
            rule=str(data.get("rule") or ""),
            message=str(data.get("message") or ""),
            file=str(data.get("file") or ""),
            line=line,
        )

    def __str__(self) -> str:
        """Format as 'severity: message [rule] at file[:line]'."""
        location = self.file if self.line is None else f"{self.file}:{self.line}"
        return f"{self.severity.value}: {self.message} [{self.rule}] at {location}"
