"""Domain enumerations."""

from enum import Enum


class Severity(Enum):
    """Diagnostic severity.

    Value is the wire name used in configuration and JSON output.
    """

    WARN = "warn"  # reported, run still passes
    ERROR = "error"  # run fails

    @classmethod
    def parse(cls, value: object) -> "Severity":
        """Parse wire name ("warn"/"error") or pass through a Severity.

        Raises:
            ValueError: If value is not a known severity
        """
        if isinstance(value, Severity):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        raise ValueError(f"severity must be 'warn' or 'error', got {value!r}")


class FilenameStyle(Enum):
    """Casing convention for file name stems."""

    KEBAB_CASE = "kebab-case"
    PASCAL_CASE = "pascal-case"
    CAMEL_CASE = "camel-case"
    SNAKE_CASE = "snake-case"

    @classmethod
    def parse(cls, value: object) -> "FilenameStyle":
        """Parse wire name (e.g. "kebab-case") or pass through a FilenameStyle.

        Raises:
            ValueError: If value is not a known style
        """
        if isinstance(value, FilenameStyle):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        names = ", ".join(m.value for m in cls)
        raise ValueError(f"filename_style must be one of {names}, got {value!r}")


class RuleKind(Enum):
    """How a rule is evaluated."""

    PER_FILE = "per-file"  # independently for each file
    BATCH = "batch"  # once over the whole file set
