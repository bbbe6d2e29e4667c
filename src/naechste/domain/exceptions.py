"""Domain exceptions: all public errors of naechste.

Rule violations are never exceptions, they are Diagnostics.
Exceptions cover defects that stop the run (configuration, patterns)
and misuse of the engine's own objects.
"""


class NaechsteError(Exception):
    """Base for all naechste error exceptions.

    Allows: except NaechsteError to catch all library errors.
    """


class ConfigurationError(NaechsteError, ValueError):
    """Configuration value is malformed.

    Raised while resolving configuration, before any file is evaluated.
    Inherits ValueError for semantic correctness (bad value).

    Attributes:
        key: Dotted path of the offending configuration entry.
        reason: Why the value is invalid.
    """

    def __init__(self, key: str, reason: str) -> None:
        """Initialize with configuration key and reason."""
        if not key:
            raise ValueError("key must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration '{key}': {reason}")


class PatternError(ConfigurationError):
    """Glob or regex inside an organization check does not compile.

    Attributes:
        check_id: Id of the organization check holding the pattern.
        pattern: The offending pattern text.
        reason: Why the pattern is invalid.
    """

    def __init__(self, check_id: str, pattern: str, reason: str) -> None:
        """Initialize with check id, pattern and reason."""
        self.check_id = check_id
        self.pattern = pattern
        super().__init__(
            f"file_organization_checks[{check_id}]",
            f"invalid pattern {pattern!r}: {reason}",
        )


class CollectionFrozenError(NaechsteError, RuntimeError):
    """Diagnostic added to a collection after finalize().

    Inherits RuntimeError for semantic correctness (invalid state).
    """

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("DiagnosticCollection is finalized, no more diagnostics accepted")
