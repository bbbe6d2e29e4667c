"""Configuration resolution: raw mapping → immutable Configuration."""

from naechste.application.config.merge import deep_merge, merge_lists
from naechste.application.config.resolver import (
    default_raw_configuration,
    resolve_configuration,
)

__all__ = [
    "deep_merge",
    "default_raw_configuration",
    "merge_lists",
    "resolve_configuration",
]
