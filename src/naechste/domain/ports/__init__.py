"""Ports: contracts implemented by rules and reporters."""

from naechste.domain.ports.reporter import ReporterProtocol
from naechste.domain.ports.rule import BatchRuleProtocol, FileRuleProtocol, ImportGraphSource

__all__ = [
    "BatchRuleProtocol",
    "FileRuleProtocol",
    "ImportGraphSource",
    "ReporterProtocol",
]
