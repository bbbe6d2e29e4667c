"""Textual pattern extractors.

Narrow scanners over raw JS/TS source, no syntax tree:
- has_client_directive: leading 'use client' directive
- extract_exports: named top-level export identifiers
- extract_imports: raw import/require specifiers

Multi-line or computed exports (e.g. `export const a = 1, b = 2`,
`export { [name]: x }`) are outside detection scope.
"""

from naechste.infrastructure.extractors.directives import has_client_directive
from naechste.infrastructure.extractors.exports import ExportedName, extract_exports
from naechste.infrastructure.extractors.imports import extract_imports
from naechste.infrastructure.extractors.source import blank_comments

__all__ = [
    "ExportedName",
    "blank_comments",
    "extract_exports",
    "extract_imports",
    "has_client_directive",
]
