"""Server-side export rule.

Client components (files starting with a "use client" directive)
must not export data-fetching functions that only run on the server.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from naechste.application.rules._base import BaseFileRule
from naechste.domain.model.configuration import ServerSideExportsOptions
from naechste.infrastructure.extractors import extract_exports, has_client_directive

if TYPE_CHECKING:
    from naechste.domain.model.diagnostic import Diagnostic
    from naechste.domain.model.file_entry import FileEntry

SERVER_ONLY_EXPORTS: tuple[str, ...] = (
    "getServerSideProps",
    "getStaticProps",
    "getStaticPaths",
    "getInitialProps",
)


class ServerSideExportsRule(BaseFileRule):
    """Flags server-only exports in client components.

    One diagnostic per exported denylisted name, on the line of its
    export statement. Files without the directive are never flagged.
    """

    rule_id = "server-side-exports"
    options_type = ServerSideExportsOptions

    def evaluate(self, entry: FileEntry) -> tuple[Diagnostic, ...]:
        """Check one file for server-only exports.

        Args:
            entry: File to check

        Returns:
            One diagnostic per denylisted export (empty if none)
        """
        text = entry.text
        if text is None or not has_client_directive(text):
            return ()
        return tuple(
            self.diagnostic(
                entry,
                f"Server-side export '{export.name}' found in client component",
                line=export.line,
            )
            for export in extract_exports(text)
            if export.name in SERVER_ONLY_EXPORTS
        )
