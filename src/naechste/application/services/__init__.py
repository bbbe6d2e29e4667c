"""Services: main facade (Linter)."""

from naechste.application.services.linter import Linter, lint

__all__ = ["Linter", "lint"]
