"""Custom exception hierarchy for the DB-SI compliance calculator."""

from __future__ import annotations

from collections.abc import Iterable


class DbsiError(Exception):
    """Base exception for all DB-SI calculator errors."""


class InputValidationError(DbsiError, ValueError):
    """Raised when required fields are missing, non-numeric or out of range.

    ``fields`` holds the offending field names in sorted order. ``section``
    is the section id the input belonged to, or ``None`` for project data.
    """

    def __init__(self, fields: Iterable[str], section: str | None = None) -> None:
        self.fields: tuple[str, ...] = tuple(sorted(set(fields)))
        self.section = section
        scope = f"section {section}" if section else "project data"
        super().__init__(
            f"Missing or invalid fields in {scope}: {', '.join(self.fields)}"
        )


class UnknownSectionError(DbsiError, KeyError):
    """Raised when a section id has no registered evaluator."""

    def __str__(self) -> str:
        return f"Unknown section: {self.args[0]!r}"


class ReportRenderingError(DbsiError):
    """Raised when a report document cannot be produced."""
