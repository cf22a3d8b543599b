"""Report model handed to document renderers."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from dbsi.models.project import ProjectContext  # noqa: TCH001 (pydantic resolves at runtime)
from dbsi.models.result import SectionResult  # noqa: TCH001


class ReportEntry(BaseModel):
    """A label/value row of the general-data block."""

    label: str
    value: str


class ReportModel(BaseModel):
    """Everything a renderer needs to produce the compliance document.

    Sections appear in section order; sections that were never evaluated
    are simply absent.
    """

    project_name: str
    project: ProjectContext
    general_data: list[ReportEntry]
    sections: list[SectionResult] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=datetime.now)

    @property
    def compliant_count(self) -> int:
        return sum(1 for s in self.sections if s.compliance is True)

    @property
    def all_compliant(self) -> bool:
        """True when at least one section was evaluated and every one passed."""
        return bool(self.sections) and self.compliant_count == len(self.sections)

    def filename(self, extension: str = "pdf") -> str:
        from dbsi.formatting import report_filename

        return report_filename(self.project.project_name, extension)

    def to_export_dict(self) -> dict[str, Any]:
        """Produce a plain dict for JSON export or template rendering."""
        return {
            "project_name": self.project_name,
            "general_data": [entry.model_dump() for entry in self.general_data],
            "sections": [section.to_export_dict() for section in self.sections],
            "summary": {
                "evaluated": len(self.sections),
                "compliant": self.compliant_count,
                "all_compliant": self.all_compliant,
            },
            "generated_at": self.generated_at.isoformat(),
            "filename": self.filename(),
        }
