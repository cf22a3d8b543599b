"""PDF report renderer — lays out a ReportModel on A4 pages with PyMuPDF."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import fitz  # type: ignore[import-untyped]

from dbsi.exceptions import ReportRenderingError
from dbsi.models.enums import ComplianceState

if TYPE_CHECKING:
    from dbsi.models.report import ReportModel
    from dbsi.models.result import SectionResult

logger = logging.getLogger(__name__)

_A4_WIDTH = 595
_A4_HEIGHT = 842
_MARGIN = 56  # ~20 mm
_REGULAR = "helv"
_BOLD = "hebo"

_BLACK = (0.0, 0.0, 0.0)
_STATUS_COLORS: dict[ComplianceState, tuple[float, float, float]] = {
    ComplianceState.PASS: (0.0, 0.47, 0.0),
    ComplianceState.FAIL: (0.78, 0.0, 0.0),
    ComplianceState.PARTIAL: (0.8, 0.45, 0.0),
    ComplianceState.NOT_EVALUATED: (0.4, 0.4, 0.4),
}


@dataclass(frozen=True)
class RenderedReport:
    """A rendered document ready to be sent or saved."""

    filename: str
    content: bytes
    page_count: int


class _PageCursor:
    """Tracks the write position and starts a new page when space runs out."""

    def __init__(self, doc: fitz.Document) -> None:
        self._doc = doc
        self.page = doc.new_page(width=_A4_WIDTH, height=_A4_HEIGHT)
        self.y = float(_MARGIN)

    def ensure(self, needed: float) -> None:
        if self.y + needed > _A4_HEIGHT - _MARGIN:
            self.page = self._doc.new_page(width=_A4_WIDTH, height=_A4_HEIGHT)
            self.y = float(_MARGIN)

    def write(
        self,
        text: str,
        *,
        size: float = 10,
        bold: bool = False,
        indent: float = 0,
        color: tuple[float, float, float] = _BLACK,
        spacing: float | None = None,
    ) -> None:
        """Write *text*, wrapping it to the page width."""
        fontname = _BOLD if bold else _REGULAR
        line_height = spacing or size * 1.45
        width = _A4_WIDTH - 2 * _MARGIN - indent
        for line in _wrap(text, fontname, size, width):
            self.ensure(line_height)
            self.y += line_height
            self.page.insert_text(
                (_MARGIN + indent, self.y),
                line,
                fontname=fontname,
                fontsize=size,
                color=color,
            )

    def gap(self, points: float) -> None:
        self.y += points


def _wrap(text: str, fontname: str, size: float, width: float) -> list[str]:
    """Greedy word wrap measured with the font's real glyph widths."""
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and fitz.get_text_length(candidate, fontname=fontname, fontsize=size) > width:
            lines.append(current)
            current = word
        else:
            current = candidate
    lines.append(current)
    return lines


class PdfReportRenderer:
    """Renders a :class:`~dbsi.models.report.ReportModel` as a paginated PDF.

    Layout: title and project name, "1. General data" as label/value rows,
    then "2. Section justification" with one numbered block per section
    (status, calculations, recommendations). Every page gets a footer with
    the generation date and "Page i of n".
    """

    title = "CTE DB-SI REPORT"

    def render(self, report: ReportModel) -> RenderedReport:
        """Render *report* to PDF bytes.

        Raises:
            ReportRenderingError: If PyMuPDF fails to build the document.
        """
        doc = fitz.open()
        try:
            cursor = _PageCursor(doc)
            cursor.write(self.title, size=20, bold=True)
            cursor.write(report.project_name, size=16)
            cursor.gap(15)

            cursor.ensure(50)
            cursor.write("1. GENERAL DATA", size=14, bold=True)
            cursor.gap(4)
            for entry in report.general_data:
                cursor.ensure(16)
                cursor.write(f"{entry.label}: {entry.value or 'Not specified'}")
            cursor.gap(15)

            cursor.ensure(50)
            cursor.write("2. SECTION JUSTIFICATION", size=14, bold=True)
            cursor.gap(8)
            if not report.sections:
                cursor.write("No sections have been evaluated.")
            for index, section in enumerate(report.sections, start=1):
                self._write_section(cursor, index, section)

            self._write_footers(doc, report)
            content = doc.tobytes(garbage=3, deflate=True)
            page_count = doc.page_count
        except (RuntimeError, ValueError) as exc:
            msg = f"Failed to render report for {report.project_name!r}"
            raise ReportRenderingError(msg) from exc
        finally:
            doc.close()

        logger.info(
            "Rendered report %r: %d section(s), %d page(s)",
            report.project_name,
            len(report.sections),
            page_count,
        )
        return RenderedReport(
            filename=report.filename("pdf"),
            content=content,
            page_count=page_count,
        )

    def save(self, report: ReportModel, directory: Path) -> Path:
        """Render *report* and write it into *directory* under its report filename."""
        rendered = self.render(report)
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / rendered.filename
        path.write_bytes(rendered.content)
        return path

    @staticmethod
    def _write_section(cursor: _PageCursor, index: int, section: SectionResult) -> None:
        cursor.ensure(60)
        cursor.write(f"2.{index} {section.title}", size=12, bold=True)
        cursor.gap(2)
        cursor.write(
            f"Status: {section.status.label}",
            bold=True,
            color=_STATUS_COLORS[section.status.state],
        )

        calculations = section.calculations()
        if calculations:
            cursor.gap(4)
            cursor.write("Calculations:", bold=True)
            for label, value in calculations:
                cursor.write(f"- {label}: {value}", indent=14)

        if section.recommendations:
            cursor.gap(4)
            cursor.ensure(30)
            cursor.write("Recommendations:", bold=True)
            for recommendation in section.recommendations:
                cursor.write(f"- {recommendation}", indent=14)
        cursor.gap(14)

    @staticmethod
    def _write_footers(doc: fitz.Document, report: ReportModel) -> None:
        total = doc.page_count
        date = report.generated_at.strftime("%d/%m/%Y")
        for number, page in enumerate(doc, start=1):
            page.insert_text(
                (_MARGIN, _A4_HEIGHT - 28),
                f"Generated on {date} - Page {number} of {total}",
                fontname=_REGULAR,
                fontsize=8,
                color=_BLACK,
            )
