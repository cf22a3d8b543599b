"""Tests for the PyMuPDF report renderer."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any
from unittest.mock import patch

import fitz  # type: ignore[import-untyped]
import pytest

from dbsi.aggregator import ComplianceAggregator
from dbsi.exceptions import ReportRenderingError
from dbsi.factory import create_default_calculator
from dbsi.models.enums import SectionId
from dbsi.models.project import ProjectContext
from dbsi.models.report import ReportModel
from dbsi.models.result import ComplianceStatus, SectionResult, Threshold
from dbsi.services.pdf_report import PdfReportRenderer

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------

_GENERATED_AT = datetime(2024, 3, 8, 10, 15)


def _full_report(
    project: ProjectContext, section_inputs: dict[str, dict[str, Any]],
) -> ReportModel:
    calculator = create_default_calculator()
    results = [
        calculator.evaluate(section_id, project, payload)
        for section_id, payload in section_inputs.items()
    ]
    return ComplianceAggregator().aggregate(project, results, generated_at=_GENERATED_AT)


def _page_texts(content: bytes) -> list[str]:
    with fitz.open(stream=content, filetype="pdf") as doc:
        return [page.get_text() for page in doc]


@pytest.fixture()
def renderer() -> PdfReportRenderer:
    return PdfReportRenderer()


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------


class TestRender:
    def test_renders_title_general_data_and_sections(
        self,
        renderer: PdfReportRenderer,
        project: ProjectContext,
        section_inputs: dict[str, dict[str, Any]],
    ) -> None:
        rendered = renderer.render(_full_report(project, section_inputs))

        assert rendered.content.startswith(b"%PDF")
        assert rendered.filename == "EdificioAlameda_REPORT.pdf"
        text = "\n".join(_page_texts(rendered.content))
        assert "CTE DB-SI REPORT" in text
        assert "Edificio Alameda" in text
        assert "1. GENERAL DATA" in text
        assert "Total surface: 2000 m" in text
        assert "2. SECTION JUSTIFICATION" in text
        assert "2.1 SI 1 - Interior propagation" in text
        assert "2.6 SI 6 - Structural fire resistance" in text
        assert "Status: COMPLIANT" in text

    def test_partial_status_label(
        self,
        renderer: PdfReportRenderer,
        project: ProjectContext,
        section_inputs: dict[str, dict[str, Any]],
    ) -> None:
        rendered = renderer.render(_full_report(project, section_inputs))
        text = "\n".join(_page_texts(rendered.content))
        assert "Status: PARTIAL (33%)" in text
        assert "Install equipped fire hose reels (BIE)" in text

    def test_empty_report(self, renderer: PdfReportRenderer, project: ProjectContext) -> None:
        report = ComplianceAggregator().aggregate(project, [], generated_at=_GENERATED_AT)
        rendered = renderer.render(report)
        assert rendered.page_count == 1
        assert "No sections have been evaluated." in _page_texts(rendered.content)[0]


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


class TestPagination:
    def _long_report(self, project: ProjectContext) -> ReportModel:
        sections = [
            SectionResult(
                section_id=section_id,
                title=f"{section_id.value.upper()} - Long section",
                status=ComplianceStatus.of(False),
                thresholds=[
                    Threshold(key=f"t{i}", label=f"Threshold {i}", value=i, unit="m")
                    for i in range(10)
                ],
                recommendations=[
                    f"Recommendation {i}: a sentence long enough to need wrapping across "
                    "the printable width of an A4 page at ten points"
                    for i in range(12)
                ],
            )
            for section_id in SectionId
        ]
        return ComplianceAggregator().aggregate(project, sections, generated_at=_GENERATED_AT)

    def test_long_reports_span_several_pages(
        self, renderer: PdfReportRenderer, project: ProjectContext,
    ) -> None:
        rendered = renderer.render(self._long_report(project))
        pages = _page_texts(rendered.content)

        assert rendered.page_count > 1
        assert len(pages) == rendered.page_count
        for number, text in enumerate(pages, start=1):
            assert f"Generated on 08/03/2024 - Page {number} of {len(pages)}" in text

    def test_every_recommendation_is_kept(
        self, renderer: PdfReportRenderer, project: ProjectContext,
    ) -> None:
        text = "\n".join(_page_texts(renderer.render(self._long_report(project)).content))
        assert text.count("Recommendation 11:") == len(SectionId)


# ---------------------------------------------------------------------------
# Saving and failures
# ---------------------------------------------------------------------------


class TestSaveAndErrors:
    def test_save_writes_report_file(
        self, renderer: PdfReportRenderer, project: ProjectContext, tmp_path: Path,
    ) -> None:
        report = ComplianceAggregator().aggregate(project, [], generated_at=_GENERATED_AT)
        path = renderer.save(report, tmp_path / "out")
        assert path == tmp_path / "out" / "EdificioAlameda_REPORT.pdf"
        assert path.read_bytes().startswith(b"%PDF")

    def test_pymupdf_failure_is_wrapped(
        self, renderer: PdfReportRenderer, project: ProjectContext,
    ) -> None:
        report = ComplianceAggregator().aggregate(project, [])
        with (
            patch("dbsi.services.pdf_report.fitz.get_text_length", side_effect=ValueError("bad font")),
            pytest.raises(ReportRenderingError),
        ):
            renderer.render(report)
