"""Services built on top of the calculation core."""

from dbsi.services.pdf_report import PdfReportRenderer, RenderedReport

__all__ = ["PdfReportRenderer", "RenderedReport"]
