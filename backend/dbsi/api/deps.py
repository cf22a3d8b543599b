"""Dependency wiring and settings for the FastAPI application."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dbsi.aggregator import ComplianceAggregator
from dbsi.engine import ComplianceCalculator
from dbsi.factory import create_default_calculator
from dbsi.services.pdf_report import PdfReportRenderer

logger = logging.getLogger(__name__)

_DEFAULT_CORS_ORIGINS = "http://localhost:3000"
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment."""

    cors_origins: tuple[str, ...]
    fill_missing_advice: bool


def load_settings() -> Settings:
    """Read settings from environment variables.

    ``DBSI_CORS_ORIGINS`` is a comma-separated origin list.
    ``DBSI_FILL_MISSING_ADVICE`` accepts 0/false/no/off to disable the
    generic advisory on silent failures.
    """
    origins = os.environ.get("DBSI_CORS_ORIGINS", _DEFAULT_CORS_ORIGINS)
    fill = os.environ.get("DBSI_FILL_MISSING_ADVICE", "true").strip().lower()
    settings = Settings(
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        fill_missing_advice=fill not in _FALSE_VALUES,
    )
    logger.debug("Loaded settings: %s", settings)
    return settings


@dataclass(frozen=True)
class Services:
    """Collaborators used by the HTTP endpoints."""

    calculator: ComplianceCalculator
    aggregator: ComplianceAggregator
    renderer: PdfReportRenderer


def create_services(settings: Settings) -> Services:
    return Services(
        calculator=create_default_calculator(
            fill_missing_advice=settings.fill_missing_advice,
        ),
        aggregator=ComplianceAggregator(),
        renderer=PdfReportRenderer(),
    )
