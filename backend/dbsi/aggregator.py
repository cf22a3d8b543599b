"""Collects section results into the report model."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from dbsi.data.labels import BUILDING_USE_LABELS, LOCATION_LABELS
from dbsi.formatting import format_number
from dbsi.models.enums import SectionId
from dbsi.models.report import ReportEntry, ReportModel

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dbsi.models.project import ProjectContext
    from dbsi.models.result import SectionResult

logger = logging.getLogger(__name__)

UNNAMED_PROJECT = "Untitled project"


def general_data(context: ProjectContext) -> list[ReportEntry]:
    """Label/value rows describing the project, in report order."""
    rows = [
        ("Project name", context.project_name or UNNAMED_PROJECT),
        ("Building use", BUILDING_USE_LABELS[context.building_use]),
        ("Total surface", f"{format_number(context.total_surface)} m²"),
        ("Evacuation height", f"{format_number(context.evacuation_height)} m"),
        ("Number of floors", format_number(context.floors)),
        ("Maximum occupancy", f"{format_number(context.max_occupancy)} persons"),
        ("Location", LOCATION_LABELS[context.building_location]),
    ]
    return [ReportEntry(label=label, value=value) for label, value in rows]


class ComplianceAggregator:
    """Builds a :class:`~dbsi.models.report.ReportModel` from section results.

    Never fails: sections that were not evaluated are left out, and when a
    section appears more than once the last result wins.
    """

    def aggregate(
        self,
        context: ProjectContext,
        results: Iterable[SectionResult],
        generated_at: datetime | None = None,
    ) -> ReportModel:
        latest: dict[SectionId, SectionResult] = {}
        for result in results:
            latest[result.section_id] = result

        order = list(SectionId)
        sections = sorted(latest.values(), key=lambda r: order.index(r.section_id))

        logger.info(
            "Aggregated %d section(s) for project %r",
            len(sections),
            context.project_name,
        )
        return ReportModel(
            project_name=context.project_name or UNNAMED_PROJECT,
            project=context,
            general_data=general_data(context),
            sections=sections,
            generated_at=generated_at or datetime.now(),
        )
