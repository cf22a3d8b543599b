"""Shared fixtures for the DB-SI calculator tests."""

from __future__ import annotations

from typing import Any

import pytest

from dbsi.models.project import ProjectContext


@pytest.fixture()
def project_form() -> dict[str, Any]:
    """Project data as the UI posts it."""
    return {
        "projectName": "Edificio Alameda",
        "usBuilding": "office",
        "totalSurface": "2000",
        "evacuationHeight": "10",
        "floors": "3",
        "maxOccupancy": "200",
        "buildingLocation": "urban",
    }


@pytest.fixture()
def project(project_form: dict[str, Any]) -> ProjectContext:
    return ProjectContext.from_form(project_form)


@pytest.fixture()
def section_inputs() -> dict[str, dict[str, Any]]:
    """One valid input payload per section, keyed by section id."""
    return {
        "si1": {"compartmentArea": "2000", "materialType": "b"},
        "si2": {"facadeHeight": "10", "distanceToProperty": "4", "facadeMaterial": "c"},
        "si3": {"floorArea": "500", "exitWidth": "1.2", "travelDistance": "30"},
        "si4": {"riskLevel": "medium", "installedSystems": ["extinguishers"]},
        "si5": {
            "buildingWidth": "20",
            "accessRoadWidth": "4",
            "distanceToAccess": "20",
            "hasHydrants": True,
        },
        "si6": {"structureType": "concrete"},
    }
