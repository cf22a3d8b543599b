"""Tests for SI 4 — fire protection installations."""

from __future__ import annotations

import pytest

from dbsi.data.installations import required_systems
from dbsi.exceptions import InputValidationError
from dbsi.models.enums import (
    BuildingLocation,
    BuildingUse,
    ComplianceState,
    ProtectionSystem,
    RiskLevel,
)
from dbsi.models.inputs import ProtectionSystemsInput
from dbsi.models.project import ProjectContext
from dbsi.sections.installations import ProtectionSystemsEvaluator


def _context(building_use: BuildingUse = BuildingUse.OFFICE) -> ProjectContext:
    return ProjectContext(
        project_name="Installations test",
        building_use=building_use,
        total_surface=400,
        evacuation_height=10,
        floors=3,
        max_occupancy=40,
        building_location=BuildingLocation.URBAN,
    )


def _input(**overrides: object) -> ProtectionSystemsInput:
    defaults: dict[str, object] = {"risk_level": "low", "installed_systems": []}
    defaults.update(overrides)
    return ProtectionSystemsInput(**defaults)  # type: ignore[arg-type]


_HOSPITAL_SYSTEMS = [
    ProtectionSystem.EXTINGUISHERS,
    ProtectionSystem.FIRE_HOSE_REELS,
    ProtectionSystem.DRY_RISER,
    ProtectionSystem.FIRE_DETECTION,
    ProtectionSystem.FIRE_ALARM,
    ProtectionSystem.SPRINKLERS,
    ProtectionSystem.EMERGENCY_LIGHTING,
    ProtectionSystem.SIGNAGE,
    ProtectionSystem.PUBLIC_ADDRESS,
]


@pytest.fixture()
def evaluator() -> ProtectionSystemsEvaluator:
    return ProtectionSystemsEvaluator()


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------


class TestRequiredSystems:
    def test_extinguishers_always_required(self) -> None:
        assert required_systems(BuildingUse.OFFICE, 100, 5, RiskLevel.LOW) == {
            ProtectionSystem.EXTINGUISHERS: "required in every building",
        }

    def test_rules_accumulate_in_order(self) -> None:
        systems = required_systems(BuildingUse.HEALTHCARE, 2500, 30, RiskLevel.HIGH)
        assert list(systems) == _HOSPITAL_SYSTEMS

    def test_large_commercial_needs_smoke_control(self) -> None:
        systems = required_systems(BuildingUse.COMMERCIAL, 1200, 10, RiskLevel.MEDIUM)
        assert list(systems) == [
            ProtectionSystem.EXTINGUISHERS,
            ProtectionSystem.FIRE_HOSE_REELS,
            ProtectionSystem.SMOKE_CONTROL,
        ]
        assert systems[ProtectionSystem.SMOKE_CONTROL] == (
            "commercial/industrial use with area > 1000 m²"
        )

    def test_area_thresholds_are_strict(self) -> None:
        systems = required_systems(BuildingUse.OFFICE, 500, 15, RiskLevel.LOW)
        assert ProtectionSystem.FIRE_HOSE_REELS not in systems
        assert ProtectionSystem.EMERGENCY_LIGHTING not in systems


# ---------------------------------------------------------------------------
# Coverage
# ---------------------------------------------------------------------------


class TestCoverage:
    def test_full_coverage_passes(self, evaluator: ProtectionSystemsEvaluator) -> None:
        result = evaluator.evaluate(_context(), _input(installed_systems=["extinguishers"]))

        assert result.status.state == ComplianceState.PASS
        assert result.status.percent == 100
        assert result.compliance is True
        assert result.recommendations == []
        assert result.value("missing_systems") == "-"

    def test_nothing_installed(self, evaluator: ProtectionSystemsEvaluator) -> None:
        result = evaluator.evaluate(_context(), _input())

        assert result.status.state == ComplianceState.PARTIAL
        assert result.status.percent == 0
        assert result.compliance is False
        assert result.recommendations == ["Install portable extinguishers (required in every building)"]

    def test_partial_coverage_percentage(self, evaluator: ProtectionSystemsEvaluator) -> None:
        result = evaluator.evaluate(
            _context(BuildingUse.HEALTHCARE),
            _input(
                total_area=2500,
                building_height=30,
                risk_level="high",
                installed_systems=["extinguishers", "sprinklers", "fire_alarm"],
            ),
        )

        assert result.status.percent == pytest.approx(33.3)
        assert result.status.label == "PARTIAL (33%)"
        assert result.value("installed_count") == "3/9"
        assert len(result.recommendations) == 6
        assert (
            "Install automatic fire detection (healthcare/hotel use, or high risk with area > 1000 m²)"
        ) in result.recommendations

    def test_extra_systems_do_not_count(self, evaluator: ProtectionSystemsEvaluator) -> None:
        result = evaluator.evaluate(
            _context(), _input(installed_systems=["sprinklers", "smoke_control"]),
        )
        assert result.status.percent == 0

    def test_area_and_height_fall_back_to_project(
        self, evaluator: ProtectionSystemsEvaluator,
    ) -> None:
        result = evaluator.evaluate(_context(), _input(installed_systems=["extinguishers"]))
        assert result.value("installed_count") == "1/1"


class TestValidation:
    def test_risk_level_is_required(self, evaluator: ProtectionSystemsEvaluator) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            evaluator.evaluate(_context(), _input(risk_level=None))
        assert exc_info.value.fields == ("risk_level",)

    def test_unknown_system_is_rejected(self, evaluator: ProtectionSystemsEvaluator) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            evaluator.evaluate(_context(), _input(installed_systems=["laser_grid"]))
        assert exc_info.value.fields == ("installed_systems",)

    def test_non_list_systems_payload(self, evaluator: ProtectionSystemsEvaluator) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            evaluator.evaluate(_context(), {"riskLevel": "low", "installedSystems": "sprinklers"})
        assert exc_info.value.fields == ("installed_systems",)
        assert exc_info.value.section == "si4"

    def test_parking_use_is_rejected(self, evaluator: ProtectionSystemsEvaluator) -> None:
        with pytest.raises(InputValidationError) as exc_info:
            evaluator.evaluate(_context(BuildingUse.PARKING_UNDER), _input())
        assert exc_info.value.fields == ("building_use",)
