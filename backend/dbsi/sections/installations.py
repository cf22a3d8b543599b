"""SI 4 — fire protection installations."""

from __future__ import annotations

from dataclasses import dataclass

from dbsi.data.installations import required_systems
from dbsi.data.labels import SYSTEM_LABELS
from dbsi.models.enums import BuildingUse, ProtectionSystem, RiskLevel, SectionId
from dbsi.models.inputs import ProtectionSystemsInput
from dbsi.models.project import ProjectContext  # noqa: TCH001
from dbsi.models.result import ComplianceStatus
from dbsi.rules import (
    Assessment,
    Check,
    FieldResolver,
    SectionEvaluator,
    join_labels,
)


@dataclass(frozen=True)
class ProtectionSystemsValues:
    building_use: BuildingUse
    total_area: float
    building_height: float
    risk_level: RiskLevel
    installed_systems: frozenset[ProtectionSystem]


def _install_advice(system: ProtectionSystem, reason: str) -> str:
    label = SYSTEM_LABELS[system]
    return f"Install {label[:1].lower()}{label[1:]} ({reason})"


class ProtectionSystemsEvaluator(
    SectionEvaluator[ProtectionSystemsInput, ProtectionSystemsValues],
):
    """Builds the list of mandatory installations and measures coverage.

    Compliance is reported as the percentage of required systems marked as
    installed; only full coverage counts as a pass.
    """

    section_id = SectionId.SI4
    title = "SI 4 - Fire protection installations"
    input_model = ProtectionSystemsInput
    accepted_uses = frozenset({
        BuildingUse.RESIDENTIAL,
        BuildingUse.OFFICE,
        BuildingUse.COMMERCIAL,
        BuildingUse.ASSEMBLY,
        BuildingUse.EDUCATIONAL,
        BuildingUse.HEALTHCARE,
        BuildingUse.HOTEL,
        BuildingUse.INDUSTRIAL,
    })

    def resolve(
        self, fields: FieldResolver, context: ProjectContext,
    ) -> ProtectionSystemsValues:
        fields.choice(
            "building_use", BuildingUse, self.accepted_uses, context.building_use,
        )
        fields.number("total_area", fallback=context.total_surface)
        fields.number("building_height", fallback=context.evacuation_height)
        fields.choice("risk_level", RiskLevel)
        fields.choices("installed_systems", ProtectionSystem)
        return fields.build(ProtectionSystemsValues)

    def assess(self, values: ProtectionSystemsValues, assessment: Assessment) -> None:
        required = required_systems(
            values.building_use,
            values.total_area,
            values.building_height,
            values.risk_level,
        )
        installed = [s for s in required if s in values.installed_systems]
        missing = [s for s in required if s not in values.installed_systems]

        for system, reason in required.items():
            assessment.require(Check.requires(
                system.value,
                system in values.installed_systems,
                True,
                _install_advice(system, reason),
            ))

        percent = round(len(installed) / len(required) * 100, 1)
        assessment.status = ComplianceStatus.from_percent(percent)

        assessment.threshold(
            "required_systems",
            "Required systems",
            join_labels(SYSTEM_LABELS[s] for s in required),
        )
        assessment.threshold(
            "missing_systems",
            "Missing systems",
            join_labels(SYSTEM_LABELS[s] for s in missing),
        )
        assessment.threshold(
            "installed_count", "Required systems installed", f"{len(installed)}/{len(required)}",
        )
        assessment.threshold("coverage_percent", "Coverage", percent, "%")
