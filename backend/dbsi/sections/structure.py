"""SI 6 — fire resistance of the structure."""

from __future__ import annotations

from dataclasses import dataclass

from dbsi.data.labels import SECTOR_LOCATION_LABELS, STRUCTURE_LABELS
from dbsi.data.structure import (
    ADVANCED_METHODS_HEIGHT,
    LOAD_LEVEL_STEPS,
    MAX_SIMPLIFIED_HEIGHT,
    RESISTANCE_TABLES,
    SPECIAL_RISK_OVERRIDES,
    STRUCTURE_USES,
    format_rating,
    raise_rating,
)
from dbsi.models.enums import (
    BuildingUse,
    LoadLevel,
    SectionId,
    SectorLocation,
    SpecialRisk,
    StructureType,
)
from dbsi.models.inputs import StructuralResistanceInput
from dbsi.models.project import ProjectContext  # noqa: TCH001
from dbsi.rules import Assessment, Check, Comparison, FieldResolver, SectionEvaluator


@dataclass(frozen=True)
class StructuralResistanceValues:
    building_height: float
    structure_type: StructureType
    building_use: BuildingUse
    load_level: LoadLevel
    sector_location: SectorLocation
    risk_level: SpecialRisk


def required_rating(values: StructuralResistanceValues) -> int:
    """Required R rating in minutes for the sector."""
    table = RESISTANCE_TABLES[values.sector_location][values.building_use]
    minutes = table.lookup(values.building_height)
    minutes = SPECIAL_RISK_OVERRIDES.get(values.risk_level, minutes)
    return raise_rating(minutes, LOAD_LEVEL_STEPS[values.load_level])


class StructuralResistanceEvaluator(
    SectionEvaluator[StructuralResistanceInput, StructuralResistanceValues],
):
    """Selects the required R rating and flags structures outside simplified methods.

    The material itself is not verified here; the verdict only depends on
    whether the height is within the range of the simplified tables.
    """

    section_id = SectionId.SI6
    title = "SI 6 - Structural fire resistance"
    input_model = StructuralResistanceInput
    accepted_uses = STRUCTURE_USES

    def resolve(
        self, fields: FieldResolver, context: ProjectContext,
    ) -> StructuralResistanceValues:
        fields.number("building_height", fallback=context.evacuation_height)
        fields.choice("structure_type", StructureType)
        fields.choice(
            "building_use", BuildingUse, self.accepted_uses, context.building_use,
        )
        fields.choice("load_level", LoadLevel, fallback=LoadLevel.MEDIUM)
        fields.choice(
            "sector_location", SectorLocation, fallback=SectorLocation.ABOVE_GRADE,
        )
        fields.choice("risk_level", SpecialRisk, fallback=SpecialRisk.NORMAL)
        return fields.build(StructuralResistanceValues)

    def assess(self, values: StructuralResistanceValues, assessment: Assessment) -> None:
        height = values.building_height
        rating = required_rating(values)

        if height > ADVANCED_METHODS_HEIGHT:
            assessment.advise("High-rise building - consider advanced calculation methods")
        if values.structure_type == StructureType.STEEL:
            assessment.advise("Steel structure - verify passive fire protection")
        if values.structure_type == StructureType.WOOD:
            assessment.advise("Timber structure - verify minimum section dimensions")
        if values.building_use in (BuildingUse.COMMERCIAL, BuildingUse.ASSEMBLY):
            assessment.advise("Public assembly use - pay special attention to exits")
        if values.load_level == LoadLevel.HIGH:
            assessment.advise("High fire load - rating raised one class")

        assessment.require(Check(
            "building_height",
            height,
            Comparison.AT_MOST,
            MAX_SIMPLIFIED_HEIGHT,
            ("Excessive height - apply special calculation methods",),
        ))

        if values.sector_location == SectorLocation.ROOF and height <= ADVANCED_METHODS_HEIGHT:
            assessment.advise("Lightweight roof: R 30 may suffice if stability is not compromised")

        assessment.threshold("required_resistance", "Required resistance", format_rating(rating))
        assessment.threshold("required_minutes", "Required resistance time", rating, "min")
        assessment.threshold(
            "sector_location", "Sector location", SECTOR_LOCATION_LABELS[values.sector_location],
        )
        assessment.threshold(
            "structure_type", "Structure", STRUCTURE_LABELS[values.structure_type],
        )
