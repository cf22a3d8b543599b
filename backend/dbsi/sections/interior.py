"""SI 1 — limitation of interior fire propagation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from dbsi.data.interior import COMPARTMENT_LIMITS, HIGH_RISE_HEIGHT, HIGH_RISE_RESISTANCE
from dbsi.data.labels import MATERIAL_LABELS
from dbsi.formatting import format_number
from dbsi.models.enums import BuildingUse, MaterialClass, SectionId
from dbsi.models.inputs import InteriorSpreadInput
from dbsi.models.project import ProjectContext  # noqa: TCH001
from dbsi.rules import Assessment, Check, Comparison, FieldResolver, SectionEvaluator


@dataclass(frozen=True)
class InteriorSpreadValues:
    building_use: BuildingUse
    surface_area: float
    height: float
    compartment_area: float
    material_type: MaterialClass


class InteriorSpreadEvaluator(SectionEvaluator[InteriorSpreadInput, InteriorSpreadValues]):
    """Checks the fire compartment size against the limit for the use and height."""

    section_id = SectionId.SI1
    title = "SI 1 - Interior propagation"
    input_model = InteriorSpreadInput
    accepted_uses = frozenset(COMPARTMENT_LIMITS)

    def resolve(
        self, fields: FieldResolver, context: ProjectContext,
    ) -> InteriorSpreadValues:
        fields.choice(
            "building_use", BuildingUse, self.accepted_uses, context.building_use,
        )
        fields.number("surface_area", fallback=context.total_surface)
        fields.number("height", fallback=context.evacuation_height)
        fields.number("compartment_area")
        fields.choice("material_type", MaterialClass)
        return fields.build(InteriorSpreadValues)

    def assess(self, values: InteriorSpreadValues, assessment: Assessment) -> None:
        max_area, resistance = COMPARTMENT_LIMITS[values.building_use].lookup(values.height)

        assessment.require(Check(
            "compartment_area",
            values.compartment_area,
            Comparison.AT_MOST,
            max_area,
            (
                f"Reduce the fire compartment area to {format_number(max_area)} m² or less",
                "Install automatic extinguishing systems",
                "Improve compartmentation between fire sectors",
            ),
        ))

        if values.height > HIGH_RISE_HEIGHT:
            assessment.advise("Meet the additional requirements for high-rise buildings")
            resistance = HIGH_RISE_RESISTANCE

        assessment.threshold(
            "max_compartment_area", "Maximum compartment area", max_area, "m²",
        )
        assessment.threshold("required_resistance", "Required resistance", resistance)
        assessment.threshold(
            "min_compartments",
            "Minimum number of compartments",
            math.ceil(values.surface_area / max_area),
        )
        assessment.threshold(
            "material_type", "Declared lining class", MATERIAL_LABELS[values.material_type],
        )
