"""SI 2 — limitation of exterior fire propagation."""

from __future__ import annotations

from dataclasses import dataclass

from dbsi.data.exterior import (
    BASE_MIN_DISTANCE,
    CAVITY_INSULATION_BY_HEIGHT,
    DISTANCE_HEIGHT_FACTOR,
    DISTANCE_HEIGHT_LIMIT,
    FACADE_CLASS_BY_HEIGHT,
    MAX_OPENING_PERCENTAGE,
    OPENING_PENALTY_FACTOR,
    OPENING_PENALTY_THRESHOLD,
)
from dbsi.models.enums import MaterialClass, SectionId
from dbsi.models.inputs import ExteriorSpreadInput
from dbsi.models.project import ProjectContext  # noqa: TCH001
from dbsi.rules import Assessment, Check, Comparison, FieldResolver, SectionEvaluator


@dataclass(frozen=True)
class ExteriorSpreadValues:
    facade_height: float
    distance_to_property: float
    facade_material: MaterialClass
    opening_percentage: float | None
    insulation_material: MaterialClass | None


class ExteriorSpreadEvaluator(SectionEvaluator[ExteriorSpreadInput, ExteriorSpreadValues]):
    """Checks separation to the property line and façade reaction to fire.

    The separation distance grows with the façade height above 15 m and is
    increased by half again when more than 40% of the façade is open.
    """

    section_id = SectionId.SI2
    title = "SI 2 - Exterior propagation"
    input_model = ExteriorSpreadInput

    def resolve(
        self, fields: FieldResolver, context: ProjectContext,
    ) -> ExteriorSpreadValues:
        fields.number("facade_height")
        fields.number("distance_to_property")
        fields.choice("facade_material", MaterialClass)
        fields.optional_number("opening_percentage")
        fields.optional_choice("insulation_material", MaterialClass)
        return fields.build(ExteriorSpreadValues)

    def assess(self, values: ExteriorSpreadValues, assessment: Assessment) -> None:
        height = values.facade_height
        openings = values.opening_percentage

        min_distance = BASE_MIN_DISTANCE
        if height > DISTANCE_HEIGHT_LIMIT:
            min_distance = max(BASE_MIN_DISTANCE, height * DISTANCE_HEIGHT_FACTOR)
        if openings is not None and openings > OPENING_PENALTY_THRESHOLD:
            min_distance *= OPENING_PENALTY_FACTOR

        required_class, required_label = FACADE_CLASS_BY_HEIGHT.lookup(height)
        cavity_class, cavity_label = CAVITY_INSULATION_BY_HEIGHT.lookup(height)

        assessment.require(Check(
            "distance_to_property",
            values.distance_to_property,
            Comparison.AT_LEAST,
            min_distance,
            (
                f"Increase the distance to the property line to {min_distance:.1f} m",
                "Reduce the percentage of façade openings",
                "Improve the reaction to fire of façade materials",
            ),
        ))
        if openings is not None:
            assessment.require(Check(
                "opening_percentage",
                openings,
                Comparison.AT_MOST,
                MAX_OPENING_PERCENTAGE,
                (f"Reduce façade openings below {MAX_OPENING_PERCENTAGE:.0f}%",),
            ))
        assessment.require(Check(
            "facade_material",
            values.facade_material.rank,
            Comparison.AT_LEAST,
            required_class.rank,
            (f"Use façade materials of class {required_label} or better",),
        ))
        if values.insulation_material is not None:
            assessment.require(Check(
                "insulation_material",
                values.insulation_material.rank,
                Comparison.AT_LEAST,
                cavity_class.rank,
                (f"Use ventilated-cavity insulation of class {cavity_label} or better",),
            ))

        assessment.threshold("min_distance", "Minimum separation distance", min_distance, "m")
        assessment.threshold(
            "max_opening_percentage",
            "Maximum opening percentage",
            MAX_OPENING_PERCENTAGE,
            "%",
        )
        assessment.threshold("required_material", "Required façade class", required_label)
        assessment.threshold(
            "required_insulation", "Required cavity insulation class", cavity_label,
        )
