"""SI 5 — fire brigade intervention."""

from __future__ import annotations

import math
from dataclasses import dataclass

from dbsi.data.intervention import (
    ACCESS_BY_HEIGHT,
    FIRE_LIFT_HEIGHT,
    HYDRANT_FACADE_STEP,
    HYDRANT_HEIGHT_STEP,
    MAX_HYDRANT_DISTANCE,
)
from dbsi.formatting import format_number
from dbsi.models.enums import SectionId
from dbsi.models.inputs import FireBrigadeAccessInput
from dbsi.models.project import ProjectContext  # noqa: TCH001
from dbsi.rules import Assessment, Check, Comparison, FieldResolver, SectionEvaluator


@dataclass(frozen=True)
class FireBrigadeAccessValues:
    building_height: float
    building_width: float
    access_road_width: float
    distance_to_access: float
    hydrant_distance: float | None
    has_fire_lift: bool
    has_hydrants: bool
    accessible_roof: bool


def required_hydrants(height: float, facade_length: float) -> int:
    return math.ceil(max(height / HYDRANT_HEIGHT_STEP, facade_length / HYDRANT_FACADE_STEP))


class FireBrigadeAccessEvaluator(
    SectionEvaluator[FireBrigadeAccessInput, FireBrigadeAccessValues],
):
    """Checks approach road, distance to the façade, hydrants and fire lift."""

    section_id = SectionId.SI5
    title = "SI 5 - Fire brigade intervention"
    input_model = FireBrigadeAccessInput

    def resolve(
        self, fields: FieldResolver, context: ProjectContext,
    ) -> FireBrigadeAccessValues:
        fields.number("building_height", fallback=context.evacuation_height)
        fields.number("building_width")
        fields.number("access_road_width")
        fields.number("distance_to_access")
        fields.optional_number("hydrant_distance")
        fields.flag("has_fire_lift")
        fields.flag("has_hydrants")
        fields.flag("accessible_roof")
        return fields.build(FireBrigadeAccessValues)

    def assess(self, values: FireBrigadeAccessValues, assessment: Assessment) -> None:
        height = values.building_height
        road_width, max_distance = ACCESS_BY_HEIGHT.lookup(height)
        needs_fire_lift = height > FIRE_LIFT_HEIGHT
        hydrants = required_hydrants(height, values.building_width)

        assessment.require(Check(
            "access_road_width",
            values.access_road_width,
            Comparison.AT_LEAST,
            road_width,
            (f"Increase access road width to {format_number(road_width)} m minimum",),
        ))
        assessment.require(Check(
            "distance_to_access",
            values.distance_to_access,
            Comparison.AT_MOST,
            max_distance,
            (
                "Reduce the distance between the access road and the façade "
                f"to {format_number(max_distance)} m maximum",
            ),
        ))
        assessment.require(Check.requires(
            "fire_lift",
            values.has_fire_lift,
            needs_fire_lift,
            "Install a fire-fighters' lift",
        ))
        assessment.require(Check.requires(
            "hydrants",
            values.has_hydrants,
            True,
            f"Provide at least {hydrants} exterior hydrant(s)",
        ))
        if values.hydrant_distance is not None:
            assessment.require(Check(
                "hydrant_distance",
                values.hydrant_distance,
                Comparison.AT_MOST,
                MAX_HYDRANT_DISTANCE,
                (f"Hydrant too far away (maximum {MAX_HYDRANT_DISTANCE:.0f} m from the building)",),
            ))

        if needs_fire_lift and not values.accessible_roof:
            assessment.advise("Consider making the roof accessible to fire crews")

        assessment.threshold("required_road_width", "Required access road width", road_width, "m")
        assessment.threshold(
            "max_distance_to_building", "Maximum distance to the façade", max_distance, "m",
        )
        assessment.threshold("required_hydrants", "Required hydrants", hydrants)
        assessment.threshold("needs_fire_lift", "Fire-fighters' lift required", needs_fire_lift)
