"""SI 3 — evacuation of occupants."""

from __future__ import annotations

import math
from dataclasses import dataclass

from dbsi.data.evacuation import (
    CROWDED_USES,
    EMERGENCY_LIFT_FLOORS,
    EMERGENCY_LIFT_OCCUPANCY,
    EXITS_BY_OCCUPANCY,
    LARGE_FLOOR_AREA,
    MAX_TRAVEL_CROWDED_USE,
    MAX_TRAVEL_MULTI_FLOOR,
    MAX_TRAVEL_SINGLE_FLOOR,
    OCCUPANT_DENSITY,
    PERSONS_PER_WIDTH_MODULE,
    PUBLIC_ADDRESS_OCCUPANCY,
    WIDTH_MODULE_M,
)
from dbsi.formatting import format_number
from dbsi.models.enums import BuildingUse, SectionId
from dbsi.models.inputs import EvacuationInput
from dbsi.models.project import ProjectContext  # noqa: TCH001
from dbsi.rules import Assessment, Check, Comparison, FieldResolver, SectionEvaluator


@dataclass(frozen=True)
class EvacuationValues:
    building_use: BuildingUse
    floor_area: float
    occupant_load: float | None
    exit_width: float
    travel_distance: float
    number_of_floors: float


def occupancy_for(use: BuildingUse, floor_area: float, occupant_load: float | None) -> float:
    """Declared occupant load, or floor area divided by the use density."""
    if occupant_load is not None:
        return occupant_load
    return math.ceil(floor_area / OCCUPANT_DENSITY[use])


def required_exit_width(occupancy: float) -> float:
    """0.80 m for every 200 occupants or part thereof.

    Rounded to centimetres, so three modules give exactly 2.40 m and a
    declared width of 2.40 m complies.
    """
    modules = math.ceil(occupancy / PERSONS_PER_WIDTH_MODULE)
    return round(modules * WIDTH_MODULE_M, 2)


def required_exits(occupancy: float, floor_area: float) -> int:
    exits = 1
    for above, count in EXITS_BY_OCCUPANCY:
        if occupancy > above:
            exits = count
    if floor_area > LARGE_FLOOR_AREA:
        exits = max(exits, 2)
    return exits


class EvacuationEvaluator(SectionEvaluator[EvacuationInput, EvacuationValues]):
    """Checks exit width and travel distance against the occupancy.

    The required exit count is reported but not checked, since the form
    does not ask for the number of exits provided.
    """

    section_id = SectionId.SI3
    title = "SI 3 - Evacuation of occupants"
    input_model = EvacuationInput
    accepted_uses = frozenset(OCCUPANT_DENSITY)

    def resolve(self, fields: FieldResolver, context: ProjectContext) -> EvacuationValues:
        fields.choice(
            "building_use", BuildingUse, self.accepted_uses, context.building_use,
        )
        fields.number("floor_area")
        fields.optional_number("occupant_load")
        fields.number("exit_width")
        fields.number("travel_distance")
        fields.number("number_of_floors", fallback=context.floors)
        return fields.build(EvacuationValues)

    def assess(self, values: EvacuationValues, assessment: Assessment) -> None:
        use = values.building_use
        floors = values.number_of_floors
        occupancy = occupancy_for(use, values.floor_area, values.occupant_load)
        exit_width = required_exit_width(occupancy)

        max_travel = MAX_TRAVEL_SINGLE_FLOOR
        if floors > 1:
            max_travel = MAX_TRAVEL_MULTI_FLOOR
        if use in CROWDED_USES:
            max_travel = MAX_TRAVEL_CROWDED_USE

        assessment.require(Check(
            "exit_width",
            values.exit_width,
            Comparison.AT_LEAST,
            exit_width,
            (f"Increase exit width to at least {exit_width:.2f} m",),
        ))
        assessment.require(Check(
            "travel_distance",
            values.travel_distance,
            Comparison.AT_MOST,
            max_travel,
            (
                f"Reduce the evacuation route length below {format_number(max_travel)} m",
                "Add additional exits",
            ),
        ))

        if occupancy > EMERGENCY_LIFT_OCCUPANCY and floors > EMERGENCY_LIFT_FLOORS:
            assessment.advise("Consider an emergency evacuation lift")
        if use in CROWDED_USES and occupancy > PUBLIC_ADDRESS_OCCUPANCY:
            assessment.advise(
                "Install a public address system",
                "Provide illuminated emergency signage",
            )

        assessment.threshold("occupancy", "Calculated occupancy", occupancy, "persons")
        assessment.threshold("required_exit_width", "Required exit width", exit_width, "m")
        assessment.threshold("max_travel_distance", "Maximum travel distance", max_travel, "m")
        assessment.threshold(
            "required_exits",
            "Required exits",
            required_exits(occupancy, values.floor_area),
        )
