"""SI 3 rule tables — occupant densities and evacuation limits."""

from __future__ import annotations

from dbsi.models.enums import BuildingUse

# m² of floor area per occupant
OCCUPANT_DENSITY: dict[BuildingUse, float] = {
    BuildingUse.RESIDENTIAL: 20.0,
    BuildingUse.OFFICE: 10.0,
    BuildingUse.COMMERCIAL: 2.0,
    BuildingUse.RESTAURANT: 1.5,
    BuildingUse.EDUCATIONAL: 1.5,
    BuildingUse.HEALTHCARE: 6.0,
    BuildingUse.ASSEMBLY: 1.0,
}

# A = P / 200: one 0.80 m module for every 200 occupants or part thereof.
PERSONS_PER_WIDTH_MODULE = 200
WIDTH_MODULE_M = 0.80

MAX_TRAVEL_SINGLE_FLOOR = 50.0
MAX_TRAVEL_MULTI_FLOOR = 35.0
MAX_TRAVEL_CROWDED_USE = 30.0
CROWDED_USES = frozenset({BuildingUse.COMMERCIAL, BuildingUse.ASSEMBLY})

# (occupancy strictly above, exits required), checked in ascending order
EXITS_BY_OCCUPANCY: tuple[tuple[int, int], ...] = ((100, 2), (500, 3))
LARGE_FLOOR_AREA = 1500.0

EMERGENCY_LIFT_OCCUPANCY = 500
EMERGENCY_LIFT_FLOORS = 3
PUBLIC_ADDRESS_OCCUPANCY = 300
