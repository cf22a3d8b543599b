"""SI 6 rule tables — required fire resistance of the structure.

Ratings are expressed as minutes of load-bearing capacity (R). Uses are
grouped as in the reference table; the basement column applies to sectors
below grade, the above-grade column also covers roofs.
"""

from __future__ import annotations

import math

from dbsi.models.enums import BuildingUse, LoadLevel, SectorLocation, SpecialRisk
from dbsi.rules import BandTable

RATING_LADDER: tuple[int, ...] = (30, 60, 90, 120, 180, 240)

_FLAT_30 = BandTable((math.inf, 30))
_DWELLING_ABOVE = BandTable((15, 60), (28, 90), (math.inf, 120))
_PUBLIC_ABOVE = BandTable((15, 90), (28, 120), (math.inf, 180))
_PUBLIC_BELOW = BandTable((28, 120), (math.inf, 180))

_ABOVE_GRADE: dict[BuildingUse, BandTable[int]] = {
    BuildingUse.RESIDENTIAL_SINGLE: _FLAT_30,
    BuildingUse.RESIDENTIAL: _DWELLING_ABOVE,
    BuildingUse.HOTEL: _DWELLING_ABOVE,
    BuildingUse.EDUCATIONAL: _DWELLING_ABOVE,
    BuildingUse.OFFICE: _DWELLING_ABOVE,
    BuildingUse.COMMERCIAL: _PUBLIC_ABOVE,
    BuildingUse.ASSEMBLY: _PUBLIC_ABOVE,
    BuildingUse.HEALTHCARE: _PUBLIC_ABOVE,
    BuildingUse.PARKING_EXCLUSIVE: BandTable((math.inf, 90)),
    BuildingUse.PARKING_UNDER: BandTable((math.inf, 120)),
}

_BASEMENT: dict[BuildingUse, BandTable[int]] = {
    BuildingUse.RESIDENTIAL_SINGLE: _FLAT_30,
    BuildingUse.RESIDENTIAL: BandTable((math.inf, 120)),
    BuildingUse.HOTEL: BandTable((math.inf, 120)),
    BuildingUse.EDUCATIONAL: BandTable((math.inf, 120)),
    BuildingUse.OFFICE: BandTable((math.inf, 120)),
    BuildingUse.COMMERCIAL: _PUBLIC_BELOW,
    BuildingUse.ASSEMBLY: _PUBLIC_BELOW,
    BuildingUse.HEALTHCARE: _PUBLIC_BELOW,
    BuildingUse.PARKING_EXCLUSIVE: BandTable((math.inf, 90)),
    BuildingUse.PARKING_UNDER: BandTable((math.inf, 120)),
}

RESISTANCE_TABLES: dict[SectorLocation, dict[BuildingUse, BandTable[int]]] = {
    SectorLocation.ABOVE_GRADE: _ABOVE_GRADE,
    SectorLocation.ROOF: _ABOVE_GRADE,
    SectorLocation.BASEMENT: _BASEMENT,
}

STRUCTURE_USES = frozenset(_ABOVE_GRADE)

# Special-risk sectors replace the table value outright.
SPECIAL_RISK_OVERRIDES: dict[SpecialRisk, int] = {
    SpecialRisk.LOW: 90,
    SpecialRisk.MEDIUM: 120,
    SpecialRisk.HIGH: 180,
}

# Number of ladder steps added for the sector's fire load.
LOAD_LEVEL_STEPS: dict[LoadLevel, int] = {
    LoadLevel.LOW: 0,
    LoadLevel.MEDIUM: 0,
    LoadLevel.HIGH: 1,
}

MAX_SIMPLIFIED_HEIGHT = 100.0
ADVANCED_METHODS_HEIGHT = 28.0


def raise_rating(minutes: int, steps: int) -> int:
    """Move *minutes* up the rating ladder, capped at the top rating."""
    index = RATING_LADDER.index(minutes)
    return RATING_LADDER[min(index + steps, len(RATING_LADDER) - 1)]


def format_rating(minutes: int) -> str:
    return f"R {minutes}"
