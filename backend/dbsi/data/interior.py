"""SI 1 rule tables — fire compartment sizes and separating resistance.

Each use maps to a height band table of (maximum compartment area in m²,
required EI rating of the compartment boundaries).
"""

from __future__ import annotations

import math

from dbsi.models.enums import BuildingUse
from dbsi.rules import BandTable

_STANDARD = (2500.0, "EI 60")

COMPARTMENT_LIMITS: dict[BuildingUse, BandTable[tuple[float, str]]] = {
    BuildingUse.RESIDENTIAL: BandTable((15, _STANDARD), (math.inf, (1000.0, "EI 90"))),
    BuildingUse.OFFICE: BandTable((math.inf, _STANDARD)),
    BuildingUse.COMMERCIAL: BandTable((10, _STANDARD), (math.inf, (1500.0, "EI 90"))),
    BuildingUse.INDUSTRIAL: BandTable((math.inf, (1000.0, "EI 90"))),
    BuildingUse.EDUCATIONAL: BandTable((math.inf, _STANDARD)),
    BuildingUse.HEALTHCARE: BandTable((math.inf, _STANDARD)),
    BuildingUse.HOTEL: BandTable((math.inf, _STANDARD)),
}

# Above this evacuation height every compartment boundary needs EI 120.
HIGH_RISE_HEIGHT = 28.0
HIGH_RISE_RESISTANCE = "EI 120"
