"""SI 2 rule tables — separation distances and façade reaction to fire."""

from __future__ import annotations

import math

from dbsi.models.enums import MaterialClass
from dbsi.rules import BandTable

BASE_MIN_DISTANCE = 3.0
# Above this façade height the distance grows with the height.
DISTANCE_HEIGHT_LIMIT = 15.0
DISTANCE_HEIGHT_FACTOR = 0.2
# Opening ratios above this percentage increase the distance by the factor.
OPENING_PENALTY_THRESHOLD = 40.0
OPENING_PENALTY_FACTOR = 1.5
MAX_OPENING_PERCENTAGE = 60.0

# (minimum class, label as written on the declaration of performance)
FACADE_CLASS_BY_HEIGHT: BandTable[tuple[MaterialClass, str]] = BandTable(
    (10, (MaterialClass.D, "D-s3,d0")),
    (18, (MaterialClass.C, "C-s3,d0")),
    (math.inf, (MaterialClass.A2, "A2-s1,d0")),
)

CAVITY_INSULATION_BY_HEIGHT: BandTable[tuple[MaterialClass, str]] = BandTable(
    (10, (MaterialClass.D, "D-s3,d0")),
    (28, (MaterialClass.B, "B-s3,d0")),
    (math.inf, (MaterialClass.A2, "A2-s3,d0")),
)
