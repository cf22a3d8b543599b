"""SI 5 rule tables — fire brigade approach and access."""

from __future__ import annotations

import math

from dbsi.rules import BandTable

# (minimum access road width m, maximum distance from road to façade m)
ACCESS_BY_HEIGHT: BandTable[tuple[float, float]] = BandTable(
    (15, (3.5, 30.0)),
    (28, (6.0, 15.0)),
    (math.inf, (8.0, 10.0)),
)

FIRE_LIFT_HEIGHT = 28.0
HYDRANT_HEIGHT_STEP = 15.0
HYDRANT_FACADE_STEP = 5000.0
MAX_HYDRANT_DISTANCE = 100.0
