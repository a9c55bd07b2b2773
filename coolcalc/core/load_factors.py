"""Static load-factor tables and conversion constants.

Base loads are nominal ASHRAE comfort-cooling figures in W/m2 per room type.
"""
from typing import Dict, List, Tuple

from .models import RoomType


BASE_LOADS: Dict[RoomType, float] = {
    RoomType.BEDROOM: 100.0,
    RoomType.LIVING_ROOM: 120.0,
    RoomType.KITCHEN: 180.0,
    RoomType.OFFICE: 140.0,
    RoomType.SERVER_ROOM: 350.0,
    RoomType.GYM: 220.0,
}

# Additive surcharges, keyed by EnvironmentalFactors field name
SURCHARGES: Dict[str, float] = {
    "high_sun_exposure": 0.10,
    "poor_insulation": 0.15,
    "extra_occupants": 0.10,
    "high_electronic_load": 0.10,
}

TROPICAL_MULTIPLIER = 1.30

BTU_PER_WATT = 3.412142
# Nominal AC sizing convention, not a physical constant
BTU_PER_HP = 9000.0

MAX_RECORDS = 20

# Running-cost assumptions for the summary
HOURS_PER_DAY = 8
DAYS_PER_MONTH = 30
TARIFF_PER_KWH = 0.12

# (upper bound in W/m2, rating); lower bound inclusive, upper exclusive
EFFICIENCY_BANDS: List[Tuple[float, str]] = [
    (120.0, "A"),
    (150.0, "B"),
    (180.0, "C"),
]
WORST_RATING = "D"
