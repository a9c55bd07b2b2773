"""Cooling capacity calculation.

Simplified static model: base load per room type, scaled by the additive
environmental surcharge and then by the tropical multiplier.
"""
from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Tuple, Union

from .load_factors import BASE_LOADS, BTU_PER_HP, BTU_PER_WATT, SURCHARGES, TROPICAL_MULTIPLIER
from .models import CalculationResult, EnvironmentalFactors, RoomType, UnknownCategory

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def base_load_for(room_type: Union[RoomType, str]) -> float:
    try:
        return BASE_LOADS[RoomType.parse(room_type)]
    except KeyError:
        raise UnknownCategory(f"No base load for room type: {room_type!r}") from None


def adjustment_multiplier(factors: Optional[EnvironmentalFactors]) -> float:
    total = 1.0
    if factors is None:
        return total
    for name in factors.active():
        total += SURCHARGES[name]
    return total


def compute_capacity(
    area: float,
    room_type: Union[RoomType, str],
    factors: Optional[EnvironmentalFactors] = None,
    tropical: bool = True,
) -> CalculationResult:
    """Return the recommended capacity for a room.

    ``area`` is taken as-is (m2); range checks and rounding are the caller's job.
    Raises UnknownCategory when ``room_type`` is not in the base-load table.
    """
    rt = RoomType.parse(room_type)
    base = base_load_for(rt)
    multiplier = adjustment_multiplier(factors)
    tropical_multiplier = TROPICAL_MULTIPLIER if tropical else 1.0

    watts = area * base * multiplier * tropical_multiplier
    btu = watts * BTU_PER_WATT
    return CalculationResult(
        watts=watts,
        kw=watts / 1000.0,
        btu=btu,
        hp=btu / BTU_PER_HP,
        area=area,
        room_type=rt,
        base_load=base,
        adjustment_multiplier=multiplier,
        tropical=bool(tropical),
    )


def parse_area(text: Union[str, float, int, None]) -> float:
    """Coerce user input to an area in m2, rounded to one decimal.

    Reads the leading number of the text; anything unparseable becomes 0.
    """
    if isinstance(text, (int, float)):
        value = float(text)
    else:
        m = _LEADING_NUMBER.match(text or "")
        value = float(m.group(1)) if m else 0.0
    if math.isnan(value) or math.isinf(value):
        value = 0.0
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def adjustment_percent(result: CalculationResult) -> int:
    """Environmental surcharge as a whole percentage (0 when none applied)."""
    return round_half_up((result.adjustment_multiplier - 1.0) * 100)


def reference_table() -> List[Tuple[RoomType, float]]:
    return [(rt, BASE_LOADS[rt]) for rt in RoomType]


def to_fixed(value: float, places: int = 2) -> str:
    """Fixed-point text with ties rounded away from zero (0.625 -> "0.63")."""
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
