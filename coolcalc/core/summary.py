from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .load_factors import (
    DAYS_PER_MONTH,
    EFFICIENCY_BANDS,
    HOURS_PER_DAY,
    TARIFF_PER_KWH,
    WORST_RATING,
)
from .models import RoomRecord


@dataclass(frozen=True)
class Summary:
    total_rooms: int
    total_area: float
    total_kw: float
    total_btu: float
    total_hp: float
    efficiency_rating: Optional[str]
    estimated_monthly_cost: float

    @property
    def watts_per_sqm(self) -> Optional[float]:
        if self.total_area == 0:
            return None
        return self.total_kw * 1000.0 / self.total_area


def efficiency_rating(watts_per_sqm: float) -> str:
    for upper, rating in EFFICIENCY_BANDS:
        if watts_per_sqm < upper:
            return rating
    return WORST_RATING


def monthly_cost(total_kw: float) -> float:
    return total_kw * HOURS_PER_DAY * DAYS_PER_MONTH * TARIFF_PER_KWH


def summarize(records: Iterable[RoomRecord]) -> Summary:
    """Totals over saved records. Rating is None when there is no area to divide by."""
    recs = list(records)
    total_area = sum(r.area for r in recs)
    total_kw = sum(r.kw for r in recs)
    rating = None
    if total_area != 0:
        rating = efficiency_rating(total_kw * 1000.0 / total_area)
    return Summary(
        total_rooms=len(recs),
        total_area=total_area,
        total_kw=total_kw,
        total_btu=sum(r.btu for r in recs),
        total_hp=sum(r.hp for r in recs),
        efficiency_rating=rating,
        estimated_monthly_cost=monthly_cost(total_kw),
    )
