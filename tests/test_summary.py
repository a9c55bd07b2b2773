import pytest

from coolcalc.core.models import RoomRecord, RoomType
from coolcalc.core.summary import efficiency_rating, monthly_cost, summarize


def _rec(area, kw):
    return RoomRecord(f"R{area}", area, kw, kw * 3412.142, kw * 3412.142 / 9000, RoomType.BEDROOM)


def test_totals_and_rating():
    s = summarize([_rec(20, 2.0), _rec(20, 3.25)])
    assert s.total_rooms == 2
    assert s.total_area == 40
    assert s.total_kw == pytest.approx(5.25)
    assert s.total_btu == pytest.approx(5.25 * 3412.142)
    assert s.total_hp == pytest.approx(5.25 * 3412.142 / 9000)
    assert s.watts_per_sqm == pytest.approx(131.25)
    assert s.efficiency_rating == "B"
    assert s.estimated_monthly_cost == pytest.approx(151.2)


@pytest.mark.parametrize("w_per_m2, rating", [
    (0, "A"),
    (119.99, "A"),
    (120, "B"),
    (149.99, "B"),
    (150, "C"),
    (179.99, "C"),
    (180, "D"),
    (455, "D"),
])
def test_rating_bands(w_per_m2, rating):
    assert efficiency_rating(w_per_m2) == rating


def test_empty_list_does_not_raise():
    s = summarize([])
    assert s.total_rooms == 0
    assert s.total_area == 0
    assert s.total_kw == 0
    assert s.efficiency_rating is None
    assert s.watts_per_sqm is None
    assert s.estimated_monthly_cost == 0


def test_zero_area_records_are_guarded():
    s = summarize([_rec(0, 0.0)])
    assert s.total_rooms == 1
    assert s.efficiency_rating is None


def test_monthly_cost_assumptions():
    # 8 h/day, 30 days, $0.12/kWh
    assert monthly_cost(1.0) == pytest.approx(28.8)
