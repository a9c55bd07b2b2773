import pytest

from coolcalc.core.recommendation import recommend_unit
from coolcalc.core.translations import Language


@pytest.mark.parametrize("hp, size", [
    (0.5, "0.75 HP / 9000 BTU"),
    (0.75, "0.75 HP / 9000 BTU"),
    (0.76, "1 HP / 12000 BTU"),
    (1.5, "1.5 HP / 18000 BTU"),
    (1.9, "2 HP / 24000 BTU"),
    (3.0, "3 HP / 36000 BTU"),
    (4.2, "5 HP / 60000 BTU"),
])
def test_bands(hp, size):
    assert recommend_unit(hp).size == size


def test_large_load_splits_into_3hp_units():
    rec = recommend_unit(7.5, Language.EN)
    assert rec.size == "7.5 HP / 90000 BTU"
    assert rec.units == "Recommend 3x 3HP Units"
    assert rec.tip == "Requires professional HVAC design"


def test_localized_text():
    assert recommend_unit(0.5, Language.ZH).units == "1台小型分体机"
    assert recommend_unit(10, "fr").units == "4x unités de 3HP recommandées"
