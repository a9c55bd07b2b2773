"""Split/floor unit suggestions by nominal horsepower."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

from .calculation import round_half_up, to_fixed
from .translations import Language


@dataclass(frozen=True)
class UnitRecommendation:
    size: str
    units: str
    tip: str


# (max hp, size, {lang: (units, tip)})
_BANDS: List[Tuple[float, str, Dict[Language, Tuple[str, str]]]] = [
    (0.75, "0.75 HP / 9000 BTU", {
        Language.EN: ("1x Small Split Unit", "Suitable for small bedroom"),
        Language.FR: ("1x Petit climatiseur split", "Adapté à une petite chambre"),
        Language.ZH: ("1台小型分体机", "适合小卧室"),
    }),
    (1.0, "1 HP / 12000 BTU", {
        Language.EN: ("1x Standard Split Unit", "Suitable for standard bedroom"),
        Language.FR: ("1x Climatiseur split standard", "Adapté à une chambre standard"),
        Language.ZH: ("1台标准分体机", "适合标准卧室"),
    }),
    (1.5, "1.5 HP / 18000 BTU", {
        Language.EN: ("1x Medium Split Unit", "Suitable for living room or large bedroom"),
        Language.FR: ("1x Climatiseur split moyen", "Adapté à un salon ou une grande chambre"),
        Language.ZH: ("1台中型分体机", "适合客厅或大卧室"),
    }),
    (2.0, "2 HP / 24000 BTU", {
        Language.EN: ("1x Large Split Unit", "Suitable for large living room"),
        Language.FR: ("1x Grand climatiseur split", "Adapté à un grand salon"),
        Language.ZH: ("1台大型分体机", "适合大客厅"),
    }),
    (3.0, "3 HP / 36000 BTU", {
        Language.EN: ("1x Floor Unit or 2x 1.5HP Splits", "Suitable for open spaces"),
        Language.FR: ("1x Armoire ou 2x splits 1,5HP", "Adapté aux espaces ouverts"),
        Language.ZH: ("1台柜机或2台1.5HP分体机", "适合开放式空间"),
    }),
    (5.0, "5 HP / 60000 BTU", {
        Language.EN: ("1x Large Floor Unit or Multi-Split", "Commercial-grade cooling"),
        Language.FR: ("1x Grande armoire ou multi-split", "Refroidissement de niveau commercial"),
        Language.ZH: ("1台大柜机或多联机", "商业级别制冷"),
    }),
]

_LARGE = {
    Language.EN: ("Recommend {n}x 3HP Units", "Requires professional HVAC design"),
    Language.FR: ("{n}x unités de 3HP recommandées", "Nécessite une étude CVC professionnelle"),
    Language.ZH: ("建议 {n} 台3HP设备", "需要专业HVAC设计"),
}


def recommend_unit(hp: float, lang: Union[Language, str] = Language.EN) -> UnitRecommendation:
    lang = Language.parse(lang)
    for max_hp, size, texts in _BANDS:
        if hp <= max_hp:
            units, tip = texts[lang]
            return UnitRecommendation(size=size, units=units, tip=tip)
    count = math.ceil(hp / 3)
    units, tip = _LARGE[lang]
    return UnitRecommendation(
        size=f"{to_fixed(hp, 1)} HP / {round_half_up(hp * 12000)} BTU",
        units=units.format(n=count),
        tip=tip,
    )
