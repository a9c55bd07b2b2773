"""UI text tables for the supported languages."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Union

from .models import RoomType


class Language(str, Enum):
    EN = "en"
    FR = "fr"
    ZH = "zh"

    @classmethod
    def parse(cls, value: Union["Language", str, None]) -> "Language":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.EN


TRANSLATIONS: Dict[Language, Dict[str, Any]] = {
    Language.EN: {
        "title": "CoolCalc Pro",
        "subtitle": "ASHRAE Standard Cooling Capacity Estimator",
        "area_label": "Cooling Area (m²)",
        "room_type_label": "Room Type",
        "results_title": "Recommended Capacity",
        "kw_label": "Kilowatts (kW)",
        "btu_label": "BTU per Hour (BTU/h)",
        "hp_label": "Horsepower (HP)",
        "disclaimer": "Calculations are based on ASHRAE standard load factors. "
                      "Adjustments are applied additively based on environmental conditions.",
        "factors_title": "Environmental Factors (Optional)",
        "factors": {
            "high_sun_exposure": "High Sun Exposure (South-facing/Large windows)",
            "poor_insulation": "Poor Insulation (Old building/Thin walls)",
            "extra_occupants": "High Occupancy (>2 people regularly)",
            "high_electronic_load": "Many Electronics/Appliances (Heat sources)",
        },
        "tropical_label": "Tropical Climate",
        "tropical_on": "Applied +30% Adjustment",
        "tropical_off": "Standard Calculation",
        "adjustment_notice": "Base requirement increased by {percent}% for the selected environmental factors.",
        "room_types": {
            RoomType.BEDROOM: "Bedroom / Rest Area",
            RoomType.LIVING_ROOM: "Living Room / Lounge",
            RoomType.KITCHEN: "Kitchen / Dining",
            RoomType.OFFICE: "Office / Workspace",
            RoomType.SERVER_ROOM: "Server / Tech Room",
            RoomType.GYM: "Gym / Fitness Area",
        },
        "confirm_btn": "Save to Records",
        "records_title": "Saved Records",
        "export_btn": "Export CSV",
        "delete_btn": "Delete",
        "clear_all_btn": "Clear All",
        "no_records": "No saved records yet.",
        "room_name_prefix": "Room",
        "reference_title": "ASHRAE Reference Data",
        "summary_title": "Total Capacity Summary",
        "summary": "Rooms: {rooms} | Total Area: {area:.1f} m² | Total Power: {kw:.2f} kW | "
                   "Total BTU: {btu:,.0f} | Efficiency: {rating} | Est. Monthly: ${cost:.2f}",
        "cost_note": "* Estimate based on 8 hours/day usage at $0.12/kWh. Actual costs vary by region and usage patterns.",
        "recommendation_title": "Recommended AC Configuration",
        "advisor_btn": "AI Analysis…",
        "advisor_prompt": "Describe the room (windows, equipment, usage):",
        "advisor_fallback": "Unable to provide AI analysis at this time. Please use the standard calculations.",
        "dark_mode": "Dark Mode",
        "language_label": "Language",
    },
    Language.FR: {
        "title": "CoolCalc Pro",
        "subtitle": "Estimateur de Capacité de Refroidissement (ASHRAE)",
        "area_label": "Surface à refroidir (m²)",
        "room_type_label": "Type de pièce",
        "results_title": "Capacité Recommandée",
        "kw_label": "Kilowatts (kW)",
        "btu_label": "BTU par heure (BTU/h)",
        "hp_label": "Chevaux (HP)",
        "disclaimer": "Les calculs sont basés sur les facteurs de charge standard ASHRAE. "
                      "Les ajustements sont appliqués de manière additive.",
        "factors_title": "Facteurs Environnementaux (Optionnel)",
        "factors": {
            "high_sun_exposure": "Exposition Solaire Élevée (Sud/Grandes fenêtres)",
            "poor_insulation": "Isolation Faible (Vieux bâtiment/Murs fins)",
            "extra_occupants": "Occupation Élevée (>2 personnes)",
            "high_electronic_load": "Beaucoup d'Électronique (Sources de chaleur)",
        },
        "tropical_label": "Climat Tropical",
        "tropical_on": "Ajustement de +30% appliqué",
        "tropical_off": "Calcul Standard",
        "adjustment_notice": "Le besoin de base a été augmenté de {percent}% pour tenir compte des "
                             "facteurs environnementaux sélectionnés.",
        "room_types": {
            RoomType.BEDROOM: "Chambre / Zone de repos",
            RoomType.LIVING_ROOM: "Salon / Séjour",
            RoomType.KITCHEN: "Cuisine / Salle à manger",
            RoomType.OFFICE: "Bureau / Espace de travail",
            RoomType.SERVER_ROOM: "Serveur / Local technique",
            RoomType.GYM: "Gymnase / Fitness",
        },
        "confirm_btn": "Enregistrer",
        "records_title": "Enregistrements",
        "export_btn": "Exporter CSV",
        "delete_btn": "Supprimer",
        "clear_all_btn": "Tout effacer",
        "no_records": "Aucun enregistrement.",
        "room_name_prefix": "Pièce",
        "reference_title": "Données de Référence ASHRAE",
        "summary_title": "Résumé de la Capacité Totale",
        "summary": "Pièces : {rooms} | Surface totale : {area:.1f} m² | Puissance totale : {kw:.2f} kW | "
                   "BTU total : {btu:,.0f} | Efficacité : {rating} | Coût mensuel est. : {cost:.2f} $",
        "cost_note": "* Estimation basée sur 8 heures/jour à 0,12 $/kWh. Les coûts réels varient selon la région.",
        "recommendation_title": "Configuration de climatisation recommandée",
        "advisor_btn": "Analyse IA…",
        "advisor_prompt": "Décrivez la pièce (fenêtres, équipements, usage) :",
        "advisor_fallback": "Impossible de fournir l'analyse IA pour le moment. "
                            "Veuillez utiliser les calculs standards.",
        "dark_mode": "Mode sombre",
        "language_label": "Langue",
    },
    Language.ZH: {
        "title": "CoolCalc Pro",
        "subtitle": "ASHRAE 标准冷负荷计算器",
        "area_label": "制冷面积 (m²)",
        "room_type_label": "房间类型",
        "results_title": "推荐制冷量",
        "kw_label": "千瓦 (kW)",
        "btu_label": "每小时BTU (BTU/h)",
        "hp_label": "匹数 (HP)",
        "disclaimer": "计算基于ASHRAE标准负荷系数。环境调整按加法叠加。",
        "factors_title": "环境因素（可选）",
        "factors": {
            "high_sun_exposure": "强烈日照（朝南/大窗户）",
            "poor_insulation": "隔热差（老建筑/薄墙）",
            "extra_occupants": "人员较多（经常超过2人）",
            "high_electronic_load": "电器较多（热源）",
        },
        "tropical_label": "热带气候",
        "tropical_on": "已应用 +30% 调整",
        "tropical_off": "标准计算",
        "adjustment_notice": "已根据所选环境因素将基础需求提高 {percent}%。",
        "room_types": {
            RoomType.BEDROOM: "卧室 / 休息区",
            RoomType.LIVING_ROOM: "客厅 / 起居室",
            RoomType.KITCHEN: "厨房 / 餐厅",
            RoomType.OFFICE: "办公室 / 工作区",
            RoomType.SERVER_ROOM: "机房 / 设备间",
            RoomType.GYM: "健身房 / 运动区",
        },
        "confirm_btn": "保存记录",
        "records_title": "已保存记录",
        "export_btn": "导出 CSV",
        "delete_btn": "删除",
        "clear_all_btn": "全部清除",
        "no_records": "暂无记录。",
        "room_name_prefix": "房间",
        "reference_title": "ASHRAE 参考数据",
        "summary_title": "总容量汇总",
        "summary": "房间数: {rooms} | 总面积: {area:.1f} m² | 总功率: {kw:.2f} kW | "
                   "总BTU: {btu:,.0f} | 效率等级: {rating} | 预估月费: ${cost:.2f}",
        "cost_note": "* 预估基于每天8小时使用，电价$0.12/kWh。实际费用因地区和使用习惯而异。",
        "recommendation_title": "推荐空调配置",
        "advisor_btn": "AI 分析…",
        "advisor_prompt": "描述房间（窗户、设备、用途）：",
        "advisor_fallback": "暂时无法提供AI分析，请使用标准计算结果。",
        "dark_mode": "深色模式",
        "language_label": "语言",
    },
}

LANGUAGE_NAMES: Dict[Language, str] = {
    Language.EN: "English",
    Language.FR: "Français",
    Language.ZH: "中文",
}


def tr(key: str, lang: Union[Language, str] = Language.EN) -> Any:
    table = TRANSLATIONS[Language.parse(lang)]
    if key in table:
        return table[key]
    return TRANSLATIONS[Language.EN][key]


def room_type_label(room_type: Union[RoomType, str], lang: Union[Language, str] = Language.EN) -> str:
    return tr("room_types", lang)[RoomType.parse(room_type)]


def short_room_type_label(room_type: Union[RoomType, str], lang: Union[Language, str] = Language.EN) -> str:
    """Label up to the first ' / ', as shown in the records list."""
    return room_type_label(room_type, lang).split(" / ")[0]


def factor_label(name: str, lang: Union[Language, str] = Language.EN) -> str:
    return tr("factors", lang)[name]
