# coolcalc/services/session.py
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional, Union

from ..core.calculation import compute_capacity, parse_area
from ..core.models import CalculationResult, EnvironmentalFactors, RoomRecord, RoomType
from ..core.recommendation import UnitRecommendation, recommend_unit
from ..core.records import RecordStore
from ..core.summary import Summary, summarize
from ..core.translations import Language, room_type_label, tr
from ..reports.csv_export import export_records_csv
from ..utils.qt import signals
from .logger import get_logger
from .persistence import RecordPersistence
from .settings import SettingsManager

DEFAULT_AREA = 20.0


class CoolCalcSession:
    """Application state: current inputs, result, preferences and saved records.

    Every mutation of the record list emits ``signals.records_changed``;
    preference changes are written straight to settings and announced with
    ``signals.preferences_changed``.
    """

    def __init__(self, settings: SettingsManager) -> None:
        self._log = get_logger("session")
        self.settings = settings
        self._persistence = RecordPersistence(settings)

        self.area: float = DEFAULT_AREA
        self.room_type: RoomType = RoomType.BEDROOM
        self.factors = EnvironmentalFactors()
        self.tropical: bool = True
        self.language: Language = Language.EN
        self.dark_mode: bool = False
        self.store = RecordStore()
        self.result: CalculationResult = self._recalculate()

    # ---- lifecycle ---------------------------------------------------------
    def load(self) -> None:
        """Restore preferences and records from settings (start-up)."""
        self.language = Language.parse(self.settings.language)
        self.dark_mode = self.settings.dark_mode
        self.store = RecordStore(self._persistence.load_records())
        self._log.info("Session loaded: %d record(s), language=%s", len(self.store), self.language.value)

    # ---- inputs ------------------------------------------------------------
    def _recalculate(self) -> CalculationResult:
        self.result = compute_capacity(self.area, self.room_type, self.factors, self.tropical)
        return self.result

    def set_area(self, area: float) -> CalculationResult:
        self.area = parse_area(area)
        return self._recalculate()

    def set_area_text(self, text: str) -> CalculationResult:
        self.area = parse_area(text)
        return self._recalculate()

    def set_room_type(self, room_type: Union[RoomType, str]) -> CalculationResult:
        self.room_type = RoomType.parse(room_type)
        return self._recalculate()

    def set_factor(self, name: str, enabled: bool) -> CalculationResult:
        self.factors = replace(self.factors, **{name: bool(enabled)})
        return self._recalculate()

    def set_tropical(self, enabled: bool) -> CalculationResult:
        self.tropical = bool(enabled)
        return self._recalculate()

    # ---- preferences -------------------------------------------------------
    def set_language(self, lang: Union[Language, str]) -> None:
        self.language = Language.parse(lang)
        self.settings.language = self.language.value
        signals.preferences_changed.emit("language")

    def toggle_dark_mode(self) -> bool:
        self.dark_mode = not self.dark_mode
        self.settings.dark_mode = self.dark_mode
        signals.preferences_changed.emit("darkMode")
        return self.dark_mode

    def t(self, key: str):
        return tr(key, self.language)

    def room_type_label(self, room_type: Union[RoomType, str]) -> str:
        return room_type_label(room_type, self.language)

    # ---- records -----------------------------------------------------------
    @property
    def can_confirm(self) -> bool:
        return not self.store.is_full

    def confirm(self) -> Optional[RoomRecord]:
        record = self.store.confirm(self.result, self.t("room_name_prefix"))
        if record is not None:
            signals.records_changed.emit()
        return record

    def delete(self, record_id: str) -> bool:
        removed = self.store.delete(record_id)
        if removed:
            signals.records_changed.emit()
        return removed

    def rename(self, record_id: str, new_name: str) -> bool:
        renamed = self.store.rename(record_id, new_name)
        if renamed:
            signals.records_changed.emit()
        return renamed

    def clear(self) -> None:
        self.store.clear()
        signals.records_changed.emit()

    def summary(self) -> Optional[Summary]:
        if not len(self.store):
            return None
        return summarize(self.store)

    def recommendation(self) -> UnitRecommendation:
        return recommend_unit(self.result.hp, self.language)

    def export_csv(self, directory: Path) -> Optional[Path]:
        path = export_records_csv(self.store, self.room_type_label, directory)
        if path is None:
            self._log.info("Export skipped: no records")
        else:
            self._log.info("Exported %d record(s) to %s", len(self.store), path)
        return path
