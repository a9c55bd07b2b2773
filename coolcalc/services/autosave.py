from typing import Callable
from PyQt5.QtCore import QObject
from .logger import get_logger
from .persistence import RecordPersistence
from .settings import SettingsManager
from ..core.records import RecordStore
from ..utils.qt import signals


class AutoSaveController(QObject):
    """Writes the record list back to settings whenever the session reports a change."""

    def __init__(self, get_store_callback: Callable[[], RecordStore], settings_manager: SettingsManager,
                 parent=None) -> None:
        super().__init__(parent)
        self._log = get_logger("autosave")
        self._persist = RecordPersistence(settings_manager)
        self._get_store = get_store_callback
        self._enabled = True

        signals.records_changed.connect(self._on_records_changed)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = bool(enabled)

    def disconnect_signals(self) -> None:
        signals.records_changed.disconnect(self._on_records_changed)

    def _on_records_changed(self) -> None:
        if not self._enabled:
            return
        store = self._get_store()
        self._persist.save_records(store)
        self._log.debug("Autosaved %d record(s)", len(store))
