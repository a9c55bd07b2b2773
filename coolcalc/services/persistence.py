from __future__ import annotations
from typing import List

from ..core.models import RoomRecord
from ..core.records import RecordStore, records_from_json_text
from .settings import SettingsManager

RECORDS_KEY = "records"


class RecordPersistence:
    """Read/write the saved record list under the ``records`` settings key."""

    def __init__(self, settings: SettingsManager) -> None:
        self._settings = settings

    def save_records(self, store: RecordStore) -> None:
        self._settings.set(RECORDS_KEY, store.to_json_text())

    def load_records(self) -> List[RoomRecord]:
        return records_from_json_text(self._settings.get(RECORDS_KEY))
