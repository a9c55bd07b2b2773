# coolcalc/core/records.py
from __future__ import annotations

import json
from typing import Iterator, List, Optional, Tuple

from .load_factors import MAX_RECORDS
from .models import CalculationResult, RoomRecord, UnknownCategory
from ..services.logger import get_logger


class RecordStore:
    """Ordered list of saved calculations, capped at MAX_RECORDS.

    Default names come from the current list length, so after a deletion a new
    record can reuse an existing name ("Room 2" twice). Names are labels, not keys.
    """

    def __init__(self, records: Optional[List[RoomRecord]] = None, limit: int = MAX_RECORDS) -> None:
        self._limit = limit
        self._records: List[RoomRecord] = list(records or [])[:limit]

    @property
    def records(self) -> Tuple[RoomRecord, ...]:
        return tuple(self._records)

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def is_full(self) -> bool:
        return len(self._records) >= self._limit

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RoomRecord]:
        return iter(list(self._records))

    def get(self, record_id: str) -> Optional[RoomRecord]:
        for rec in self._records:
            if rec.id == record_id:
                return rec
        return None

    def confirm(self, result: CalculationResult, name_prefix: str = "Room") -> Optional[RoomRecord]:
        """Snapshot ``result`` as a new record; None when the store is full."""
        if self.is_full:
            get_logger("records").info("Record limit (%d) reached, confirmation ignored", self._limit)
            return None
        name = f"{name_prefix} {len(self._records) + 1}"
        record = RoomRecord.from_result(result, name)
        self._records.append(record)
        get_logger("records").debug("Saved record %s (%s)", record.id, name)
        return record

    def delete(self, record_id: str) -> bool:
        before = len(self._records)
        self._records = [r for r in self._records if r.id != record_id]
        return len(self._records) != before

    def rename(self, record_id: str, new_name: str) -> bool:
        name = (new_name or "").strip()
        if not name:
            return False
        rec = self.get(record_id)
        if rec is None:
            return False
        rec.room_name = name
        return True

    def clear(self) -> None:
        self._records.clear()

    # ---- serialization ----------------------------------------------------
    def to_json_text(self) -> str:
        return json.dumps([r.to_json() for r in self._records], ensure_ascii=False)

    @classmethod
    def from_json_text(cls, text: Optional[str], limit: int = MAX_RECORDS) -> "RecordStore":
        return cls(records_from_json_text(text), limit=limit)


def records_from_json_text(text: Optional[str]) -> List[RoomRecord]:
    """Decode a stored record list; malformed data yields an empty list."""
    if not text:
        return []
    try:
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError("records payload is not a list")
        return [RoomRecord.from_json(item) for item in data]
    except (ValueError, TypeError, KeyError, AttributeError, UnknownCategory) as e:
        get_logger("records").warning("Discarding malformed saved records: %s", e)
        return []
