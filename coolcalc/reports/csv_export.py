# coolcalc/reports/csv_export.py
from __future__ import annotations

import csv
import datetime
import io
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple

from ..core.calculation import round_half_up, to_fixed
from ..core.models import RoomRecord, RoomType

BOM = "\ufeff"

CSV_HEADERS: Tuple[str, ...] = (
    "Room Name", "Type", "Area (m2)", "Capacity (kW)", "Capacity (BTU)", "Capacity (HP)"
)

FILENAME_PREFIX = "CoolCal_Pro_Records_"

LabelResolver = Callable[[RoomType], str]


def _fmt_area(area: float) -> str:
    # whole numbers without a trailing ".0", as the area was displayed
    value = float(area)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _row(rec: RoomRecord, label_resolver: LabelResolver) -> list:
    return [
        rec.room_name,
        label_resolver(rec.room_type),
        _fmt_area(rec.area),
        to_fixed(rec.kw, 2),
        str(round_half_up(rec.btu)),
        to_fixed(rec.hp, 2),
    ]


def records_to_csv(records: Iterable[RoomRecord], label_resolver: LabelResolver) -> str:
    """Render records as BOM-prefixed CSV text; empty input gives ''.

    Fields holding a comma or quote are quoted (csv.QUOTE_MINIMAL); every
    other row is plain comma-joined text.
    """
    recs = list(records)
    if not recs:
        return ""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for rec in recs:
        writer.writerow(_row(rec, label_resolver))
    return BOM + buf.getvalue().rstrip("\n")


def export_filename(today: Optional[datetime.date] = None) -> str:
    today = today or datetime.date.today()
    return f"{FILENAME_PREFIX}{today.isoformat()}.csv"


def export_records_csv(
    records: Iterable[RoomRecord],
    label_resolver: LabelResolver,
    directory: Path,
    today: Optional[datetime.date] = None,
) -> Optional[Path]:
    """Write the records CSV into ``directory``. Returns None (nothing written) if empty."""
    text = records_to_csv(records, label_resolver)
    if not text:
        return None
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename(today)
    path.write_bytes(text.encode("utf-8"))
    return path
