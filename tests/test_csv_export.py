import datetime

import pytest

from coolcalc.core.calculation import compute_capacity
from coolcalc.core.models import EnvironmentalFactors, RoomRecord, RoomType
from coolcalc.core.records import RecordStore
from coolcalc.core.translations import Language, room_type_label
from coolcalc.reports.csv_export import (
    BOM,
    export_filename,
    export_records_csv,
    records_to_csv,
)

HEADER = "Room Name,Type,Area (m2),Capacity (kW),Capacity (BTU),Capacity (HP)"


def english(rt):
    return room_type_label(rt, Language.EN)


@pytest.fixture
def store(bedroom_result):
    s = RecordStore()
    s.confirm(bedroom_result)
    return s


def test_single_bedroom_row(store):
    text = records_to_csv(store, english)
    assert text.startswith(BOM)
    lines = text[len(BOM):].split("\n")
    assert lines == [HEADER, "Room 1,Bedroom / Rest Area,20,2.00,6824,0.76"]


def test_number_formatting():
    rec = RoomRecord("Lab", 20.5, 3.254, 11089.46, 1.2321, RoomType.SERVER_ROOM)
    row = records_to_csv([rec], english).split("\n")[1]
    assert row == "Lab,Server / Tech Room,20.5,3.25,11089,1.23"


def test_type_column_uses_language_at_export_time(store):
    french = records_to_csv(store, lambda rt: room_type_label(rt, Language.FR))
    assert "Chambre / Zone de repos" in french
    assert "Bedroom" not in french


def test_rows_follow_list_order():
    recs = [
        RoomRecord(f"Room {i}", a, a / 10, a * 341, a / 26, RoomType.OFFICE)
        for i, a in enumerate((30, 10, 20), start=1)
    ]
    lines = records_to_csv(recs, english).split("\n")[1:]
    assert [line.split(",")[0] for line in lines] == ["Room 1", "Room 2", "Room 3"]


def test_names_with_commas_are_quoted():
    rec = RoomRecord("Den, upstairs", 12, 1.2, 4095, 0.45, RoomType.BEDROOM)
    row = records_to_csv([rec], english).split("\n")[1]
    assert row.startswith('"Den, upstairs",Bedroom / Rest Area,12,')


def test_empty_list_renders_nothing():
    assert records_to_csv([], english) == ""


def test_filename_pattern():
    assert export_filename(datetime.date(2024, 7, 1)) == "CoolCal_Pro_Records_2024-07-01.csv"


def test_export_writes_utf8_with_bom(store, tmp_path):
    path = export_records_csv(store, english, tmp_path, today=datetime.date(2024, 7, 1))
    assert path == tmp_path / "CoolCal_Pro_Records_2024-07-01.csv"
    raw = path.read_bytes()
    assert raw.startswith(b"\xef\xbb\xbf")
    assert raw.decode("utf-8-sig").split("\n")[0] == HEADER


def test_export_of_empty_store_is_noop(tmp_path):
    assert export_records_csv(RecordStore(), english, tmp_path / "out") is None
    assert not (tmp_path / "out").exists()


def test_unicode_room_names(tmp_path):
    store = RecordStore()
    store.confirm(compute_capacity(15, RoomType.KITCHEN, tropical=False), "房间")
    path = export_records_csv(store, lambda rt: room_type_label(rt, Language.ZH), tmp_path)
    text = path.read_bytes().decode("utf-8-sig")
    assert "房间 1,厨房 / 餐厅,15,2.70," in text


def test_half_cent_kw_rounds_up():
    # 5 m2 bedroom, sun + insulation, no tropical: exactly 0.625 kW
    factors = EnvironmentalFactors(high_sun_exposure=True, poor_insulation=True)
    store = RecordStore()
    store.confirm(compute_capacity(5, RoomType.BEDROOM, factors, tropical=False))
    row = records_to_csv(store, english).split("\n")[1]
    assert row == "Room 1,Bedroom / Rest Area,5,0.63,2133,0.24"
