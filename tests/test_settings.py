import json

from coolcalc.core.models import RoomType
from coolcalc.core.records import RecordStore
from coolcalc.services.persistence import RecordPersistence
from coolcalc.services.settings import SettingsManager


def test_defaults_written_on_first_run(tmp_path):
    path = tmp_path / "settings.json"
    s = SettingsManager(path)
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == SettingsManager.DEFAULTS
    assert s.dark_mode is False
    assert s.language == "en"


def test_values_are_stored_as_strings(settings):
    settings.dark_mode = True
    settings.language = "zh"
    data = json.loads(settings.path.read_text(encoding="utf-8"))
    assert data["darkMode"] == "true"
    assert data["language"] == "zh"
    reopened = SettingsManager(settings.path)
    assert reopened.dark_mode is True
    assert reopened.language == "zh"


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{ not json", encoding="utf-8")
    s = SettingsManager(path)
    assert s.get("records") == "[]"
    assert s.language == "en"


def test_non_object_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert SettingsManager(path).get("darkMode") == "false"


def test_missing_keys_take_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"language": "fr"}), encoding="utf-8")
    s = SettingsManager(path)
    assert s.language == "fr"
    assert s.get("records") == "[]"


class TestRecordPersistence:
    def test_round_trip_through_settings(self, settings, bedroom_result):
        store = RecordStore()
        rec = store.confirm(bedroom_result)
        RecordPersistence(settings).save_records(store)

        loaded = RecordPersistence(SettingsManager(settings.path)).load_records()
        assert len(loaded) == 1
        assert loaded[0].id == rec.id
        assert loaded[0].room_type is RoomType.BEDROOM

    def test_malformed_records_value_is_dropped(self, settings):
        settings.set("records", "[{broken")
        assert RecordPersistence(settings).load_records() == []
