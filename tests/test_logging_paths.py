import logging
import logging.handlers

from coolcalc.services.logger import get_logger
from coolcalc.utils.paths import app_data_dir, logs_dir


def test_app_data_dir_honours_override(monkeypatch, tmp_path):
    monkeypatch.setenv("COOLCALC_HOME", str(tmp_path / "home"))
    assert app_data_dir() == tmp_path / "home"
    assert logs_dir() == tmp_path / "home" / "logs"
    assert logs_dir().is_dir()


def test_xdg_location(monkeypatch, tmp_path):
    monkeypatch.delenv("COOLCALC_HOME", raising=False)
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert app_data_dir() == tmp_path / "CoolCalc"


def test_child_loggers_share_root_handlers():
    root = get_logger()
    child = get_logger("records")
    assert root.name == "coolcalc"
    assert child.name == "coolcalc.records"
    assert get_logger("coolcalc.session").name == "coolcalc.session"
    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
    # handlers are attached once
    n = len(root.handlers)
    get_logger()
    assert len(get_logger().handlers) == n
