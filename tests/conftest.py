import os
import tempfile

# Keep logs and settings out of the real user profile
os.environ.setdefault("COOLCALC_HOME", tempfile.mkdtemp(prefix="coolcalc-tests-"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtCore import QCoreApplication

from coolcalc.core.calculation import compute_capacity
from coolcalc.core.models import EnvironmentalFactors, RoomType
from coolcalc.services.settings import SettingsManager


@pytest.fixture(scope="session", autouse=True)
def qcore_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def settings(tmp_path):
    return SettingsManager(tmp_path / "settings.json")


@pytest.fixture
def bedroom_result():
    # 20 m2 bedroom, no adjustments: 2000 W
    return compute_capacity(20, RoomType.BEDROOM, EnvironmentalFactors(), tropical=False)
