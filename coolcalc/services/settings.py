import json
from pathlib import Path
from typing import Any, Dict, Optional
from ..version import SETTINGS_FILENAME
from ..utils.paths import app_data_dir
from .logger import get_logger


class SettingsManager:
    """JSON-backed string key-value store for preferences and saved records.

    Values are kept as strings ("true"/"false", language codes, JSON text) so
    the file mirrors a browser-style local storage.
    """

    DEFAULTS: Dict[str, str] = {
        "darkMode": "false",
        "language": "en",
        "records": "[]",
    }

    def __init__(self, path: Optional[Path] = None) -> None:
        self._log = get_logger("settings")
        self._path: Path = Path(path) if path else app_data_dir() / SETTINGS_FILENAME
        self._data: Dict[str, str] = {}
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        if self._path.exists():
            try:
                data = json.loads(self._path.read_text(encoding="utf-8"))
                if not isinstance(data, dict):
                    raise ValueError("settings file is not a JSON object")
                self._data = {**self.DEFAULTS, **{str(k): str(v) for k, v in data.items()}}
                self._log.debug("Settings loaded from %s", self._path)
            except (OSError, ValueError) as e:
                self._log.exception("Failed to load settings, using defaults: %s", e)
                self._data = dict(self.DEFAULTS)
        else:
            self._data = dict(self.DEFAULTS)
            self.save()

    def save(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(self._data, indent=2, ensure_ascii=False), encoding="utf-8")
            self._log.debug("Settings saved to %s", self._path)
        except OSError as e:
            self._log.exception("Failed to save settings: %s", e)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value if isinstance(value, str) else str(value)
        self.save()

    # Convenience
    @property
    def dark_mode(self) -> bool:
        return self._data.get("darkMode", "false") == "true"

    @dark_mode.setter
    def dark_mode(self, val: bool) -> None:
        self.set("darkMode", "true" if val else "false")

    @property
    def language(self) -> str:
        return self._data.get("language", "en")

    @language.setter
    def language(self, code: str) -> None:
        self.set("language", code)
