import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..utils.paths import logs_dir

ROOT_LOGGER = "coolcalc"

_configured = False


def _configure() -> None:
    global _configured
    log_path: Path = logs_dir() / "app.log"
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(logging.DEBUG)

    fh = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    fh.setFormatter(fmt)
    ch.setFormatter(fmt)

    root.addHandler(fh)
    root.addHandler(ch)

    _configured = True
    root.debug("Logger initialized at %s", log_path)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the app logger, or a child of it (``coolcalc.<name>``).

    Handlers are attached to the root app logger on first use only.
    """
    if not _configured:
        _configure()
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
