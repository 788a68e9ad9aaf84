"""Application settings and logging setup."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from kifudojo.core.enums import SUPPORTED_SIZES

_LOGGER = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_size: int = 19

    # Drill
    memorize_seconds: int = 5

    # Playback
    autoplay_interval_ms: int = 500

    # Sound (read by the host UI; nothing in the package plays audio)
    sound_enabled: bool = True

    # Storage / diagnostics
    data_dir: str = "~/.kifudojo"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.board_size not in SUPPORTED_SIZES:
            raise ValueError(f"Unsupported board size: {self.board_size}")
        if self.memorize_seconds <= 0:
            raise ValueError("memorize_seconds must be positive")
        if self.autoplay_interval_ms <= 0:
            raise ValueError("autoplay_interval_ms must be positive")
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir).expanduser()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AppSettings:
        """Build settings from a mapping, ignoring keys it does not know."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_settings(path: Path | str) -> AppSettings:
    """Read settings from *path*; defaults when missing or unreadable."""
    path = Path(path).expanduser()
    if not path.is_file():
        return AppSettings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("expected an object")
        return AppSettings.from_mapping(data)
    except (OSError, TypeError, ValueError) as exc:
        _LOGGER.warning("Ignoring settings in %s: %s", path, exc)
        return AppSettings()


def save_settings(settings: AppSettings, path: Path | str) -> None:
    path = Path(path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")


def configure_logging(level: str | int = logging.INFO) -> None:
    """Attach a console handler to the package logger once."""
    logger = logging.getLogger("kifudojo")
    logger.setLevel(level if isinstance(level, int) else level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
