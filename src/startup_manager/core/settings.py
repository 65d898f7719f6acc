"""Settings management for Startup Manager."""

import json
import logging
import os
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path

from appdirs import user_config_dir, user_data_dir

logger = logging.getLogger(__name__)

APP_NAME = "startup-manager"
APP_AUTHOR = "startup-manager"

WINDOWS_STARTUP_SUBDIR = Path("Microsoft", "Windows", "Start Menu", "Programs", "Startup")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("text", "json")


def get_config_dir() -> Path:
    """Get the configuration directory."""
    path = Path(user_config_dir(APP_NAME, APP_AUTHOR))
    path.mkdir(parents=True, exist_ok=True)
    return path


def default_autostart_dir() -> Path:
    """XDG autostart directory: ``$XDG_CONFIG_HOME/autostart``."""
    return Path(user_config_dir()) / "autostart"


def default_startup_dir() -> Path:
    """Per-user Startup folder under the roaming application data root."""
    return Path(user_data_dir(roaming=True)) / WINDOWS_STARTUP_SUBDIR


@dataclass
class Settings:
    """Application settings.

    Empty directory overrides mean "use the platform default".
    """

    log_level: str = "INFO"
    autostart_dir: str = ""
    startup_dir: str = ""
    default_output: str = "text"

    @property
    def autostart_path(self) -> Path:
        return Path(self.autostart_dir).expanduser() if self.autostart_dir else default_autostart_dir()

    @property
    def startup_path(self) -> Path:
        return Path(self.startup_dir).expanduser() if self.startup_dir else default_startup_dir()

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from file."""
        if path is None:
            path = get_config_dir() / "settings.json"

        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return cls._from_dict(data)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError, KeyError, TypeError) as e:
            logger.warning(f"Ignoring unreadable settings file {path}: {e}")
            return cls()

    def save(self, path: Path | None = None) -> None:
        """Save settings to file."""
        if path is None:
            path = get_config_dir() / "settings.json"

        path.parent.mkdir(parents=True, exist_ok=True)

        # Atomic write: write to temp file then rename to prevent corruption on crash
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp", prefix="settings_")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(asdict(self), f, indent=2)
            os.replace(tmp_path, path)
        except Exception:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    @staticmethod
    def _validate_choice(value, choices: tuple[str, ...], default: str) -> str:
        """Return value if it is one of choices, otherwise the default."""
        if isinstance(value, str) and value in choices:
            return value
        return default

    @staticmethod
    def _validate_str(value, default: str) -> str:
        return value if isinstance(value, str) else default

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        """Create settings from a dict, ignoring unknown keys."""
        if not isinstance(data, dict):
            raise TypeError("settings root must be an object")
        defaults = cls()
        level = data.get("log_level", defaults.log_level)
        if isinstance(level, str):
            level = level.upper()
        return cls(
            log_level=cls._validate_choice(level, LOG_LEVELS, defaults.log_level),
            autostart_dir=cls._validate_str(data.get("autostart_dir"), defaults.autostart_dir),
            startup_dir=cls._validate_str(data.get("startup_dir"), defaults.startup_dir),
            default_output=cls._validate_choice(
                data.get("default_output"), OUTPUT_FORMATS, defaults.default_output
            ),
        )
