"""Core data models for Startup Manager."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class PlatformKind(str, Enum):
    """Operating systems with an autostart backend."""

    LINUX = "linux"
    WINDOWS = "windows"
    UNSUPPORTED = "unsupported"


@dataclass
class StartupEntry:
    """A program launched by the desktop session at login.

    Instances are rebuilt on every discovery; the backing file is the only
    persistent state.
    """

    id: str  # file name, unique within the storage directory
    name: str
    command: str
    enabled: bool
    path: Path

    def to_dict(self) -> dict:
        """Serialize for JSON output."""
        return {
            "id": self.id,
            "name": self.name,
            "command": self.command,
            "enabled": self.enabled,
            "path": str(self.path),
        }
