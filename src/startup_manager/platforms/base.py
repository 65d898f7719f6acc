"""Platform adapter interface and the shared scanning/deleting logic."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from ..core.errors import StartupError, UnsupportedPlatformError
from ..core.models import PlatformKind, StartupEntry

logger = logging.getLogger(__name__)


def require_file(path: Path) -> None:
    """Raise StartupError unless path is an existing regular file."""
    if not path.is_file():
        raise StartupError(f"No such startup file: {path}")


class PlatformAdapter(ABC):
    """Autostart storage for one operating system.

    Subclasses say which files they own (``recognizes``), how to turn one
    into an entry (``read_entry``), and how to toggle and create entries.
    Scanning and deletion are the same everywhere and live here.
    """

    kind: PlatformKind

    def __init__(self, storage_dir: Optional[Path]) -> None:
        self.storage_dir = storage_dir

    @abstractmethod
    def recognizes(self, path: Path) -> bool:
        """Return True if the file name marks a startup entry."""

    @abstractmethod
    def read_entry(self, path: Path) -> StartupEntry:
        """Build an entry from a recognized file.

        Raises OSError or ValueError when the file cannot be used.
        """

    def canonical_id(self, entry_id: str) -> str:
        """Id with any state marker removed; stable across toggles."""
        return entry_id

    @abstractmethod
    def toggle(self, path: Path, enable: bool) -> None:
        """Enable or disable the entry backed by path."""

    @abstractmethod
    def create(self, name: str, command: str, description: str = "") -> Path:
        """Write a new enabled entry and return its path."""

    def discover(self) -> List[StartupEntry]:
        """Return the entries currently in the storage directory.

        A missing or unreadable directory yields no entries. Files that fail
        to parse are logged and skipped.
        """
        if self.storage_dir is None or not self.storage_dir.is_dir():
            logger.debug(f"No startup directory at {self.storage_dir}")
            return []

        try:
            candidates = sorted(self.storage_dir.iterdir())
        except OSError as e:
            logger.warning(f"Cannot list {self.storage_dir}: {e}")
            return []

        entries: List[StartupEntry] = []
        for path in candidates:
            if not path.is_file() or not self.recognizes(path):
                continue
            try:
                entries.append(self.read_entry(path))
            except (OSError, ValueError) as e:
                logger.warning(f"Skipping unreadable startup file {path}: {e}")
        return entries

    def delete(self, path: Path) -> None:
        """Remove the file backing an entry. Directories are never removed."""
        if path.is_dir():
            raise StartupError(f"Refusing to delete directory: {path}")
        try:
            path.unlink()
        except OSError as e:
            raise StartupError(str(e)) from e
        logger.info(f"Deleted startup entry {path}")


class UnsupportedAdapter(PlatformAdapter):
    """Stand-in for operating systems without an autostart backend."""

    kind = PlatformKind.UNSUPPORTED

    def __init__(self) -> None:
        super().__init__(storage_dir=None)

    def recognizes(self, path: Path) -> bool:
        return False

    def read_entry(self, path: Path) -> StartupEntry:
        raise UnsupportedPlatformError()

    def discover(self) -> List[StartupEntry]:
        return []

    def toggle(self, path: Path, enable: bool) -> None:
        raise UnsupportedPlatformError()

    def create(self, name: str, command: str, description: str = "") -> Path:
        raise UnsupportedPlatformError()
