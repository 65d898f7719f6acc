"""Windows Startup folder backend.

Shortcuts are binary and not parsed; an entry is whatever launchable file
sits in the folder. Disabling renames ``app.lnk`` to ``app.lnk.disabled``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import StartupError
from ..core.models import PlatformKind, StartupEntry
from ..core.naming import sanitize_filename
from .base import PlatformAdapter, require_file

logger = logging.getLogger(__name__)

RECOGNIZED_EXTENSIONS = (".lnk", ".bat", ".cmd", ".exe")
SHORTCUT_EXTENSION = ".lnk"
BATCH_EXTENSION = ".bat"
DISABLED_SUFFIX = ".disabled"


def is_disabled_name(filename: str) -> bool:
    return filename.lower().endswith(DISABLED_SUFFIX)


def enabled_name(filename: str) -> str:
    """File name with the disable marker removed."""
    if is_disabled_name(filename):
        return filename[: -len(DISABLED_SUFFIX)]
    return filename


class StartupFolderAdapter(PlatformAdapter):
    """Entries are files in the Startup folder, disabled by file name."""

    kind = PlatformKind.WINDOWS

    def __init__(self, storage_dir: Path) -> None:
        super().__init__(storage_dir)

    def recognizes(self, path: Path) -> bool:
        return enabled_name(path.name).lower().endswith(RECOGNIZED_EXTENSIONS)

    def canonical_id(self, entry_id: str) -> str:
        return enabled_name(entry_id)

    def read_entry(self, path: Path) -> StartupEntry:
        name = enabled_name(path.name)
        if name.lower().endswith(SHORTCUT_EXTENSION):
            name = name[: -len(SHORTCUT_EXTENSION)]
        return StartupEntry(
            id=path.name,
            name=name,
            command=str(path),
            enabled=not is_disabled_name(path.name),
            path=path,
        )

    def toggle(self, path: Path, enable: bool) -> None:
        require_file(path)
        disabled = is_disabled_name(path.name)
        if enable != disabled:
            logger.debug(f"{path.name} already {'enabled' if enable else 'disabled'}")
            return

        if enable:
            new_path = path.with_name(enabled_name(path.name))
        else:
            new_path = path.with_name(path.name + DISABLED_SUFFIX)

        try:
            path.rename(new_path)
        except OSError as e:
            raise StartupError(str(e)) from e
        logger.info(f"Renamed {path.name} to {new_path.name}")

    def create(self, name: str, command: str, description: str = "") -> Path:
        # Shortcuts need COM to write, so a batch launcher stands in.
        # description has nowhere to go in a batch file.
        path = self.storage_dir / sanitize_filename(name, BATCH_EXTENSION)
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(f'@echo off\nstart "" "{command}"', encoding="utf-8")
        except OSError as e:
            raise StartupError(str(e)) from e
        logger.info(f"Created startup entry {path}")
        return path
