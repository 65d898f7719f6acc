"""XDG autostart (``~/.config/autostart/*.desktop``) backend."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core import desktop_entry
from ..core.errors import StartupError
from ..core.models import PlatformKind, StartupEntry
from ..core.naming import sanitize_filename
from .base import PlatformAdapter, require_file

logger = logging.getLogger(__name__)


class XdgAutostartAdapter(PlatformAdapter):
    """Entries are desktop files; the enabled state lives in their keys."""

    kind = PlatformKind.LINUX

    def __init__(self, storage_dir: Path) -> None:
        super().__init__(storage_dir)

    def recognizes(self, path: Path) -> bool:
        return path.suffix == desktop_entry.DESKTOP_EXTENSION

    def read_entry(self, path: Path) -> StartupEntry:
        content = path.read_text(encoding="utf-8")
        fields = desktop_entry.decode(content, path.name)
        return StartupEntry(
            id=path.name,
            name=fields.name,
            command=fields.command,
            enabled=fields.enabled,
            path=path,
        )

    def toggle(self, path: Path, enable: bool) -> None:
        require_file(path)
        try:
            content = path.read_text(encoding="utf-8")
            path.write_text(desktop_entry.set_enabled(content, enable), encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StartupError(str(e)) from e
        logger.info(f"{'Enabled' if enable else 'Disabled'} {path.name}")

    def create(self, name: str, command: str, description: str = "") -> Path:
        path = self.storage_dir / sanitize_filename(name, desktop_entry.DESKTOP_EXTENSION)
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(desktop_entry.render(name, command, description), encoding="utf-8")
        except OSError as e:
            raise StartupError(str(e)) from e
        logger.info(f"Created startup entry {path}")
        return path
