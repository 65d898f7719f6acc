"""Listing, toggling, creating and deleting startup entries."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..platforms import PlatformAdapter, get_adapter
from .errors import StartupError
from .models import PlatformKind, StartupEntry
from .settings import Settings

logger = logging.getLogger(__name__)


class StartupManager:
    """Front door for callers; works against whichever adapter it is given.

    Nothing is cached: every call goes back to the filesystem.
    """

    def __init__(self, adapter: Optional[PlatformAdapter] = None, settings: Optional[Settings] = None):
        self.adapter = adapter or get_adapter(settings=settings)

    @property
    def platform(self) -> PlatformKind:
        return self.adapter.kind

    @property
    def storage_dir(self) -> Optional[Path]:
        return self.adapter.storage_dir

    @property
    def supported(self) -> bool:
        return self.adapter.kind != PlatformKind.UNSUPPORTED

    def discover(self) -> List[StartupEntry]:
        entries = self.adapter.discover()
        logger.debug(f"Found {len(entries)} startup entries in {self.storage_dir}")
        return entries

    def get_entry(self, entry_id: str) -> StartupEntry:
        """Find an entry by id (its file name) or display name.

        An exact id wins. Otherwise ids are compared without state markers,
        so ``Spotify.lnk`` still finds ``Spotify.lnk.disabled``, and finally
        the display name is tried.
        """
        entries = self.discover()
        canonical = self.adapter.canonical_id
        matchers = (
            lambda e: e.id == entry_id,
            lambda e: canonical(e.id) == canonical(entry_id),
            lambda e: e.name == entry_id,
        )
        for matches in matchers:
            for entry in entries:
                if matches(entry):
                    return entry
        raise StartupError(f"No startup entry with id {entry_id!r}")

    def toggle(self, path: Path, enable: bool) -> None:
        self.adapter.toggle(Path(path), enable)

    def toggle_by_id(self, entry_id: str, enable: bool) -> None:
        self.toggle(self.get_entry(entry_id).path, enable)

    def create(self, name: str, command: str, description: str = "") -> Path:
        return self.adapter.create(name, command, description)

    def delete(self, path: Path) -> None:
        self.adapter.delete(Path(path))

    def delete_by_id(self, entry_id: str) -> None:
        self.delete(self.get_entry(entry_id).path)
