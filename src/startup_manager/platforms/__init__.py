"""Per-OS autostart backends."""

from __future__ import annotations

import logging
import platform
from typing import Optional

from ..core.settings import Settings
from .base import PlatformAdapter, UnsupportedAdapter
from .linux import XdgAutostartAdapter
from .windows import StartupFolderAdapter

logger = logging.getLogger(__name__)

__all__ = [
    "PlatformAdapter",
    "StartupFolderAdapter",
    "UnsupportedAdapter",
    "XdgAutostartAdapter",
    "current_platform",
    "get_adapter",
]


def current_platform() -> str:
    return platform.system()


def get_adapter(system: Optional[str] = None, settings: Optional[Settings] = None) -> PlatformAdapter:
    """Pick the backend for an OS name as reported by ``platform.system()``."""
    system = system or current_platform()
    settings = settings or Settings()

    if system == "Linux":
        adapter: PlatformAdapter = XdgAutostartAdapter(settings.autostart_path)
    elif system == "Windows":
        adapter = StartupFolderAdapter(settings.startup_path)
    else:
        adapter = UnsupportedAdapter()

    logger.debug(f"Using {type(adapter).__name__} for {system} ({adapter.storage_dir})")
    return adapter
