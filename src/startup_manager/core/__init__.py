"""Core models and utilities for Startup Manager."""

from .errors import StartupError, UnsupportedPlatformError
from .models import PlatformKind, StartupEntry
from .settings import Settings

__all__ = [
    "PlatformKind",
    "Settings",
    "StartupEntry",
    "StartupError",
    "UnsupportedPlatformError",
]
