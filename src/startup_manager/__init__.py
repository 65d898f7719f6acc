"""Startup Manager: list and edit applications launched at login."""

from .__version__ import __version__

__all__ = ["__version__"]
