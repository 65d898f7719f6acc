"""Dialog components for the main window."""

from .add_entry import AddEntryDialog

__all__ = [
    "AddEntryDialog",
]
