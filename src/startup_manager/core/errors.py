"""Exceptions raised by startup entry operations."""


class StartupError(Exception):
    """An autostart operation failed.

    The message is the description of the underlying OS error when there is one.
    """


class UnsupportedPlatformError(StartupError):
    """The operation has no implementation on this operating system."""

    def __init__(self, message: str = "Not supported on this OS"):
        super().__init__(message)
