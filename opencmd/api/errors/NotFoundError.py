"""Executable lookup error."""

from .OpenError import OpenError


class NotFoundError(OpenError):
    """Raised when a required executable is not on the search path.

    On Unix-like systems this is almost always ``xdg-open``; installing the
    ``xdg-utils`` package for the distribution fixes it.
    """

    def __init__(self, exe: str, error: str):
        self.exe = exe
        self.error = error
        super().__init__(f"executable {exe} not found: {error}")
