"""Base error for command generation."""


class OpenError(Exception):
    """Raised when a command for opening a target cannot be generated."""
