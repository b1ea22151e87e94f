"""Detect the operating system backend."""

import platform


def detect_os() -> str:
    """Detect the current operating system.

    Returns:
        Backend identifier: "darwin", "windows", or "linux". Every other
        system (FreeBSD, OpenBSD, ...) is treated as "linux", since they all
        ship xdg-open.
    """
    system = platform.system().lower()
    if system == "darwin":
        return "darwin"
    if system == "windows":
        return "windows"
    return "linux"
