"""Open module - resolves targets into commands for the default handler."""

from .CommandSpec import CommandSpec
from .Opener import Opener
from .open import open  # noqa: A004
from .open_browser import open_browser
from .open_editor import open_editor

__all__ = [
    "CommandSpec",
    "Opener",
    "open",
    "open_browser",
    "open_editor",
]
