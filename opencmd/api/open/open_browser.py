"""Open a target in the preferred web browser."""

from ._default_opener import _default_opener
from .CommandSpec import CommandSpec
from .Opener import Target


def open_browser(target: Target) -> CommandSpec:
    """Return the command opening target with $BROWSER, or the system handler if unset."""
    return _default_opener().open_browser(target)
