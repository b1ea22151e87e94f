"""Open a target in the preferred text editor."""

from ._default_opener import _default_opener
from .CommandSpec import CommandSpec
from .Opener import Target


def open_editor(target: Target) -> CommandSpec:
    """Return the command opening target with $EDITOR, or the system handler if unset."""
    return _default_opener().open_editor(target)
