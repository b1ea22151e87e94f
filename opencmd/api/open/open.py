"""Open a target in the default system handler."""

from ._default_opener import _default_opener
from .CommandSpec import CommandSpec
from .Opener import Target


def open(target: Target) -> CommandSpec:  # noqa: A001
    """Return the command opening target in the default system handler.

    Environment override variables are ignored; see ``open_browser`` and
    ``open_editor``.

    Raises:
        OpenError: See ``opencmd.api.errors``
    """
    return _default_opener().open(target)
