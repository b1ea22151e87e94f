"""Linux open implementation - desktop integration via xdg-open."""

from ...types.PathOrURI import PathOrURI
from .._AbstractImpl import _AbstractImpl
from ..CommandSpec import CommandSpec

OPEN_COMMAND = "xdg-open"


class _Impl(_AbstractImpl):
    """Unix-like implementation; used for every system that is not macOS or Windows."""

    def open(self, target: PathOrURI) -> CommandSpec:
        return self.opener.open_with_command(OPEN_COMMAND, target)
