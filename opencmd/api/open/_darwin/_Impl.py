"""macOS open implementation - built-in open command."""

from ...types.PathOrURI import PathOrURI
from .._AbstractImpl import _AbstractImpl
from ..CommandSpec import CommandSpec

OPEN_COMMAND = "open"


class _Impl(_AbstractImpl):
    """macOS implementation using /usr/bin/open."""

    def open(self, target: PathOrURI) -> CommandSpec:
        # open ships with macOS, but it is still checked so errors stay uniform
        return self.opener.open_with_command(OPEN_COMMAND, target)
