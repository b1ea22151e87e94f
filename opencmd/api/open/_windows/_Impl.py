"""Windows open implementation - cmd's start built-in."""

from ...types.PathOrURI import PathOrURI
from ....utils.get_logger import get_logger
from .._AbstractImpl import _AbstractImpl
from ..CommandSpec import CommandSpec

OPEN_COMMAND = "cmd"

logger = get_logger("open.windows")


class _Impl(_AbstractImpl):
    """Windows implementation running ``cmd /c start <uri>``.

    The target is always passed as a URI: a raw path could start with ``/``
    and be taken as a start option, and drive letters and mixed slashes are
    handled inconsistently by start.
    """

    def open(self, target: PathOrURI) -> CommandSpec:
        self.opener.ensure_command(OPEN_COMMAND)
        uri = target.uri()
        logger.debug("opening %s with default Windows handler", target)
        return CommandSpec(OPEN_COMMAND, ("/c", "start", str(uri)))
