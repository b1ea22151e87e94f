"""Opener public API - resolves targets into open commands."""

import os
import shutil
from collections.abc import Callable, Mapping
from pathlib import Path

from ...utils.get_logger import get_logger
from ..config.OpenerConfig import OpenerConfig
from ..errors.NotFoundError import NotFoundError
from ..types.PathOrURI import PathOrURI
from ..types.URI import URI
from ._AbstractImpl import _AbstractImpl
from .CommandSpec import CommandSpec

logger = get_logger("open")

Target = PathOrURI | URI | Path | str


class Opener:
    """Generate commands for opening paths and URIs in the default handler.

    The platform backend is loaded once, when the opener is built. Each call
    then reads at most one environment variable and probes the search path
    for one executable; nothing is executed.

    Args:
        config: Backend and override variable names (default: from environment)
        environ: Mapping consulted for override variables (default: os.environ,
            read at call time)
        which: Executable lookup returning a path or None (default: shutil.which)
    """

    def __init__(
        self,
        config: OpenerConfig | None = None,
        environ: Mapping[str, str] | None = None,
        which: Callable[[str], str | None] | None = None,
    ):
        self.config = config if config is not None else OpenerConfig.from_env()
        self._environ = environ
        self._which = which if which is not None else shutil.which

        # Import implementation class directly from backend _Impl module
        module = __import__(f"opencmd.api.open._{self.config.type}._Impl", fromlist=[""])
        self._impl: _AbstractImpl = module._Impl(self)

    @property
    def backend(self) -> str:
        """Name of the loaded platform backend."""
        return self.config.type

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def ensure_command(self, cmd: str) -> None:
        """Check that an executable is on the search path.

        Raises:
            NotFoundError: If cmd cannot be found
        """
        logger.debug('checking if executable "%s" exists', cmd)
        if not self._which(cmd):
            raise NotFoundError(cmd, "cannot find binary path")

    def open_with_command(self, cmd: str, target: Target) -> CommandSpec:
        """Build a command passing the target's display form to cmd."""
        target = PathOrURI(target)
        self.ensure_command(cmd)
        logger.debug("opening %s with %s", target, cmd)
        return CommandSpec(cmd, (str(target),))

    def resolve(self, target: Target, env: str | None = None) -> CommandSpec:
        """Resolve target into a command, honoring an optional override variable.

        If env is given and set to a non-empty value, that value is the
        program; a missing program is an error and never falls back to the
        system default. Otherwise the platform backend decides.

        Raises:
            NotFoundError: If the chosen executable is not on the search path
            FileToURIError: If the backend needs a URI and the path cannot be converted
            OpenIOError: If the current directory cannot be read during conversion
        """
        target = PathOrURI(target)
        if env is not None:
            logger.debug("checking if %s exists in environment", env)
            cmd = self.environ.get(env)
            if cmd:
                logger.debug("found %s = %s", env, cmd)
                return self.open_with_command(cmd, target)
            logger.debug("%s not found, using system default handler", env)
        return self._impl.open(target)

    def open(self, target: Target) -> CommandSpec:
        """Open the target in the default system handler.

        Override variables are ignored; use ``open_browser`` or
        ``open_editor`` to consider them.
        """
        return self.resolve(target)

    def open_browser(self, target: Target) -> CommandSpec:
        """Open the target in the browser named by $BROWSER, or the system handler."""
        return self.resolve(target, self.config.browser_env)

    def open_editor(self, target: Target) -> CommandSpec:
        """Open the target in the editor named by $EDITOR, or the system handler."""
        return self.resolve(target, self.config.editor_env)
