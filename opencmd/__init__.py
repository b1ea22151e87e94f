"""Generate commands for opening paths and URIs in the default system handler.

The functions here return ``CommandSpec`` descriptors that can be run right
away (``subprocess.Popen(spec.argv)``) or after redirecting the standard
streams. Nothing is executed by opencmd itself.

Based on https://dwheeler.com/essays/open-files-urls.html.
"""

from .api.errors import FileToURIError, NotFoundError, OpenError, OpenIOError
from .api.open import CommandSpec, Opener, open, open_browser, open_editor  # noqa: A004
from .api.types import PathOrURI, URI
from .constants import BROWSER_ENV, EDITOR_ENV

__all__ = [
    "BROWSER_ENV",
    "EDITOR_ENV",
    "CommandSpec",
    "FileToURIError",
    "NotFoundError",
    "OpenError",
    "OpenIOError",
    "Opener",
    "PathOrURI",
    "URI",
    "open",
    "open_browser",
    "open_editor",
]
