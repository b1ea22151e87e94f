"""File path to URI conversion error."""

from pathlib import Path

from .OpenError import OpenError


class FileToURIError(OpenError):
    """Raised when a local path cannot be expressed as a file:// URI.

    The Windows backend always converts targets to URIs, so this is the error
    a relative path produces there when it cannot be made absolute.
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"could not convert file path to URI: {str(path)!r}")
