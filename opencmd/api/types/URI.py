from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit
from urllib.request import url2pathname

from .is_uri import is_uri


@dataclass(frozen=True)
class URI:
    """Strongly typed URI value object.

    Ensures that any instance holds a syntactically valid absolute URI
    (see ``is_uri``). The string is kept exactly as given.
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError("URI value must be a string")
        if not is_uri(self.value):
            raise ValueError(f"Invalid URI format: {self.value}")

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"URI('{self.value}')"

    @classmethod
    def from_path(cls, path: str | Path) -> "URI":
        """Create a file:// URI from an absolute path.

        Raises:
            ValueError: If the path is relative.
        """
        return cls(Path(path).as_uri())

    @property
    def scheme(self) -> str:
        """Lower-cased URI scheme (https, file, mailto, ...)."""
        return urlsplit(self.value).scheme.lower()

    @property
    def is_file(self) -> bool:
        """Return True if this is a local filesystem URI (file:)."""
        return self.scheme == "file"

    @property
    def path(self) -> Path:
        """Get the local filesystem path from a file: URI as a ``Path``."""
        return Path(self.raw_path)

    @property
    def raw_path(self) -> str:
        """Get the local filesystem path from a file: URI as plain text.

        Only the path component is used; host, query and fragment are dropped
        and percent-escapes are decoded.

        Raises:
            ValueError: If URI is not a file URI.
        """
        if not self.is_file:
            raise ValueError(f"Cannot extract local path from non-file URI: {self.value}")
        return url2pathname(urlsplit(self.value).path)
