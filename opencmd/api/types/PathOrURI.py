"""Canonical target: a local path or a non-file URI."""

import os
from dataclasses import InitVar, dataclass
from pathlib import Path

from ..errors.FileToURIError import FileToURIError
from ..errors.OpenIOError import OpenIOError
from .URI import URI
from .is_uri import is_uri


@dataclass(frozen=True)
class PathOrURI:
    """A local file path or a remote URI.

    ``value`` is either the path text exactly as given (a ``str``) or a
    ``URI`` whose scheme is not ``file``: file URIs collapse into their path
    component on construction. Path text is never normalized, so ``""``,
    ``"./a"`` and ``"dir/"`` are handed to the opener unchanged. Any string,
    ``os.PathLike`` or ``URI`` is accepted, so construction never fails for
    well-typed input.

    Set ``detect_uri=False`` to keep a string as a path even if it parses as
    a URI.

    Examples:
        >>> PathOrURI("https://example.com").is_uri
        True
        >>> PathOrURI("file:///test/path/").value
        '/test/path/'
    """

    value: str | URI
    detect_uri: InitVar[bool] = True

    def __post_init__(self, detect_uri: bool):
        value = self.value
        if isinstance(value, PathOrURI):
            value = value.value
        elif isinstance(value, str):
            if detect_uri and is_uri(value):
                value = URI(value)
        elif isinstance(value, os.PathLike):
            value = os.fspath(value)
        elif not isinstance(value, URI):
            raise TypeError(f"Cannot open value of type {type(value).__name__}")

        if isinstance(value, URI) and value.is_file:
            value = value.raw_path
        object.__setattr__(self, "value", value)

    @classmethod
    def parse(cls, raw: str) -> "PathOrURI":
        """Parse a string as a URI, falling back to a path."""
        return cls(raw)

    @classmethod
    def from_path(cls, path: str | os.PathLike) -> "PathOrURI":
        """Create a path target; strings are never parsed as URIs here."""
        return cls(os.fspath(path), detect_uri=False)

    @classmethod
    def from_uri(cls, uri: URI) -> "PathOrURI":
        """Create a target from a URI, converting file:// URIs to paths."""
        return cls(uri)

    @property
    def is_path(self) -> bool:
        """Return True if the target is a local path."""
        return isinstance(self.value, str)

    @property
    def is_uri(self) -> bool:
        """Return True if the target is a URI.

        A target created from a file:// URI is a path, so this is False for it.
        """
        return isinstance(self.value, URI)

    @property
    def path(self) -> Path:
        """The local path as a ``Path``.

        Raises:
            ValueError: If the target is a URI.
        """
        if isinstance(self.value, URI):
            raise ValueError(f"Target is a URI, not a path: {self.value}")
        return Path(self.value)

    def uri(self) -> URI:
        """Return the target as a URI.

        Relative paths are joined onto the current directory and cleaned
        lexically (``.``/``..``/duplicate separators) without touching the
        filesystem.

        Raises:
            OpenIOError: If the current directory cannot be read.
            FileToURIError: If the cleaned path cannot be expressed as a URI.
        """
        if isinstance(self.value, URI):
            return self.value

        try:
            cwd = os.getcwd()
        except OSError as e:
            raise OpenIOError(e) from e

        cleaned = Path(os.path.normpath(os.path.join(cwd, self.value)))
        try:
            return URI.from_path(cleaned)
        except ValueError as e:
            raise FileToURIError(Path(self.value)) from e

    def __str__(self) -> str:
        return str(self.value)
