"""Syntax check deciding whether a string is a URI or a path."""

import re
from pathlib import Path
from urllib.parse import urlsplit

# RFC 3986 scheme, at least two characters so "C:\dir" stays a Windows path
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:")

# Characters that may never appear unescaped in a URI
_ILLEGAL_PATTERN = re.compile(r'[\s\x00-\x1f\x7f<>"{}|\\^`]')

# Schemes that are meaningless without a host
_HOST_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


def is_uri(value: str | Path) -> bool:
    """Check if a value is a syntactically valid absolute URI.

    No scheme allow-list is applied: ``foo:bar`` is a URI. ``Path`` objects
    are never URIs.

    Examples:
        >>> is_uri("https://example.com/x")
        True
        >>> is_uri("/tmp/report.pdf")
        False
        >>> is_uri("C:/Users/me")
        False
    """
    if not isinstance(value, str):
        return False
    if not _SCHEME_PATTERN.match(value):
        return False
    if _ILLEGAL_PATTERN.search(value):
        return False
    try:
        parts = urlsplit(value)
        # Port is parsed lazily; an invalid one only raises on access
        parts.port  # noqa: B018
    except ValueError:
        return False
    return not (parts.scheme.lower() in _HOST_SCHEMES and not parts.hostname)
