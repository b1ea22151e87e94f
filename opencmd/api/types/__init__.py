"""Target value types."""

from .PathOrURI import PathOrURI
from .URI import URI
from .is_uri import is_uri

__all__ = [
    "PathOrURI",
    "URI",
    "is_uri",
]
