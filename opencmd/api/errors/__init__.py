"""Errors raised while generating open commands."""

from .FileToURIError import FileToURIError
from .NotFoundError import NotFoundError
from .OpenError import OpenError
from .OpenIOError import OpenIOError

__all__ = [
    "FileToURIError",
    "NotFoundError",
    "OpenError",
    "OpenIOError",
]
