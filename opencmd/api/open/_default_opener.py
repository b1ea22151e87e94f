"""Process-wide default Opener."""

import functools

from .Opener import Opener


@functools.cache
def _default_opener() -> Opener:
    """Build the default Opener once; the backend is fixed for the process."""
    return Opener()
