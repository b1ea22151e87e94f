"""I/O error raised while setting up a command."""

from .OpenError import OpenError


class OpenIOError(OpenError):
    """Raised when an OS query (e.g. reading the working directory) fails."""

    def __init__(self, error: OSError):
        self.error = error
        super().__init__(f"I/O error occurred: {error}")
