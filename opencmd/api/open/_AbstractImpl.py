"""Abstract base class for platform open implementations."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..types.PathOrURI import PathOrURI
from .CommandSpec import CommandSpec

if TYPE_CHECKING:
    from .Opener import Opener


class _AbstractImpl(ABC):
    """Abstract base class for platform-specific default handlers.

    Exactly one implementation is loaded per ``Opener``; it is used whenever
    no override variable applies.
    """

    def __init__(self, opener: "Opener"):
        self.opener = opener

    @abstractmethod
    def open(self, target: PathOrURI) -> CommandSpec:
        """Build the command opening target in the system default handler.

        Raises:
            OpenError: If the handler executable is missing or the target
                cannot be converted as the platform requires
        """
        pass
