"""Output schemas for API commands - registered on import."""

from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema
from .config import ConfigShowOutput, ConfigVersionOutput
from .open import OpenResolveOutput, OpenTargetOutput

__all__ = [
    "BaseOutputSchema",
    "ConfigShowOutput",
    "ConfigVersionOutput",
    "OpenResolveOutput",
    "OpenTargetOutput",
    "get_output_schema",
    "register_output_schema",
]
