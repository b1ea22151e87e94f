"""Opener configuration with Pydantic validation."""

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import BACKEND_ENV, BROWSER_ENV, EDITOR_ENV, LOG_LEVEL_ENV
from .detect_os import detect_os

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, str] = {
    "darwin": "open",
    "linux": "xdg-open",
    "windows": "cmd /c start",
}


class OpenerConfig(BaseModel):
    """Opener configuration.

    Nothing is read from or written to disk; the only source besides
    explicit arguments is the process environment (see ``from_env``).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: str = Field(default_factory=detect_os, description="Platform backend type")
    browser_env: str = Field(BROWSER_ENV, min_length=1, description="Variable naming the preferred browser")
    editor_env: str = Field(EDITOR_ENV, min_length=1, description="Variable naming the preferred editor")
    log_level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("WARN", description="Logging level")

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        if v not in _BACKEND_REGISTRY:
            raise ValueError(f"Unknown backend type: {v!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "OpenerConfig":
        """Build configuration from OPENCMD_* environment variables.

        Args:
            environ: Environment mapping (default: os.environ)

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        if environ is None:
            environ = os.environ

        values: dict[str, str] = {}
        backend = environ.get(BACKEND_ENV)
        if backend:
            values["type"] = backend.lower()
        log_level = environ.get(LOG_LEVEL_ENV)
        if log_level:
            values["log_level"] = log_level.upper()
        return cls(**values)
