"""Config module - backend selection and override variables."""

from .OpenerConfig import OpenerConfig
from .detect_os import detect_os

__all__ = [
    "OpenerConfig",
    "detect_os",
]
