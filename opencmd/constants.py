"""Shared constants for opencmd environment variables."""

BROWSER_ENV = "BROWSER"  # checked when opening in a web browser

EDITOR_ENV = "EDITOR"  # checked when opening in a text editor

# Forces a backend instead of the detected operating system
BACKEND_ENV = "OPENCMD_BACKEND"

# Logging level for the CLI
LOG_LEVEL_ENV = "OPENCMD_LOG_LEVEL"
