"""macOS (open) backend."""
