"""Linux (xdg-open) backend."""
