"""Windows (cmd start) backend."""
