"""opencmd API - target types, errors, configuration and open commands."""
