import logging
import sys

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Configure opencmd logging for command-line use.

    Library code only emits records; applications embedding opencmd keep
    control of handlers. The CLI calls this once at startup.

    Args:
        level: Logging level (int or name such as "DEBUG")
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if isinstance(level, str):
        # "WARN" is accepted as an alias by the logging module
        level = logging.getLevelName(level.upper())

    root_logger = logging.getLogger("opencmd")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    _CONFIGURED = True
