"""
Logging utility for linesift.

STDOUT is reserved for filter output, so every log record goes to STDERR.
The library only emits debug records; the command line decides how loud
the sink is.
"""

import os
import sys

from loguru import logger as loguru_logger

from linesift.constants import ENV_DEBUG

_LOG_FORMAT = "<level>{level: <8}</level> | {name}:{function} - {message}"


def _stderr_sink(message) -> None:
    # Looked up per record so a swapped sys.stderr is honoured.
    sys.stderr.write(message)


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get(ENV_DEBUG, "").lower() == "true"


def configure_logging(debug: bool | None = None, sink=None) -> int:
    """
    Replace loguru's default sink with a single stderr sink.

    Args:
        debug: Force debug logging on or off (None = read the environment)
        sink: Destination for records (default: the current sys.stderr)

    Returns:
        The loguru handler id of the installed sink
    """
    if debug is None:
        debug = is_debug_enabled()

    loguru_logger.remove()
    return loguru_logger.add(
        sink if sink is not None else _stderr_sink,
        level="DEBUG" if debug else "WARNING",
        format=_LOG_FORMAT,
        colorize=False,
    )


# Export loguru logger for direct use
logger = loguru_logger
