"""Shared constants for linesift.

Centralizes output separators, context defaults and the environment
variables read by the command line.
"""

# Separator between the 1-based line number and the line text (-n).
LINE_NUMBER_SEPARATOR: str = ":"

# Marker printed between non-contiguous output blocks when enabled.
DEFAULT_GROUP_SEPARATOR: str = "--"

# Lines of context before/after a match when no flag is given.
DEFAULT_CONTEXT_LINES: int = 0

# Path argument meaning "read from standard input".
STDIN_PATH: str = "-"

DEFAULT_ENCODING: str = "utf-8"

# Environment variables
ENV_DEBUG: str = "LINESIFT_DEBUG"
ENV_ENCODING: str = "LINESIFT_ENCODING"
