"""
linesift - Line-oriented pattern filtering.

Selects the lines of a text that match a pattern (or, inverted, those that
do not) and emits them with optional surrounding context, line numbers,
or a match count.

Usage:
    from linesift import grep

    result = grep(["apple", "banana", "cherry"], "an")
    result.output_lines  # ["banana"]
"""

from .search import GrepResult, GrepService, grep
from .types import ContextSpec, ContextWindow, MatchMode

__version__ = "0.1.0"

__all__ = [
    "ContextSpec",
    "ContextWindow",
    "GrepResult",
    "GrepService",
    "MatchMode",
    "grep",
    "__version__",
]
