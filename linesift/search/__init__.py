"""Match scanning and context aggregation.

Usage:
    from linesift.search import GrepService, resolve_context
    from linesift.types import MatchMode

    service = GrepService("error", MatchMode(), resolve_context(around=2))
    result = service.run(lines)
    for index in result.emitted:
        print(lines[index])
"""

from .context import aggregate, context_window, count_matches, merge_windows, resolve_context
from .scanner import scan
from .service import GrepResult, GrepService, grep

__all__ = [
    "GrepResult",
    "GrepService",
    "aggregate",
    "context_window",
    "count_matches",
    "grep",
    "merge_windows",
    "resolve_context",
    "scan",
]
