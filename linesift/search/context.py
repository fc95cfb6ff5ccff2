"""Context aggregation.

Expands matched line indices into context windows and flattens their union
into the ordered, duplicate-free list of indices to emit.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from linesift.types.core import ContextSpec, ContextWindow
from linesift.utils.validation import clamp_non_negative


def resolve_context(before: int = 0, after: int = 0, around: int = 0) -> ContextSpec:
    """Combine the before/after/around radii into one ContextSpec.

    ``around`` is applied last: when positive it overwrites both ``before``
    and ``after``, whatever they were set to. Negative values count as 0.

    Args:
        before: Lines to emit before each match (-B).
        after: Lines to emit after each match (-A).
        around: Symmetric radius (-C).

    Returns:
        The resolved, non-negative ContextSpec.
    """
    before = clamp_non_negative(before)
    after = clamp_non_negative(after)
    if around > 0:
        before = after = around
    return ContextSpec(before=before, after=after)


def context_window(index: int, total: int, before: int = 0, after: int = 0) -> ContextWindow:
    """Window of lines around one match, clamped to ``[0, total)``."""
    before = clamp_non_negative(before)
    after = clamp_non_negative(after)
    return ContextWindow(
        start=max(0, index - before),
        end=min(total, index + after + 1),
    )


def aggregate(
    lines: Sequence[str],
    indices: Iterable[int],
    before: int = 0,
    after: int = 0,
) -> list[int]:
    """Union the context windows of all matches.

    Every index is emitted at most once and the result is strictly
    increasing, independent of which window covered it.

    Args:
        lines: The full line sequence (only its length is used).
        indices: Matched indices, each in ``[0, len(lines))``.
        before: Lines of context before each match.
        after: Lines of context after each match.

    Returns:
        Sorted list of indices to emit.
    """
    total = len(lines)
    seen = bytearray(total)

    for index in indices:
        window = context_window(index, total, before, after)
        seen[window.start:window.end] = b"\x01" * window.line_count

    return [i for i, flag in enumerate(seen) if flag]


def count_matches(indices: Sequence[int]) -> int:
    """Number of matching lines; context lines are never counted."""
    return len(indices)


def merge_windows(windows: Iterable[ContextWindow]) -> list[ContextWindow]:
    """Merge overlapping or touching windows into disjoint ordered blocks."""
    merged: list[ContextWindow] = []

    for window in sorted(windows, key=lambda w: (w.start, w.end)):
        if window.line_count == 0:
            continue
        if merged and window.start <= merged[-1].end:
            last = merged[-1]
            if window.end > last.end:
                merged[-1] = ContextWindow(start=last.start, end=window.end)
        else:
            merged.append(window)

    return merged
