"""Match scanning: apply a predicate to every line of a sequence."""

from __future__ import annotations

from collections.abc import Callable, Sequence

Predicate = Callable[[str], bool]


def scan(lines: Sequence[str], predicate: Predicate, invert: bool = False) -> list[int]:
    """Find the indices of selected lines.

    A line at index ``i`` is selected iff ``predicate(lines[i]) != invert``.

    Args:
        lines: Materialized line sequence.
        predicate: Compiled line predicate.
        invert: Select non-matching lines instead.

    Returns:
        Strictly increasing list of 0-based indices (empty for empty input).
    """
    return [i for i, line in enumerate(lines) if bool(predicate(line)) != invert]
