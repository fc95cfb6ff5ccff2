"""
Core value types for line filtering.

These are the immutable configuration and range values passed between the
predicate compiler, the match scanner and the context aggregator.
"""

from dataclasses import dataclass

from linesift.utils.validation import validate_non_negative


@dataclass(frozen=True)
class MatchMode:
    """How a pattern is matched against lines."""

    fixed: bool = False
    ignore_case: bool = False
    invert: bool = False


@dataclass(frozen=True)
class ContextSpec:
    """Resolved number of context lines around each match."""

    before: int = 0
    after: int = 0

    def __post_init__(self) -> None:
        validate_non_negative(self.before, "before")
        validate_non_negative(self.after, "after")


@dataclass(frozen=True)
class ContextWindow:
    """A half-open range ``[start, end)`` of 0-based line indices."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError("start must be non-negative")
        if self.end < self.start:
            raise ValueError("end must be >= start")

    @property
    def line_count(self) -> int:
        """Number of lines in this window."""
        return self.end - self.start

    def contains(self, index: int) -> bool:
        """Check if an index falls inside this window."""
        return self.start <= index < self.end

    def indices(self) -> range:
        """Indices covered by this window, in increasing order."""
        return range(self.start, self.end)
