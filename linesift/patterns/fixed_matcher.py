"""Fixed-string (literal substring) matching."""

from __future__ import annotations

from .matcher import LineMatcher


class FixedStringMatcher(LineMatcher):
    """Matches lines that contain the pattern as a literal substring.

    With ``ignore_case`` both sides are lower-cased. The pattern is folded
    once here; only the candidate line is folded per call.
    """

    def __init__(self, pattern: str, ignore_case: bool = False):
        super().__init__(pattern, ignore_case)
        self._needle = pattern.lower() if ignore_case else pattern

    def matches(self, line: str) -> bool:
        if self._ignore_case:
            line = line.lower()
        return self._needle in line

    def describe(self) -> str:
        mode = "case-insensitive" if self._ignore_case else "case-sensitive"
        return f"fixed string {self._pattern!r} ({mode})"
