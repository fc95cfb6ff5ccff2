"""Regular-expression line matching.

Patterns use Python ``re`` syntax and are searched anywhere in the line
(not anchored unless the pattern says so).
"""

from __future__ import annotations

import re

from linesift.types.errors import (
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    RecoveryAction,
)

from .matcher import LineMatcher


class RegexLineMatcher(LineMatcher):
    """Matches lines against a compiled regular expression.

    Case handling: with ``ignore_case`` the candidate line is lower-cased
    before matching, but the expression itself is compiled exactly as given.
    An uppercase literal in the pattern therefore never matches in this
    mode; write lowercase patterns (or use ``(?i)``) when ignoring case.

    Raises:
        ConfigurationError: If the pattern is not a valid expression.
    """

    def __init__(self, pattern: str, ignore_case: bool = False):
        super().__init__(pattern, ignore_case)
        self._compiled = self._compile(pattern)

    @staticmethod
    def _compile(pattern: str) -> re.Pattern:
        try:
            return re.compile(pattern)
        except re.error as e:
            raise ConfigurationError(
                f"Invalid regular expression {pattern!r}: {e}",
                user_message=f"invalid regular expression: {e}",
                code=ErrorCode.INVALID_PATTERN,
                context=ErrorContext(operation="compile_pattern", pattern=pattern),
                recovery_actions=[
                    RecoveryAction(
                        description="Escape special characters or match literally with -F",
                        command=f"linesift -F {pattern!r}",
                    )
                ],
                original_error=e,
            ) from e

    @property
    def compiled(self) -> re.Pattern:
        return self._compiled

    def matches(self, line: str) -> bool:
        if self._ignore_case:
            line = line.lower()
        return self._compiled.search(line) is not None

    def describe(self) -> str:
        mode = "line folded to lowercase" if self._ignore_case else "case-sensitive"
        return f"regex {self._pattern!r} ({mode})"
