"""Predicate compilation: pattern + MatchMode -> LineMatcher."""

from __future__ import annotations

from linesift.types.core import MatchMode
from linesift.utils.logger import logger

from .fixed_matcher import FixedStringMatcher
from .matcher import LineMatcher
from .regex_matcher import RegexLineMatcher


def compile_predicate(pattern: str, mode: MatchMode | None = None) -> LineMatcher:
    """Compile a pattern into a reusable line predicate.

    Inversion is not part of the predicate; the scanner applies it.

    Args:
        pattern: Literal text (fixed mode) or regular expression.
        mode: Matching options (default: regex, case-sensitive).

    Returns:
        A callable LineMatcher.

    Raises:
        ConfigurationError: If a regular expression fails to compile.
    """
    mode = mode or MatchMode()

    if mode.fixed:
        matcher: LineMatcher = FixedStringMatcher(pattern, ignore_case=mode.ignore_case)
    else:
        matcher = RegexLineMatcher(pattern, ignore_case=mode.ignore_case)

    logger.debug(f"Compiled {matcher.describe()}")
    return matcher
