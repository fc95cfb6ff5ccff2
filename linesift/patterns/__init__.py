"""Predicate compilation.

Turns a pattern string plus MatchMode into a reusable ``line -> bool``
predicate.

Components:
- LineMatcher: Abstract base class for compiled predicates
- FixedStringMatcher: Literal substring containment
- RegexLineMatcher: Regular-expression search
- compile_predicate: Picks and builds the matcher for a MatchMode

Usage:
    from linesift.patterns import compile_predicate
    from linesift.types import MatchMode

    predicate = compile_predicate("an", MatchMode(fixed=True))
    predicate("banana")  # True
"""

from .compiler import compile_predicate
from .fixed_matcher import FixedStringMatcher
from .matcher import LineMatcher
from .regex_matcher import RegexLineMatcher

__all__ = [
    "LineMatcher",
    "FixedStringMatcher",
    "RegexLineMatcher",
    "compile_predicate",
]
