"""Predicate compiler tests.

Covers fixed-string and regex matchers, case handling in both modes, and
the compile-time pattern checks.
"""

import pytest

from linesift.patterns import (
    FixedStringMatcher,
    LineMatcher,
    RegexLineMatcher,
    compile_predicate,
)
from linesift.types import ConfigurationError, MatchMode


class TestCompilePredicate:
    """compile_predicate picks the matcher for a mode."""

    def test_default_mode_is_regex(self):
        """Without a mode the pattern is a regular expression."""
        predicate = compile_predicate("a.c")
        assert isinstance(predicate, RegexLineMatcher)
        assert predicate("abc") is True

    def test_fixed_mode_builds_fixed_matcher(self):
        """Fixed mode builds a literal matcher."""
        predicate = compile_predicate("a.c", MatchMode(fixed=True))
        assert isinstance(predicate, FixedStringMatcher)
        assert predicate("abc") is False
        assert predicate("xa.cx") is True

    def test_result_is_line_matcher(self):
        """Both modes return callable LineMatcher instances."""
        for mode in (MatchMode(), MatchMode(fixed=True)):
            predicate = compile_predicate("x", mode)
            assert isinstance(predicate, LineMatcher)
            assert callable(predicate)

    def test_invert_is_not_applied_by_predicate(self):
        """Inversion belongs to the scanner, not the predicate."""
        predicate = compile_predicate("an", MatchMode(invert=True))
        assert predicate("banana") is True

    def test_invalid_regex_fails_at_compile_time(self):
        """A bad expression is reported before any line is tested."""
        with pytest.raises(ConfigurationError):
            compile_predicate("a(b")

    def test_invalid_regex_is_fine_in_fixed_mode(self):
        """Fixed mode never interprets the pattern."""
        predicate = compile_predicate("a(b", MatchMode(fixed=True))
        assert predicate("xa(by") is True

    def test_logs_compiled_matcher(self, captured_logs):
        """The compiled matcher is described in the debug log."""
        compile_predicate("needle", MatchMode(fixed=True))
        assert any("fixed string 'needle'" in m for m in captured_logs)


class TestFixedStringMatcher:
    """Literal substring matching."""

    def test_substring_containment(self):
        """Matches anywhere in the line."""
        matcher = FixedStringMatcher("an")
        assert matcher("banana") is True
        assert matcher("cherry") is False

    def test_case_sensitive_by_default(self):
        """Case matters unless ignore_case is set."""
        assert FixedStringMatcher("AN")("banana") is False

    def test_ignore_case_folds_both_sides(self):
        """Pattern and line are both lower-cased."""
        matcher = FixedStringMatcher("AN", ignore_case=True)
        assert matcher("banana") is True
        assert matcher("BANANA") is True
        assert matcher("cherry") is False

    def test_pattern_is_kept_as_given(self):
        """Folding does not rewrite the public pattern."""
        matcher = FixedStringMatcher("AN", ignore_case=True)
        assert matcher.pattern == "AN"

    def test_repeated_calls_are_stable(self):
        """Calling the matcher has no side effects."""
        matcher = FixedStringMatcher("Pear", ignore_case=True)
        results = [matcher("a PEAR tree") for _ in range(3)]
        assert results == [True, True, True]
        assert matcher.pattern == "Pear"

    def test_empty_pattern_matches_everything(self):
        """The empty string is a substring of every line."""
        matcher = FixedStringMatcher("")
        assert matcher("") is True
        assert matcher("anything") is True


class TestRegexLineMatcher:
    """Regular-expression matching."""

    def test_unanchored_search(self):
        """The expression may match anywhere in the line."""
        assert RegexLineMatcher("an")("banana") is True
        assert RegexLineMatcher("^an")("banana") is False

    def test_standard_syntax(self):
        """Classes, anchors, quantifiers, alternation and groups work."""
        assert RegexLineMatcher(r"^[a-c]\w+$")("cherry") is True
        assert RegexLineMatcher(r"(ap|da)(p|t)")("date") is True
        assert RegexLineMatcher(r"r{2}")("cherry") is True
        assert RegexLineMatcher(r"r{3}")("cherry") is False

    def test_case_sensitive_by_default(self):
        """Uppercase pattern does not match lowercase line."""
        assert RegexLineMatcher("AN")("banana") is False

    def test_ignore_case_folds_line_only(self):
        """With ignore_case only the line is lower-cased.

        A lowercase pattern matches any casing of the line, but an
        uppercase literal in the pattern can never match.
        """
        lower = RegexLineMatcher("an", ignore_case=True)
        assert lower("BANANA") is True
        assert lower("banana") is True

        upper = RegexLineMatcher("AN", ignore_case=True)
        assert upper("banana") is False
        assert upper("BANANA") is False

    def test_inline_flag_still_works(self):
        """An inline (?i) flag makes uppercase patterns usable."""
        assert RegexLineMatcher("(?i)AN", ignore_case=True)("banana") is True

    def test_compiled_once(self):
        """The compiled expression is reused across calls."""
        matcher = RegexLineMatcher("an")
        compiled = matcher.compiled
        matcher("banana")
        matcher("cherry")
        assert matcher.compiled is compiled

    def test_describe(self):
        """describe() names the pattern and case handling."""
        assert "case-sensitive" in RegexLineMatcher("x").describe()
        assert "lowercase" in RegexLineMatcher("x", ignore_case=True).describe()
