"""Grep service: one filtering invocation from pattern to output indices.

The service compiles its predicate at construction time, so an invalid
pattern is reported before any input is read or scanned.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from loguru import logger

from linesift.patterns import LineMatcher, compile_predicate
from linesift.types.core import ContextSpec, ContextWindow, MatchMode

from .context import aggregate, context_window, count_matches, merge_windows
from .scanner import scan


@dataclass
class GrepResult:
    """Outcome of filtering one line sequence."""

    lines: Sequence[str]
    matches: list[int]
    emitted: list[int] = field(default_factory=list)
    context: ContextSpec = field(default_factory=ContextSpec)
    count: int = 0
    count_only: bool = False

    @property
    def output_lines(self) -> list[str]:
        """Text of the emitted lines, in order."""
        return [self.lines[i] for i in self.emitted]

    @property
    def blocks(self) -> list[ContextWindow]:
        """Emitted lines grouped into contiguous blocks.

        Built on demand; only output with a group separator needs it.
        """
        if self.count_only:
            return []
        total = len(self.lines)
        return merge_windows(
            context_window(i, total, self.context.before, self.context.after)
            for i in self.matches
        )


class GrepService:
    """Filters line sequences with a fixed pattern, mode and context.

    Usage:
        service = GrepService("an", MatchMode(ignore_case=True))
        result = service.run(["apple", "banana"])
        result.output_lines  # ["banana"]
    """

    def __init__(
        self,
        pattern: str,
        mode: MatchMode | None = None,
        context: ContextSpec | None = None,
        count_only: bool = False,
    ):
        """Initialize the service and compile the predicate.

        Args:
            pattern: Literal text or regular expression.
            mode: Matching options.
            context: Lines of context around matches.
            count_only: Report the number of matching lines only.

        Raises:
            ConfigurationError: If the pattern is an invalid expression.
        """
        self._mode = mode or MatchMode()
        self._context = context or ContextSpec()
        self._count_only = count_only
        self._predicate = compile_predicate(pattern, self._mode)

    @property
    def mode(self) -> MatchMode:
        return self._mode

    @property
    def context(self) -> ContextSpec:
        return self._context

    @property
    def predicate(self) -> LineMatcher:
        return self._predicate

    def run(self, lines: Sequence[str]) -> GrepResult:
        """Scan the lines and select what to emit.

        Args:
            lines: Materialized line sequence.

        Returns:
            GrepResult with matched indices, and emitted indices unless
            in count mode.
        """
        matches = scan(lines, self._predicate, invert=self._mode.invert)
        count = count_matches(matches)
        logger.debug(f"Scanned {len(lines)} lines, {count} selected")

        if self._count_only:
            return GrepResult(
                lines=lines,
                matches=matches,
                context=self._context,
                count=count,
                count_only=True,
            )

        emitted = aggregate(lines, matches, self._context.before, self._context.after)
        logger.debug(f"Emitting {len(emitted)} lines")

        return GrepResult(
            lines=lines,
            matches=matches,
            emitted=emitted,
            context=self._context,
            count=count,
        )


def grep(
    lines: Sequence[str],
    pattern: str,
    mode: MatchMode | None = None,
    context: ContextSpec | None = None,
    count_only: bool = False,
) -> GrepResult:
    """Compile ``pattern`` and filter ``lines`` in one call."""
    return GrepService(pattern, mode=mode, context=context, count_only=count_only).run(lines)
