"""Line matcher base class.

A LineMatcher is the compiled predicate produced from a pattern and a
MatchMode: calling it with a line answers whether the line matches.
"""

from abc import ABC, abstractmethod


class LineMatcher(ABC):
    """Abstract base class for compiled line predicates.

    Implementations must be pure: no state may change between calls, so a
    single matcher can be reused across lines and invocations.
    """

    def __init__(self, pattern: str, ignore_case: bool = False):
        self._pattern = pattern
        self._ignore_case = ignore_case

    @property
    def pattern(self) -> str:
        """The pattern as given by the caller."""
        return self._pattern

    @property
    def ignore_case(self) -> bool:
        return self._ignore_case

    @abstractmethod
    def matches(self, line: str) -> bool:
        """Check whether a single line matches.

        Args:
            line: Line text without its terminator.

        Returns:
            True if the line matches the pattern.
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable description for logs."""
        pass

    def __call__(self, line: str) -> bool:
        return self.matches(line)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._pattern!r}, ignore_case={self._ignore_case})"
