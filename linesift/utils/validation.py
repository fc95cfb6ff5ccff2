"""
Input validation utilities for linesift.

Context radii arrive from flags or from library callers; these helpers
reject or clamp values that would produce an invalid window.
"""


def validate_non_negative(value: int, name: str) -> None:
    """
    Validate that an integer is zero or greater.

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Raises:
        ValueError: If value is negative or not an integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")


def clamp_non_negative(value: int) -> int:
    """Clamp an integer to be at least zero."""
    return value if value > 0 else 0
