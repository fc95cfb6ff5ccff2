"""
linesift utility modules.

- Logging (stderr-only loguru sink)
- Input validation for context radii
"""

# Logger
from .logger import configure_logging, is_debug_enabled, logger

# Validation
from .validation import clamp_non_negative, validate_non_negative

__all__ = [
    # Logger
    "configure_logging",
    "is_debug_enabled",
    "logger",
    # Validation
    "clamp_non_negative",
    "validate_non_negative",
]
