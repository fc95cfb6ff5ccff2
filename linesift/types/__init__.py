"""
linesift type definitions.

This module exports the value types and error types shared across linesift.
"""

# Core types
from .core import ContextSpec, ContextWindow, MatchMode

# Error types
from .errors import (
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    LinesiftError,
    RecoveryAction,
    ResourceError,
)

__all__ = [
    # Core types
    "ContextSpec",
    "ContextWindow",
    "MatchMode",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "RecoveryAction",
    "ErrorContext",
    "LinesiftError",
    "ConfigurationError",
    "ResourceError",
]
