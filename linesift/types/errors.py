"""
Structured error handling for linesift.

Every fatal condition is raised as a LinesiftError subclass carrying an
internal code, a user-facing message and optional recovery hints. The
command line turns these into a diagnostic on stderr and a non-zero exit
status.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # File System Errors (2000-2999)
    FILE_NOT_FOUND = 2001
    FILE_READ_FAILED = 2002
    PERMISSION_DENIED = 2005

    # Configuration Errors (4000-4999)
    INVALID_CONFIG = 4001
    INVALID_PATTERN = 4002

    # User Input Errors (6000-6999)
    INVALID_ARGS = 6001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class RecoveryAction:
    """Suggested action to recover from an error."""

    description: str
    command: str | None = None


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    file_path: str | None = None
    pattern: str | None = None
    additional_info: dict[str, Any] = field(default_factory=dict)


class LinesiftError(Exception):
    """Base error class for linesift."""

    exit_code: int = 2

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.recovery_actions = recovery_actions or []
        self.original_error = original_error

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [f"linesift: {self.user_message}"]

        if self.context.file_path:
            parts.append(f"   File: {self.context.file_path}")
        if self.context.pattern is not None:
            parts.append(f"   Pattern: {self.context.pattern}")
        if self.original_error is not None:
            parts.append(f"   Cause: {self.original_error}")

        if self.recovery_actions:
            parts.append("")
            parts.append("Suggested actions:")
            for i, action in enumerate(self.recovery_actions, 1):
                parts.append(f"   {i}. {action.description}")
                if action.command:
                    parts.append(f"      Run: {action.command}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "file_path": self.context.file_path,
                "pattern": self.context.pattern,
                "additional_info": self.context.additional_info,
            },
            "recovery_actions": [
                {"description": a.description, "command": a.command}
                for a in self.recovery_actions
            ],
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ConfigurationError(LinesiftError):
    """Error related to invalid options or patterns."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        code: ErrorCode = ErrorCode.INVALID_CONFIG,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or "Configuration error occurred.",
            severity=ErrorSeverity.HIGH,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )


class ResourceError(LinesiftError):
    """Error related to reading input files or streams."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        code: ErrorCode = ErrorCode.FILE_READ_FAILED,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or "Resource access failed.",
            severity=ErrorSeverity.HIGH,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )
