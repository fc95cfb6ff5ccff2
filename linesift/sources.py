"""Input acquisition: read a file or stream into an immutable line sequence."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO

from loguru import logger

from linesift.constants import DEFAULT_ENCODING, ENV_ENCODING, STDIN_PATH
from linesift.types.errors import ErrorCode, ErrorContext, RecoveryAction, ResourceError


def split_lines(text: str) -> tuple[str, ...]:
    """Split text on ``\\n``, dropping terminators and a trailing ``\\r``.

    A final newline does not produce an extra empty line.
    """
    if not text:
        return ()
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return tuple(p[:-1] if p.endswith("\r") else p for p in parts)


def get_encoding() -> str:
    """Input encoding, overridable through the environment."""
    return os.environ.get(ENV_ENCODING) or DEFAULT_ENCODING


def _error_code_for(error: OSError) -> ErrorCode:
    if isinstance(error, FileNotFoundError):
        return ErrorCode.FILE_NOT_FOUND
    if isinstance(error, PermissionError):
        return ErrorCode.PERMISSION_DENIED
    return ErrorCode.FILE_READ_FAILED


def _read_stream(source, encoding: str) -> str:
    """Read a whole stream, decoding raw bytes with replacement.

    Text streams backed by a binary buffer (sys.stdin, TextIOWrapper) are
    read through the buffer so undecodable bytes never abort the read.
    """
    raw = getattr(source, "buffer", None)
    try:
        data = raw.read() if raw is not None else source.read()
    except OSError as e:
        raise ResourceError(
            f"Failed to read standard input: {e}",
            user_message="cannot read standard input",
            context=ErrorContext(operation="read_lines"),
            original_error=e,
        ) from e

    if isinstance(data, str):
        return data
    try:
        return data.decode(encoding, errors="replace")
    except LookupError as e:
        raise ResourceError(
            f"Unknown encoding {encoding!r}: {e}",
            user_message=f"unknown encoding {encoding!r}",
            code=ErrorCode.INVALID_ARGS,
            context=ErrorContext(operation="read_lines"),
            recovery_actions=[
                RecoveryAction(description=f"Unset or fix {ENV_ENCODING}"),
            ],
            original_error=e,
        ) from e


def read_lines(
    path: str | None = None,
    stream: TextIO | None = None,
    encoding: str | None = None,
) -> tuple[str, ...]:
    """Read all lines from a file, or from a stream when no path is given.

    Args:
        path: File to read; None or "-" reads ``stream``.
        stream: Stream used instead of a file (default: sys.stdin). Its
            binary buffer is read when it has one.
        encoding: Input encoding (default: LINESIFT_ENCODING or utf-8).
            Undecodable bytes are replaced rather than failing.

    Returns:
        Tuple of lines without terminators.

    Raises:
        ResourceError: If the file or stream cannot be read.
    """
    encoding = encoding or get_encoding()

    if path is None or path == STDIN_PATH:
        source = stream if stream is not None else sys.stdin
        lines = split_lines(_read_stream(source, encoding))
        logger.debug(f"Read {len(lines)} lines from standard input")
        return lines

    try:
        text = Path(path).read_text(encoding=encoding, errors="replace")
    except OSError as e:
        raise ResourceError(
            f"Failed to read {path}: {e}",
            user_message=f"cannot read {path}: {e.strerror or e}",
            code=_error_code_for(e),
            context=ErrorContext(operation="read_lines", file_path=str(path)),
            recovery_actions=[
                RecoveryAction(description="Check that the file exists and is readable"),
            ],
            original_error=e,
        ) from e
    except LookupError as e:
        raise ResourceError(
            f"Unknown encoding {encoding!r}: {e}",
            user_message=f"unknown encoding {encoding!r}",
            code=ErrorCode.INVALID_ARGS,
            context=ErrorContext(operation="read_lines", file_path=str(path)),
            recovery_actions=[
                RecoveryAction(description=f"Unset or fix {ENV_ENCODING}"),
            ],
            original_error=e,
        ) from e

    lines = split_lines(text)
    logger.debug(f"Read {len(lines)} lines from {path}")
    return lines
