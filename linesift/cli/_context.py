"""CLI error scope -- turns LinesiftError into a diagnostic and exit status.

Commands wrap their work in handle_errors() instead of catching errors
themselves. This provides:
- One formatted message on stderr, nothing on stdout
- The error's own exit status
- The full error record in the debug log
"""

from __future__ import annotations

import contextlib
from collections.abc import Generator

import click

from linesift.types.errors import LinesiftError
from linesift.utils.logger import logger


@contextlib.contextmanager
def handle_errors() -> Generator[None, None, None]:
    """Context manager reporting LinesiftError and exiting non-zero."""
    try:
        yield
    except LinesiftError as e:
        logger.debug(f"{e.__class__.__name__}: {e.to_dict()}")
        click.echo(e.get_formatted_message(), err=True)
        raise click.exceptions.Exit(e.exit_code) from e
