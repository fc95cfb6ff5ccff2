"""Command line interface for linesift."""

from .main import cli

__all__ = ["cli"]
