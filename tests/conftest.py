"""
Pytest configuration and shared fixtures for linesift tests.
"""

import pytest

from linesift.utils.logger import logger


@pytest.fixture
def fruit_lines() -> tuple[str, ...]:
    """The four-line input used by the end-to-end scenarios."""
    return ("apple", "banana", "cherry", "date")


@pytest.fixture
def numbered_lines() -> tuple[str, ...]:
    """Ten lines named l0..l9, handy for context arithmetic."""
    return tuple(f"l{i}" for i in range(10))


@pytest.fixture
def fruit_file(tmp_path, fruit_lines):
    """A real file containing the fruit lines."""
    path = tmp_path / "fruit.txt"
    path.write_text("\n".join(fruit_lines) + "\n")
    return path


@pytest.fixture
def captured_logs():
    """Route loguru records into a list for the duration of a test."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    try:
        logger.remove(handler_id)
    except ValueError:
        pass
