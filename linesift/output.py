"""Output formatting for filter results.

Count mode prints a single integer. Otherwise each emitted line is printed
as-is, or prefixed with its 1-based line number when requested.
"""

from __future__ import annotations

from collections.abc import Callable

from linesift.constants import LINE_NUMBER_SEPARATOR
from linesift.search.service import GrepResult


def format_line(index: int, text: str, line_numbers: bool = False) -> str:
    """Format one emitted line.

    Args:
        index: 0-based index of the line.
        text: Line text.
        line_numbers: Prefix the 1-based line number.

    Returns:
        The printable line.
    """
    if line_numbers:
        return f"{index + 1}{LINE_NUMBER_SEPARATOR}{text}"
    return text


def render(
    result: GrepResult,
    line_numbers: bool = False,
    group_separator: str | None = None,
) -> list[str]:
    """Render a result into printable lines.

    Args:
        result: Result from GrepService.run().
        line_numbers: Prefix each line with its number.
        group_separator: If set, printed between non-contiguous blocks.

    Returns:
        Lines to print, in order.
    """
    if result.count_only:
        return [str(result.count)]

    if group_separator is None:
        return [format_line(i, result.lines[i], line_numbers) for i in result.emitted]

    rendered: list[str] = []
    for block_number, block in enumerate(result.blocks):
        if block_number:
            rendered.append(group_separator)
        rendered.extend(
            format_line(i, result.lines[i], line_numbers) for i in block.indices()
        )
    return rendered


def write_result(
    result: GrepResult,
    echo: Callable[[str], object] = print,
    line_numbers: bool = False,
    group_separator: str | None = None,
) -> int:
    """Send a rendered result to a sink, one call per line.

    Returns:
        Number of lines written.
    """
    rendered = render(result, line_numbers=line_numbers, group_separator=group_separator)
    for line in rendered:
        echo(line)
    return len(rendered)
