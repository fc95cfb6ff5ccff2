"""Command line entry point.

    linesift [OPTIONS] PATTERN [FILE]

Reads FILE (or standard input), and prints the lines matching PATTERN
with optional context, line numbers, or just the number of matches.
"""

from __future__ import annotations

import click

from linesift import __version__
from linesift.output import write_result
from linesift.search import GrepService, resolve_context
from linesift.sources import read_lines
from linesift.types.core import MatchMode
from linesift.utils.logger import configure_logging, logger

from ._context import handle_errors

_RADIUS = click.IntRange(min=0)


@click.command(name="linesift")
@click.version_option(version=__version__, prog_name="linesift", message="%(prog)s v%(version)s")
@click.option("-A", "--after-context", "after", type=_RADIUS, default=0, metavar="N", help="Print N lines after each match.")
@click.option("-B", "--before-context", "before", type=_RADIUS, default=0, metavar="N", help="Print N lines before each match.")
@click.option("-C", "--context", "around", type=_RADIUS, default=0, metavar="N", help="Print N lines around each match (overrides -A and -B).")
@click.option("-c", "--count", "count_only", is_flag=True, help="Print only the number of matching lines.")
@click.option("-i", "--ignore-case", is_flag=True, help="Ignore case when matching.")
@click.option("-v", "--invert-match", "invert", is_flag=True, help="Select non-matching lines.")
@click.option("-F", "--fixed-strings", "fixed", is_flag=True, help="Match PATTERN as a literal string.")
@click.option("-n", "--line-number", "line_numbers", is_flag=True, help="Prefix each line with its line number.")
@click.option("--group-separator", default=None, metavar="SEP", help="Print SEP between non-contiguous blocks of output.")
@click.option("--debug", is_flag=True, help="Log debug information to stderr.")
@click.argument("pattern")
@click.argument("file", required=False, default=None)
def cli(
    after: int,
    before: int,
    around: int,
    count_only: bool,
    ignore_case: bool,
    invert: bool,
    fixed: bool,
    line_numbers: bool,
    group_separator: str | None,
    debug: bool,
    pattern: str,
    file: str | None,
) -> None:
    """Print lines matching PATTERN from FILE or standard input.

    PATTERN is a regular expression unless -F is given. Without FILE, or
    with FILE set to "-", lines are read from standard input.
    """
    configure_logging(debug=True if debug else None)

    with handle_errors():
        mode = MatchMode(fixed=fixed, ignore_case=ignore_case, invert=invert)
        context = resolve_context(before=before, after=after, around=around)
        logger.debug(f"mode={mode} context={context} count_only={count_only}")

        # Compile before reading so a bad pattern never touches the input.
        service = GrepService(pattern, mode=mode, context=context, count_only=count_only)
        lines = read_lines(file)
        result = service.run(lines)

    write_result(
        result,
        echo=click.echo,
        line_numbers=line_numbers,
        group_separator=group_separator,
    )


if __name__ == "__main__":
    cli()
