#!/usr/bin/env python3
"""
Main CLI entry point for streamslice.

Prints a sub-range of a file or of standard input:

    streamslice 10:20 file.txt      lines 10 to 19
    streamslice -5: file.txt        last 5 lines
    streamslice -c 100:+16 blob     16 bytes starting at byte 100
    cat log | streamslice 2:-3      skip 2 bytes, drop the last 3 lines
"""

import sys

import click
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..core.config import SliceSettings
from ..core.counting import CountMode
from ..core.errors import SliceError
from ..core.input_source import open_input
from ..core.slicer import slice_input

console = Console(stderr=True)


def setup_logging(verbose: bool = False, level: str = "WARNING"):
    """Setup logging configuration."""
    level = "DEBUG" if verbose else level
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=True,
    )


# Negative ranges such as "-5:" look like short options; let them through
# as positionals instead of rejecting them.
@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("range_text", metavar="RANGE")
@click.argument("input_path", metavar="[INPUT]", required=False)
@click.option(
    "--byte", "-c", "byte_mode", is_flag=True, help="Count by bytes instead of lines"
)
@click.option(
    "--no-seek",
    is_flag=True,
    help="Always stream the input, even when it is a regular file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(__version__, prog_name="streamslice")
def cli(
    range_text: str,
    input_path: str | None,
    byte_mode: bool,
    no_seek: bool,
    verbose: bool,
):
    """
    Print the START:END range of INPUT (or standard input).

    START and END count from the beginning when non-negative and from the
    end when negative. An omitted START is 0 and an omitted END is the end of
    the input. END may be +N to select N units after START.
    """
    try:
        settings = SliceSettings()
    except ValidationError as e:
        raise click.UsageError(f"Invalid STREAMSLICE_* configuration: {e}") from e
    setup_logging(verbose, settings.log_level)

    mode = CountMode.BYTE if byte_mode else CountMode.LINE
    stdout = click.get_binary_stream("stdout")
    try:
        with open_input(input_path, click.get_binary_stream("stdin")) as source:
            report = slice_input(
                range_text,
                source.stream,
                stdout,
                mode=mode,
                settings=settings,
                seekable=source.seekable and not no_seek,
            )
    except SliceError as e:
        logger.debug("Slice failed: {!r}", e)
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        sys.exit(1)

    logger.debug(
        "Wrote {} bytes from {} ({})",
        report.bytes_written,
        source.name,
        report.strategy.value,
    )


def main():
    """Main CLI entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️ Operation cancelled by user[/yellow]")
        sys.exit(1)


if __name__ == "__main__":
    main()
