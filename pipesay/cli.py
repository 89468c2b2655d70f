"""
pipesay - a cow that says whatever you pipe to it

Usage:
    <command> | pipesay

Examples:
    fortune | pipesay
    printf 'hello\\nworld\\n' | pipesay
"""

import argparse
import logging
import sys
from typing import List, TextIO

from pipesay import __version__
from pipesay.balloon import render_balloon
from pipesay.config import DEFAULT_CONFIG, Config
from pipesay.figure import compose

logger = logging.getLogger(__name__)


# ANSI color codes
class Colors:
    """Terminal color definitions"""

    RESET = "\033[0m"
    BOLD = "\033[1m"

    RED = "\033[31m"
    BRIGHT_RED = "\033[91m"


class InputReadError(Exception):
    """Reading from the input stream failed before end of stream."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(str(cause))


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments

    Unknown arguments are ignored; output depends only on the piped input.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="pipesay",
        description="Render piped text in a speech balloon above a cow",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fortune | pipesay
  printf 'hello\\nworld\\n' | pipesay
        """,
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"pipesay {__version__}",
    )

    args, unknown = parser.parse_known_args(argv)
    if unknown:
        logger.debug("Ignoring arguments: %s", unknown)
    return args


def read_lines(stream: TextIO) -> List[str]:
    """Read all lines from stream with their line terminators removed

    Args:
        stream: Text stream to read until end of stream

    Returns:
        Lines in input order

    Raises:
        InputReadError: If the stream fails before end of stream
    """
    lines = []
    try:
        for line in stream:
            if line.endswith("\n"):
                line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
            lines.append(line)
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(e) from e
    return lines


def print_usage(stdout: TextIO, config: Config = DEFAULT_CONFIG):
    """Print the hint shown when nothing is piped in"""
    for line in config.usage_lines:
        print(line, file=stdout)


def print_error(message: str):
    """Print an error message to stderr, colored when stderr is a terminal"""
    if sys.stderr.isatty():
        message = f"{Colors.BOLD}{Colors.BRIGHT_RED}{message}{Colors.RESET}"
    print(message, file=sys.stderr)


def run(stdin: TextIO, stdout: TextIO, config: Config = DEFAULT_CONFIG) -> int:
    """Render stdin to stdout

    Args:
        stdin: Input stream
        stdout: Output stream
        config: Settings to render with

    Returns:
        Process exit code
    """
    try:
        interactive = stdin.isatty()
    except (OSError, ValueError) as e:
        print_error(f"Error reading stdin: {e}")
        return 1

    if interactive:
        print_usage(stdout, config)
        return 0

    try:
        lines = read_lines(stdin)
    except InputReadError as e:
        print_error(f"Error reading input: {e}")
        return 1

    logger.debug("Read %d lines from stdin", len(lines))
    stdout.write(compose(render_balloon(lines, config.tab_width)))
    return 0


def main():
    """Main entry point for CLI"""
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    parse_args()
    sys.exit(run(sys.stdin, sys.stdout))


if __name__ == "__main__":
    main()
