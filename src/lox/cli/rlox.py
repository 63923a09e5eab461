"""
rlox - Lox Scanner Command-Line Interface
=========================================

This module implements the `rlox` command. It reads Lox source from a
script file or from an interactive prompt, scans it, and prints each
token's debug form on its own line.

Usage Examples
--------------
Scan a script:
    $ rlox hello.lox

Interactive prompt (each line is scanned on its own):
    $ rlox
    > var x = 1;

Debug logging:
    $ rlox -v hello.lox

Exit Codes
----------
    0   success
    65  lexical error in the input
    74  script file could not be read
"""

import logging
from pathlib import Path

import click

from lox import __version__
from lox.cli.errors import report_error, report_unreadable
from lox.errors import ScanError
from lox.scanner import Scanner

logger = logging.getLogger(__name__)

USAGE = "Usage: rlox [script]"
PROMPT = "> "


# =============================================================================
# Driver Functions
# =============================================================================

def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def run(source: str) -> None:
    """
    Scan one source text and print its tokens.

    Raises:
        ScanError: On the first lexical error; nothing is printed then
    """
    tokens = Scanner(source).scan_tokens()
    for token in tokens:
        click.echo(repr(token))


def run_file(path: Path) -> None:
    """Scan a whole script file, exiting on read or lexical errors."""
    # Decode the raw bytes so '\r' reaches the scanner untranslated
    try:
        source = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        report_unreadable(str(path), e)

    logger.debug(f"Read {len(source)} characters from {path}")

    try:
        run(source)
    except ScanError as e:
        report_error(e)


def run_prompt() -> None:
    """
    Read-scan-print loop over standard input.

    Every line is an independent source text with its own Scanner.
    A lexical error ends the session.
    """
    stdin = click.get_text_stream("stdin")
    while True:
        click.echo(PROMPT, nl=False)
        line = stdin.readline()
        if not line:
            break

        try:
            run(line)
        except ScanError as e:
            report_error(e)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "script",
    nargs=-1,
    type=click.Path(path_type=Path),
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Log scanner activity to stderr",
)
@click.version_option(version=__version__, prog_name="rlox")
def main(script: tuple[Path, ...], verbose: bool) -> None:
    """
    Scan Lox source code and print its tokens.

    SCRIPT is the Lox source file to scan. Without it, rlox starts an
    interactive prompt and scans each line as it is entered.

    \b
    Examples:
        rlox hello.lox          # Print the tokens of a script
        rlox                    # Interactive prompt
        rlox -v hello.lox       # With debug logging
    """
    setup_logging(verbose)

    if len(script) > 1:
        click.echo(USAGE)
        return

    if script:
        run_file(script[0])
    else:
        run_prompt()


if __name__ == "__main__":
    main()
