"""
CLI Error Handling
==================

Exit codes and error reporting shared by the rlox command.
"""

import sys
from enum import IntEnum
from typing import NoReturn

import click

from lox.errors import ScanError


class ExitCode(IntEnum):
    """Process exit codes (sysexits.h values)."""
    SUCCESS = 0
    DATA_ERROR = 65     # Lexical error in the input
    IO_ERROR = 74       # Source file could not be read


def report_error(error: ScanError) -> NoReturn:
    """
    Print a lexical error to stderr and exit.

    The error renders itself as '[line N] Error: message'.

    Raises:
        SystemExit: Always, with ExitCode.DATA_ERROR
    """
    click.echo(str(error), err=True)
    sys.exit(ExitCode.DATA_ERROR)


def report_unreadable(path: str, error: Exception) -> NoReturn:
    """
    Print a file read failure to stderr and exit.

    Raises:
        SystemExit: Always, with ExitCode.IO_ERROR
    """
    click.echo(f"Unable to read file {path}: {error}", err=True)
    sys.exit(ExitCode.IO_ERROR)
