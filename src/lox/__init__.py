"""
Lox - Scanner for the Lox Scripting Language
============================================

This package provides the lexical front end of a Lox interpreter: it
turns source text into a flat list of classified, line-tagged tokens.

Main Components
---------------
- **tokens**: TokenType enumeration, keyword table and Token record
- **scanner**: the single-pass Scanner
- **errors**: LoxError hierarchy for lexical errors
- **cli**: the `rlox` command (run a script or an interactive prompt)

Quick Start
-----------
Scan a string:
    >>> from lox import scan
    >>> [t.type.name for t in scan("var x = 1;")]
    ['VAR', 'IDENTIFIER', 'EQUAL', 'NUMBER', 'SEMICOLON', 'EOF']

Handle lexical errors:
    >>> from lox import scan, ScanError
    >>> try:
    ...     scan("@")
    ... except ScanError as e:
    ...     print(e)
    [line 1] Error: Unexpected character.

Or use the command-line tool:
    $ rlox script.lox
    $ rlox
    > print "hi";
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from lox.errors import (
    LoxError,
    ScanError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from lox.tokens import KEYWORDS, Token, TokenType
from lox.scanner import Scanner


def scan(source: str) -> list[Token]:
    """
    Scan Lox source text into tokens.

    Args:
        source: The complete source text

    Returns:
        The token list, ending with an EOF token

    Raises:
        ScanError: On the first lexical error
    """
    return Scanner(source).scan_tokens()


__all__ = [
    "__version__",
    # Errors
    "LoxError",
    "ScanError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenType",
    # Scanner
    "Scanner",
    "scan",
]
