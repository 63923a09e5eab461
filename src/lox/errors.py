"""
Lox Error Hierarchy
===================

This module defines the exception hierarchy for the Lox scanner.
All exceptions inherit from LoxError, allowing callers to catch all
Lox-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
LoxError (base)
└── ScanError - lexical errors raised by the scanner
    ├── UnexpectedCharacterError - character that starts no token
    └── UnterminatedStringError - string literal never closed

Error Message Format
--------------------
Scan errors carry the 1-based line at which they were detected and
render in the classic Lox diagnostic format:

    [line 3] Error: Unexpected character.
"""


# =============================================================================
# Base Exception Class
# =============================================================================

class LoxError(Exception):
    """
    Base exception for all Lox errors.

    All exceptions in the package inherit from this class, allowing
    callers to catch every Lox-related error with a single clause:

        try:
            tokens = scan(source)
        except LoxError as e:
            print(e)
    """
    pass


# =============================================================================
# Scanner Exceptions
# =============================================================================

class ScanError(LoxError):
    """
    Lexical error raised by the scanner.

    The scanner stops at the first error; there is no recovery and no
    partial token list is returned.

    Attributes:
        message: The error description
        line: Line number (1-indexed) where the error was detected
    """

    def __init__(self, message: str, line: int):
        self.message = message
        self.line = line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format as '[line N] Error: message'."""
        return f"[line {self.line}] Error: {self.message}"


class UnexpectedCharacterError(ScanError):
    """
    Character that does not begin any token.

    Raised when the scanner meets a character that is neither
    insignificant whitespace nor the start of a recognized token,
    e.g. '@' or any non-ASCII letter.
    """

    def __init__(self, char: str, line: int):
        self.char = char
        super().__init__("Unexpected character.", line)


class UnterminatedStringError(ScanError):
    """
    Unterminated string literal.

    Raised when input ends before the closing quote of a string.
    The reported line is the line on which input ran out, which
    differs from the opening line for multi-line strings.

    Example:
        var s = "hello
    """

    def __init__(self, line: int):
        super().__init__("Unterminated string.", line)
