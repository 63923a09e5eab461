"""
Lox Scanner (Tokenizer)
=======================

This module implements the scanner for the Lox scripting language.
It converts source text into a flat list of tokens in a single
left-to-right pass, tracking line numbers for diagnostics.

Lookahead
---------
The scanner reads characters from an iterator over the source and
keeps at most two pending characters in a small buffer. This is
enough for every decision the grammar needs:

- one character: `!=` vs `!`, `//` vs `/`
- two characters: `123.45` vs `123.method` (a '.' only belongs to a
  number when a digit follows it)

Comments
--------
- Single-line only: // comment (runs to end of line or end of input)

Strings
-------
Strings may span lines and have no escape sequences; a backslash is
an ordinary character.

Example Usage
-------------
>>> from lox.scanner import Scanner
>>> for token in Scanner('print 1 + x;').scan_tokens():
...     print(token)
Token(PRINT, 'print', line 1)
Token(NUMBER(1.0), '1', line 1)
Token(PLUS, '+', line 1)
Token(IDENTIFIER, 'x', line 1)
Token(SEMICOLON, ';', line 1)
Token(EOF, '', line 1)
"""

import logging
import string
from collections import deque
from typing import Iterator, Optional

from lox.errors import (
    ScanError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from lox.tokens import KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Lox source code.

    A Scanner is single-use: build one per source text, call
    scan_tokens() (or iterate tokenize()) once, then discard it.
    Scanning stops at the first lexical error.

    Usage:
        scanner = Scanner(source_text)
        tokens = scanner.scan_tokens()

    Attributes:
        source: The source code being scanned
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    # Insignificant characters other than newline
    WHITESPACE = " \t\r"

    SINGLE_TOKENS = {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
    }

    # Operators with an '=' suffixed variant: char -> (alone, with '=')
    EQUAL_OPERATORS = {
        "!": (TokenType.BANG, TokenType.BANG_EQUAL),
        "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
        "<": (TokenType.LESS, TokenType.LESS_EQUAL),
        ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    }

    def __init__(self, source: str):
        """
        Initialize the scanner with source code.

        Args:
            source: The Lox source code to scan
        """
        self.source = source

        # Character stream and up to two characters of lookahead
        self._chars = iter(source)
        self._pending: deque[str] = deque()

        # Characters consumed since the last token boundary
        self._lexeme: list[str] = []
        self._line = 1

        self._started = False

    def scan_tokens(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            All tokens in source order, ending with a single EOF token

        Raises:
            ScanError: On the first unexpected character or
                unterminated string
        """
        tokens: list[Token] = []
        try:
            for token in self.tokenize():
                tokens.append(token)
        except ScanError as e:
            logger.debug(f"Scan failed after {len(tokens)} tokens: {e}")
            raise

        logger.debug(f"Scanned {len(tokens)} tokens over {self._line} lines")
        return tokens

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source code.

        Yields:
            Token objects in source order, the last one being EOF

        Raises:
            ScanError: If invalid input is encountered
            RuntimeError: If this scanner has already been used
        """
        if self._started:
            raise RuntimeError("Scanner already used; create a new one per source")
        self._started = True
        logger.debug(f"Scanning {len(self.source)} characters")

        while not self._at_end():
            token = self._scan_token()
            if token is not None:
                yield token

        yield Token(TokenType.EOF, "", self._line)

    @property
    def line(self) -> int:
        """Current line number (1-indexed)."""
        return self._line

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if the character stream is exhausted."""
        return self._peek() == ""

    def _peek(self, offset: int = 0) -> str:
        """
        Look at the character at offset 0 or 1 without consuming it.

        Returns empty string if past end of source.
        """
        while len(self._pending) <= offset:
            char = next(self._chars, "")
            if not char:
                return ""
            self._pending.append(char)
        return self._pending[offset]

    def _advance(self) -> str:
        """
        Consume and return the next character.

        The character is appended to the current lexeme.
        """
        if self._pending:
            char = self._pending.popleft()
        else:
            char = next(self._chars, "")
        self._lexeme.append(char)
        return char

    def _match(self, expected: str) -> bool:
        """
        Consume next character if it matches expected.

        Returns:
            True if matched and consumed, False otherwise
        """
        if self._peek() == expected:
            self._advance()
            return True
        return False

    @staticmethod
    def _is_digit(char: str) -> bool:
        return char != "" and char in string.digits

    @classmethod
    def _is_ident_char(cls, char: str) -> bool:
        return char != "" and char in cls.IDENT_CHARS

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _take_lexeme(self) -> str:
        """Return the current lexeme and start a new one."""
        text = "".join(self._lexeme)
        self._lexeme.clear()
        return text

    def _make_token(
        self,
        token_type: TokenType,
        literal: Optional[float] = None,
    ) -> Token:
        """Create a token from the current lexeme on the current line."""
        return Token(token_type, self._take_lexeme(), self._line, literal)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Optional[Token]:
        """
        Scan from the next character.

        Returns:
            The next Token, or None if the text consumed produced none
            (whitespace, newline or comment)
        """
        char = self._advance()

        if char in self.SINGLE_TOKENS:
            return self._make_token(self.SINGLE_TOKENS[char])

        if char in self.EQUAL_OPERATORS:
            alone, with_equal = self.EQUAL_OPERATORS[char]
            return self._make_token(with_equal if self._match("=") else alone)

        if char == "/":
            if self._match("/"):
                self._skip_line_comment()
                return None
            return self._make_token(TokenType.SLASH)

        if char in self.WHITESPACE:
            self._lexeme.clear()
            return None

        if char == "\n":
            self._lexeme.clear()
            self._line += 1
            return None

        if char == '"':
            return self._scan_string()

        if char in string.digits:
            return self._scan_number()

        if char in self.IDENT_START:
            return self._scan_identifier()

        raise UnexpectedCharacterError(char, self._line)

    def _skip_line_comment(self) -> None:
        """Skip the rest of a // comment, leaving the newline."""
        while not self._at_end() and self._peek() != "\n":
            self._advance()
        self._lexeme.clear()

    def _scan_string(self) -> Token:
        """
        Scan a double-quoted string literal.

        The opening quote has already been consumed. Newlines inside
        the string are counted.
        """
        while not self._at_end() and self._peek() != '"':
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._at_end():
            raise UnterminatedStringError(self._line)

        self._advance()  # consume closing "

        # Strip the surrounding quotes
        text = self._take_lexeme()[1:-1]
        return Token(TokenType.STRING, text, self._line)

    def _scan_number(self) -> Token:
        """
        Scan a numeric literal: digits, optionally '.' and more digits.

        A '.' is only consumed when a digit follows it, so `123.`
        scans as a NUMBER and a DOT.
        """
        while self._is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and self._is_digit(self._peek(1)):
            self._advance()  # consume .
            while self._is_digit(self._peek()):
                self._advance()

        text = self._take_lexeme()
        return Token(TokenType.NUMBER, text, self._line, float(text))

    def _scan_identifier(self) -> Token:
        """
        Scan an identifier or keyword.

        Keywords are distinguished by an exact lookup of the whole
        lexeme in the keyword table.
        """
        while self._is_ident_char(self._peek()):
            self._advance()

        text = self._take_lexeme()
        return Token(KEYWORDS.get(text, TokenType.IDENTIFIER), text, self._line)
