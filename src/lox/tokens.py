"""
Lox Token Definitions
=====================

Token types, the keyword table and the immutable Token record produced
by the scanner.

Token Categories
----------------
- Single-character punctuation: ( ) { } , . - + ; / *
- One-or-two character operators: ! != = == > >= < <=
- Literals: identifiers, strings, numbers
- Keywords: and class else false fun for if nil or print return
  super this true var while
- EOF: end of input
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the Lox language.

    A flat, closed set. Keywords are distinguished from identifiers
    so that later stages never need to re-inspect the lexeme.
    """

    # === Single-character Tokens ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or Two Character Tokens ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # === Literals ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()         # carries a float literal

    # === Keywords ===
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # === Structural ===
    EOF = auto()


# =============================================================================
# Keyword Mapping
# =============================================================================

KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token scanned from Lox source.

    Only NUMBER tokens carry a literal, and every NUMBER token does;
    this is checked on construction so a token's type and payload
    always agree.

    Attributes:
        type: The TokenType classification
        lexeme: Source text of the token (string contents without quotes)
        line: Line number (1-indexed) where the token was finalized
        literal: Parsed value for NUMBER tokens, None otherwise
    """
    type: TokenType
    lexeme: str
    line: int
    literal: Optional[float] = None

    def __post_init__(self) -> None:
        if self.type is TokenType.NUMBER:
            if self.literal is None:
                raise ValueError("NUMBER token requires a numeric literal")
        elif self.literal is not None:
            raise ValueError(f"{self.type.name} token cannot carry a literal")

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.literal is not None:
            kind = f"{self.type.name}({self.literal!r})"
        else:
            kind = self.type.name
        return f"Token({kind}, {self.lexeme!r}, line {self.line})"

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in KEYWORDS.values()

    def is_literal(self) -> bool:
        """Return True if this token is an identifier, string or number."""
        return self.type in (
            TokenType.IDENTIFIER,
            TokenType.STRING,
            TokenType.NUMBER,
        )
