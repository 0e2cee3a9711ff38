"""
Token definitions for the type-expression lexer.

A type expression is split into identifier runs and single structural
characters. Tokens carry no source position: layout is rebuilt from
structure, never from offsets.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Enumeration of all token types in a type expression."""

    # Any run of non-whitespace, non-structural characters
    IDENTIFIER = auto()

    # Structural delimiters
    LBRACE = auto()
    RBRACE = auto()
    PIPE = auto()
    SEMICOLON = auto()
    COLON = auto()
    COMMA = auto()
    LT = auto()
    GT = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    LPAREN = auto()
    RPAREN = auto()

    # Emitted once when the input was cut at the size cap
    TRUNCATED = auto()


STRUCTURAL_TOKENS: dict[str, TokenType] = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "|": TokenType.PIPE,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

TRUNCATION_MARKER = "..."


@dataclass(frozen=True, slots=True)
class Token:
    """
    A single token of a type expression.

    Attributes:
        type: The type of this token
        value: The exact source text of the token
    """

    type: TokenType
    value: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"

    def __str__(self) -> str:
        return self.value

    @property
    def is_structural(self) -> bool:
        """Check if this token is one of the structural delimiters."""
        return self.type not in (TokenType.IDENTIFIER, TokenType.TRUNCATED)

    @property
    def is_truncation(self) -> bool:
        """Check if this token marks a truncated input."""
        return self.type == TokenType.TRUNCATED
