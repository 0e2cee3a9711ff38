"""
Type-expression Lexer (Tokenizer).

Transforms the text of a type expression into a flat stream of tokens:
identifier runs and single structural characters. Whitespace only separates
tokens and is never emitted.
"""

import logging
from typing import Iterator, Optional

from tsprettify.core.tokens import (
    STRUCTURAL_TOKENS,
    TRUNCATION_MARKER,
    Token,
    TokenType,
)

logger = logging.getLogger(__name__)

# Inputs longer than this are cut before scanning
MAX_INPUT_LENGTH = 10_000


class Lexer:
    """
    Tokenizer for type-expression text.

    The lexer never fails: empty input yields no tokens, and input longer
    than ``max_length`` is cut at the cap with a single TRUNCATED token
    appended.

    Usage:
        lexer = Lexer("{ a: string; }")
        tokens = lexer.tokenize()
        # or iterate: for token in lexer: ...
    """

    def __init__(self, source: Optional[str], max_length: int = MAX_INPUT_LENGTH) -> None:
        """
        Initialize the lexer with a type expression.

        Args:
            source: The type-expression text (None is treated as empty)
            max_length: Number of characters scanned before truncating
        """
        self.source = source or ""
        self.max_length = max_length
        self.pos = 0
        self.tokens: list[Token] = []
        self.truncated = len(self.source) > max_length

    @property
    def _text(self) -> str:
        if self.truncated:
            return self.source[: self.max_length]
        return self.source

    def _read_identifier(self, text: str) -> Token:
        """Consume a maximal run of non-whitespace, non-structural characters."""
        start = self.pos
        while (
            self.pos < len(text)
            and not text[self.pos].isspace()
            and text[self.pos] not in STRUCTURAL_TOKENS
        ):
            self.pos += 1
        return Token(TokenType.IDENTIFIER, text[start : self.pos])

    def tokenize(self) -> list[Token]:
        """
        Tokenize the whole expression.

        Returns:
            A list of tokens in source order.
        """
        self.tokens = []
        self.pos = 0
        text = self._text

        while self.pos < len(text):
            char = text[self.pos]
            if char.isspace():
                self.pos += 1
            elif char in STRUCTURAL_TOKENS:
                self.tokens.append(Token(STRUCTURAL_TOKENS[char], char))
                self.pos += 1
            else:
                self.tokens.append(self._read_identifier(text))

        if self.truncated:
            logger.debug(
                "Type expression of %d characters truncated to %d",
                len(self.source),
                self.max_length,
            )
            self.tokens.append(Token(TokenType.TRUNCATED, TRUNCATION_MARKER))

        return self.tokens

    def __iter__(self) -> Iterator[Token]:
        """Iterate over tokens (re-tokenizes if necessary)."""
        if not self.tokens:
            self.tokenize()
        return iter(self.tokens)


def tokenize(source: Optional[str], max_length: int = MAX_INPUT_LENGTH) -> list[Token]:
    """
    Convenience function to tokenize a type expression.

    Args:
        source: Type-expression text
        max_length: Number of characters scanned before truncating

    Returns:
        List of tokens
    """
    return Lexer(source, max_length).tokenize()
