"""
Pytest configuration and shared fixtures for tsprettify tests.
"""

from typing import Any, Optional

import pytest

from lsprotocol import types

from tsprettify.config import PrettifierConfig, load_config
from tsprettify.core.lexer import Lexer
from tsprettify.core.tokens import Token, TokenType


@pytest.fixture
def lexer_factory():
    """Factory fixture for creating lexers."""

    def _create_lexer(source: Optional[str], **kwargs: Any) -> Lexer:
        return Lexer(source, **kwargs)

    return _create_lexer


@pytest.fixture
def tokenize(lexer_factory):
    """Fixture to tokenize a type expression."""

    def _tokenize(source: Optional[str]) -> list[Token]:
        return lexer_factory(source).tokenize()

    return _tokenize


@pytest.fixture
def identifiers():
    """Fixture building identifier tokens from plain strings."""

    def _identifiers(*values: str) -> list[Token]:
        return [Token(TokenType.IDENTIFIER, value) for value in values]

    return _identifiers


@pytest.fixture
def config_factory():
    """Factory fixture for creating configurations from overrides."""

    def _create_config(**overrides: Any) -> PrettifierConfig:
        return load_config(overrides)

    return _create_config


@pytest.fixture
def diagnostic_factory():
    """Factory fixture for creating LSP diagnostics."""

    def _create_diagnostic(
        message: str,
        code: Any = 2322,
        source: Optional[str] = "ts",
        severity: types.DiagnosticSeverity = types.DiagnosticSeverity.Error,
        line: int = 0,
    ) -> types.Diagnostic:
        return types.Diagnostic(
            range=types.Range(
                start=types.Position(line=line, character=4),
                end=types.Position(line=line, character=12),
            ),
            message=message,
            severity=severity,
            code=code,
            source=source,
        )

    return _create_diagnostic


# Messages as printed by tsc / tsserver
ASSIGNABILITY_MESSAGE = "Type '{ a: string; }' is not assignable to type '{ a: number; }'."
PARAMETER_MESSAGE = (
    "Argument of type 'string' is not assignable to parameter of type 'number'."
)
PROPERTY_MESSAGE = "Property 'naem' does not exist on type 'User'."
UNMATCHED_MESSAGE = "Cannot find name 'foo'."


@pytest.fixture
def messages() -> dict[str, str]:
    """Representative TypeScript diagnostic messages."""
    return {
        "assignability": ASSIGNABILITY_MESSAGE,
        "parameter": PARAMETER_MESSAGE,
        "property": PROPERTY_MESSAGE,
        "unmatched": UNMATCHED_MESSAGE,
    }
