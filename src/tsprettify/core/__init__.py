"""
Token-level core of the prettifier: lexer, aligner and diff renderer.
"""

from tsprettify.core.aligner import (
    MAX_ALIGN_TOKENS,
    EditKind,
    EditOp,
    align,
    edit_cost,
)
from tsprettify.core.diff import DEFAULT_MARKERS, DiffMarkers, diff_types, render_diff
from tsprettify.core.lexer import MAX_INPUT_LENGTH, Lexer, tokenize
from tsprettify.core.tokens import Token, TokenType

__all__ = [
    "Token",
    "TokenType",
    "Lexer",
    "tokenize",
    "MAX_INPUT_LENGTH",
    "EditKind",
    "EditOp",
    "align",
    "edit_cost",
    "MAX_ALIGN_TOKENS",
    "DiffMarkers",
    "DEFAULT_MARKERS",
    "render_diff",
    "diff_types",
]
