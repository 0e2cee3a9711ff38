"""
Inline diff rendering of two type expressions.

The edit script produced by the aligner is serialized back into two strings,
one per side, with removed tokens wrapped in ``[- -]`` on the left and added
tokens wrapped in ``{+ +}`` on the right.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from tsprettify.core.aligner import MAX_ALIGN_TOKENS, EditKind, EditOp, align
from tsprettify.core.lexer import tokenize
from tsprettify.core.tokens import Token


@dataclass(frozen=True, slots=True)
class DiffMarkers:
    """Text wrapped around removed and added tokens."""

    removed_open: str = "[-"
    removed_close: str = "-]"
    added_open: str = "{+"
    added_close: str = "+}"

    def removed(self, text: str) -> str:
        return f"{self.removed_open}{text}{self.removed_close}"

    def added(self, text: str) -> str:
        return f"{self.added_open}{text}{self.added_close}"


DEFAULT_MARKERS = DiffMarkers()


def render_diff(
    ops: Sequence[EditOp], markers: DiffMarkers = DEFAULT_MARKERS
) -> tuple[str, str]:
    """
    Serialize an edit script into a (left, right) pair of strings.

    Equal tokens go to both sides verbatim, deleted tokens to the left side
    only and inserted tokens to the right side only. Tokens are joined with
    single spaces.
    """
    left: list[str] = []
    right: list[str] = []

    for op in ops:
        if op.kind == EditKind.EQUAL:
            left.append(op.token.value)
            right.append(op.token.value)
        elif op.kind == EditKind.DELETE:
            left.append(markers.removed(op.token.value))
        else:
            right.append(markers.added(op.token.value))

    return " ".join(left), " ".join(right)


def _join(tokens: Sequence[Token]) -> str:
    return " ".join(token.value for token in tokens)


def diff_types(
    a: Optional[str],
    b: Optional[str],
    markers: DiffMarkers = DEFAULT_MARKERS,
    max_tokens: int = MAX_ALIGN_TOKENS,
) -> tuple[str, str]:
    """
    Diff two type expressions token by token.

    Args:
        a: The first (actual) type expression
        b: The second (expected) type expression
        markers: Marker text for removed and added tokens
        max_tokens: Alignment size cap

    Returns:
        A (left, right) pair. When either side is too long to align, both
        sides are returned tokenized but unmarked.
    """
    left_tokens = tokenize(a)
    right_tokens = tokenize(b)

    ops = align(left_tokens, right_tokens, max_tokens)
    if ops is None:
        return _join(left_tokens), _join(right_tokens)

    return render_diff(ops, markers)
