"""
Minimum edit distance alignment between token sequences.

Builds a Levenshtein table over two token sequences and walks it back into
an edit script of EQUAL / DELETE / INSERT operations. Work is bounded:
sequences longer than ``MAX_ALIGN_TOKENS`` are not aligned at all.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from tsprettify.core.tokens import Token

logger = logging.getLogger(__name__)

# Alignment is skipped when either side has more tokens than this
MAX_ALIGN_TOKENS = 500


class EditKind(Enum):
    """Kind of a single edit operation."""

    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


@dataclass(frozen=True, slots=True)
class EditOp:
    """
    One step of an edit script.

    Attributes:
        kind: EQUAL (token on both sides), DELETE (left only), INSERT (right only)
        token: The token the operation applies to
    """

    kind: EditKind
    token: Token

    @property
    def in_left(self) -> bool:
        """Check if this operation keeps a token of the left sequence."""
        return self.kind in (EditKind.EQUAL, EditKind.DELETE)

    @property
    def in_right(self) -> bool:
        """Check if this operation keeps a token of the right sequence."""
        return self.kind in (EditKind.EQUAL, EditKind.INSERT)


def distance_table(a: Sequence[Token], b: Sequence[Token]) -> list[list[int]]:
    """
    Build the (len(a) + 1) x (len(b) + 1) table of edit distances.

    Cell ``[i][j]`` holds the cost of turning ``a[:i]`` into ``b[:j]``.
    """
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,  # delete
                dp[i][j - 1] + 1,  # insert
                dp[i - 1][j - 1] + cost,
            )
    return dp


def align(
    left: Sequence[Token],
    right: Sequence[Token],
    max_tokens: int = MAX_ALIGN_TOKENS,
) -> Optional[list[EditOp]]:
    """
    Compute an edit script turning ``left`` into ``right``.

    Walks the Levenshtein table back from the last cell, preferring EQUAL
    on matching tokens, then INSERT whenever the insert path costs no more
    than the delete path, then DELETE. A substituted token is emitted as
    its DELETE and INSERT.

    Args:
        left: Token sequence of the first expression
        right: Token sequence of the second expression
        max_tokens: Size cap for either sequence

    Returns:
        The edit script in left-to-right order, or None when either side
        exceeds the cap and no diff is available.
    """
    if len(left) > max_tokens or len(right) > max_tokens:
        logger.debug(
            "Skipping alignment of %d x %d tokens (cap %d)",
            len(left),
            len(right),
            max_tokens,
        )
        return None

    dp = distance_table(left, right)
    script: list[EditOp] = []
    i, j = len(left), len(right)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and left[i - 1] == right[j - 1]:
            script.append(EditOp(EditKind.EQUAL, left[i - 1]))
            i, j = i - 1, j - 1
        elif j > 0 and (i == 0 or dp[i][j - 1] <= dp[i - 1][j]):
            script.append(EditOp(EditKind.INSERT, right[j - 1]))
            j -= 1
        else:
            script.append(EditOp(EditKind.DELETE, left[i - 1]))
            i -= 1

    script.reverse()
    return script


def edit_cost(script: Sequence[EditOp]) -> int:
    """Count the INSERT and DELETE operations of an edit script."""
    return sum(1 for op in script if op.kind != EditKind.EQUAL)
