"""
Edit distance and the "did you mean?" hints shown for unknown option and
template names.
"""

from __future__ import annotations

from typing import Iterable, Sequence


def levenshtein_distance(a: Sequence, b: Sequence) -> int:
    """
    Unit-cost edit distance between two sequences.

    Works on strings (option names) as well as token lists; items are
    compared with ``==``.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    row = list(range(len(b) + 1))
    for i, item_a in enumerate(a, start=1):
        diagonal, row[0] = row[0], i
        for j, item_b in enumerate(b, start=1):
            above = row[j]
            row[j] = min(above + 1, row[j - 1] + 1, diagonal + (item_a != item_b))
            diagonal = above
    return row[-1]


def suggest_similar(
    name: str,
    candidates: Iterable[str],
    max_distance: int = 3,
    max_suggestions: int = 3,
) -> list[str]:
    """
    Known names within ``max_distance`` edits of ``name``, ignoring case.

    Args:
        name: The name that was not recognized
        candidates: Names that are valid in the same place
        max_distance: Largest edit distance still offered as a hint
        max_suggestions: Number of names to return at most

    Returns:
        Closest names first, equal distances in alphabetical order
    """
    wanted = name.lower()
    ranked = sorted(
        (levenshtein_distance(wanted, candidate.lower()), candidate)
        for candidate in candidates
        if abs(len(candidate) - len(name)) <= max_distance
    )
    return [candidate for distance, candidate in ranked if distance <= max_distance][
        :max_suggestions
    ]


def did_you_mean(name: str, candidates: Iterable[str]) -> str:
    """Return a ``did you mean ...?`` hint, or an empty string when nothing is close."""
    similar = suggest_similar(name, candidates)
    if not similar:
        return ""
    if len(similar) == 1:
        return f"did you mean '{similar[0]}'?"
    return "did you mean one of: " + ", ".join(f"'{s}'" for s in similar) + "?"
