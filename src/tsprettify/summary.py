"""
Single-line summaries of type expressions.

Used where there is room for a glance only (inline hints, virtual text):
object types shrink to their first property names, unions to their first
members, everything else is cut to a fixed width.
"""

from __future__ import annotations

import re
from typing import Optional

SHORT_THRESHOLD = 25
LONG_THRESHOLD = 40
MAX_ITEMS = 3
ELLIPSIS = "..."

_PROPERTY_RE = re.compile(r"([A-Za-z_$][\w$]*)\??:")
_ARRAY_RE = re.compile(r"\bArray<([^<>]+)>")

_OPENERS = "<([{"
_CLOSERS = ">)]}"


def _split_top_level_union(text: str) -> list[str]:
    """Split at ``|`` separators that are not nested in any bracket."""
    segments: list[str] = []
    depth = 0
    start = 0
    for i, char in enumerate(text):
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            if char == ">" and i > 0 and text[i - 1] == "=":
                continue
            depth = max(0, depth - 1)
        elif char == "|" and depth == 0:
            segments.append(text[start:i])
            start = i + 1
    segments.append(text[start:])
    return [segment.strip() for segment in segments if segment.strip()]


def _summarize_object(text: str) -> Optional[str]:
    names: list[str] = []
    for name in _PROPERTY_RE.findall(text):
        if name not in names:
            names.append(name)
    if not names:
        return None
    shown = ", ".join(names[:MAX_ITEMS])
    if len(names) > MAX_ITEMS:
        shown += f", {ELLIPSIS}"
    return f"{{ {shown} }}"


def _summarize_union(segments: list[str]) -> str:
    shown = " | ".join(segments[:MAX_ITEMS])
    if len(segments) > MAX_ITEMS:
        shown += f" | {ELLIPSIS}"
    return shown


def _has_top_level_space(text: str) -> bool:
    depth = 0
    for char in text:
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(0, depth - 1)
        elif depth == 0 and char in " |&":
            return True
    return False


def _collapse_arrays(text: str) -> str:
    def replace(match: re.Match) -> str:
        inner = match.group(1).strip()
        if _has_top_level_space(inner):
            inner = f"({inner})"
        return f"{inner}[]"

    previous = None
    while previous != text:
        previous = text
        text = _ARRAY_RE.sub(replace, text)
    return text


def _truncate(text: str) -> str:
    if len(text) <= LONG_THRESHOLD:
        return text
    return text[: LONG_THRESHOLD - len(ELLIPSIS)].rstrip() + ELLIPSIS


def summarize(type_expr: Optional[str]) -> str:
    """
    Produce a short single-line approximation of a type expression.

    - Up to 25 characters: the trimmed expression itself
    - Object types: ``{ a, b, c, ... }`` from the first property names
    - Top-level unions: ``A | B | C | ...`` from the first members
    - Anything else: ``Array<X>`` shown as ``X[]``, cut to 40 characters

    Never longer than the trimmed input; empty or None input gives "".
    """
    if not type_expr:
        return ""
    text = type_expr.strip()
    if len(text) <= SHORT_THRESHOLD:
        return text

    text = " ".join(text.split())
    result: Optional[str] = None

    if text.startswith("{"):
        result = _summarize_object(text)

    if result is None:
        segments = _split_top_level_union(text)
        if len(segments) > 1:
            result = _summarize_union(segments)

    if result is None:
        result = _truncate(_collapse_arrays(text))

    if len(result) > len(text):
        result = _truncate(text)
    return result
