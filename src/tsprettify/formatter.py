"""
Structural formatter for type expressions.

Turns a single-line type expression, as printed inside a compiler message,
into an indented multi-line block that mirrors its brace nesting:

    >>> print(format_type("{ a: string; b: { c: number; }; }"))
    {
      a: string;
      b: {
        c: number;
      };
    }

Separators inside generic arguments, parentheses and index brackets stay on
their line, so ``Map<string, number>`` is never split at its comma.
"""

from __future__ import annotations

import re
from typing import Optional

from tsprettify.config import DEFAULT_CONFIG, PrettifierConfig

# Short expressions without any of these are returned as they are
FAST_PATH_LENGTH = 20
FAST_PATH_TRIGGERS = "{;|"

_DELIMITER_SPACE_RE = re.compile(r"\s*([{}|;,<>])\s*")
_ARROW_SPACE_RE = re.compile(r"\s*=>\s*")

_OPENERS = "<(["
_CLOSERS = ">)]"

# Rendering of separators that stay on the current line
_INLINE: dict[str, str] = {
    "{": "{ ",
    ";": "; ",
    ",": ", ",
    "|": " | ",
}


class TypeFormatter:
    """
    Re-indents a flat type expression into nested blocks.

    Formatting state (nesting depth and bracket depth) lives on the instance
    and is reset at the start of every ``format`` call, so one formatter can
    be reused but never carries anything from one expression to the next.
    """

    def __init__(self, config: PrettifierConfig | None = None) -> None:
        """Initialize the formatter with optional configuration."""
        self.config = config or DEFAULT_CONFIG
        self._indent_level = 0
        self._bracket_depth = 0
        self._output_lines: list[str] = []

    def format(self, type_expr: Optional[str]) -> str:
        """Format one type expression."""
        if not type_expr:
            return ""
        if len(type_expr) < FAST_PATH_LENGTH and not any(
            char in type_expr for char in FAST_PATH_TRIGGERS
        ):
            return type_expr

        self._indent_level = 0
        self._bracket_depth = 0
        self._output_lines = []

        broken = self._break_lines(self._normalize(type_expr))

        self._bracket_depth = 0
        for line in broken.split("\n"):
            self._emit_line(line.strip())

        return "\n".join(self._output_lines).strip()

    # -------------------------------------------------------------------------
    # Passes
    # -------------------------------------------------------------------------

    @staticmethod
    def _normalize(text: str) -> str:
        """Drop whitespace around delimiters and arrows."""
        text = _ARROW_SPACE_RE.sub("=>", text.strip())
        return _DELIMITER_SPACE_RE.sub(r"\1", text)

    def _break_lines(self, text: str) -> str:
        """Insert line breaks after ``{ | , ;`` and before ``}`` outside brackets."""
        out: list[str] = []
        i = 0
        while i < len(text):
            char = text[i]

            if char == "=" and text[i + 1 : i + 2] == ">":
                out.append(" => ")
                i += 2
                continue

            if char in _OPENERS:
                self._bracket_depth += 1
            elif char in _CLOSERS:
                self._bracket_depth = max(0, self._bracket_depth - 1)

            if char == "{" and out and out[-1][-1] not in "\n <([":
                out.append(" ")

            if self._bracket_depth == 0 and char not in _CLOSERS:
                if char in "{;,":
                    out.append(char + "\n")
                elif char == "|":
                    out.append(" |\n")
                elif char == "}":
                    out.append("\n}")
                else:
                    out.append(char)
            elif char == "}":
                if out and out[-1].endswith(" "):
                    out[-1] = out[-1].rstrip()
                out.append(" }")
            else:
                out.append(_INLINE.get(char, char))
            i += 1

        return "".join(out)

    def _emit_line(self, line: str) -> None:
        """Indent one line, adjusting nesting depth around it."""
        if not line:
            return

        opens = closes = False
        for i, char in enumerate(line):
            if char in _OPENERS:
                self._bracket_depth += 1
            elif char in _CLOSERS:
                if char == ">" and i > 0 and line[i - 1] == "=":
                    continue
                self._bracket_depth = max(0, self._bracket_depth - 1)
            elif self._bracket_depth == 0:
                if char == "}":
                    closes = True
                elif char == "{":
                    opens = True

        if closes:
            self._indent_level = max(0, self._indent_level - 1)

        indented = self.config.indent * self._indent_level + line
        self._output_lines.extend(self._wrap(indented))

        if opens:
            self._indent_level += 1

    def _wrap(self, line: str) -> list[str]:
        """Break an over-long line at each union separator."""
        if len(line) <= self.config.max_line_length or "|" not in line:
            return [line]

        body = line.lstrip()
        prefix = line[: len(line) - len(body)]
        body = body.rstrip()
        trailing = body.endswith("|")
        if trailing:
            body = body[:-1]

        pieces = [piece.strip() for piece in body.split("|")]
        if len(pieces) < 2:
            return [line]

        # Empty segments keep their separator so no character is dropped
        wrapped = [prefix + pieces[0]] if pieces[0] else []
        wrapped.extend(f"{prefix}| {piece}".rstrip() for piece in pieces[1:])
        if trailing:
            wrapped[-1] += " |"
        return wrapped


def format_type(type_expr: Optional[str], config: PrettifierConfig | None = None) -> str:
    """
    Format a type expression into an indented block.

    Args:
        type_expr: The type expression (None is treated as empty)
        config: Optional configuration (indent unit, max line length)

    Returns:
        The formatted expression. Unbalanced or unrecognized input is
        formatted best-effort and never raises.
    """
    return TypeFormatter(config).format(type_expr)


def check_format(type_expr: str, config: PrettifierConfig | None = None) -> bool:
    """Check whether a type expression is already in formatted form."""
    return format_type(type_expr, config) == type_expr
