"""
Rendering of TypeScript diagnostics for display.

Builds the strings a host shows for a diagnostic: the verbose "Type
Mismatch" block, the compact virtual-text line and the inline preview of the
expected type. Every function falls back to the original message when no
template matches.

Example output of ``prettify_message``:
    Type Mismatch
    ==================================================
    Actual type:
    { a : [-string-] ; }

    Expected type:
    { a : {+number+} ; }
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from tsprettify.config import DEFAULT_CONFIG, PrettifierConfig
from tsprettify.core.diff import diff_types
from tsprettify.extractor import TypeMismatch, extract
from tsprettify.formatter import format_type
from tsprettify.summary import summarize

TITLE = "Type Mismatch"
SEPARATOR = "=" * 50
ARROW = " → "
PREVIEW_PREFIX = "  ⮕ Expected: "
ICON_PREFIX = "●"
PLAIN_PREFIX = "■"

Code = Union[str, int, None]


@dataclass(frozen=True, slots=True)
class Rendering:
    """
    All renderings of one type mismatch.

    Attributes:
        mismatch: The extraction result
        verbose: Both sides formatted as indented blocks
        diff: Both sides with inline removed/added markers
        summary: Both sides summarized to a single short line
    """

    mismatch: TypeMismatch
    verbose: tuple[str, str]
    diff: tuple[str, str]
    summary: tuple[str, str]


def render_mismatch(
    mismatch: TypeMismatch, config: PrettifierConfig = DEFAULT_CONFIG
) -> Rendering:
    """Render a type mismatch in every available style."""
    return Rendering(
        mismatch=mismatch,
        verbose=(
            format_type(mismatch.actual, config),
            format_type(mismatch.expected, config),
        ),
        diff=diff_types(mismatch.actual, mismatch.expected),
        summary=(summarize(mismatch.actual), summarize(mismatch.expected)),
    )


def block_sides(
    mismatch: TypeMismatch, config: PrettifierConfig = DEFAULT_CONFIG
) -> tuple[str, str]:
    """The two sides shown in the verbose block: diffed, or formatted when diffs are off."""
    if config.use_diff_highlighting:
        return diff_types(mismatch.actual, mismatch.expected)
    return format_type(mismatch.actual, config), format_type(mismatch.expected, config)


def format_block(mismatch: TypeMismatch, sides: tuple[str, str]) -> str:
    """Lay out the two rendered sides of a mismatch as the verbose multi-line block."""
    actual, expected = sides
    label_actual, label_expected = mismatch.labels
    return "\n".join(
        [
            TITLE,
            SEPARATOR,
            label_actual,
            actual,
            "",
            label_expected,
            expected,
        ]
    )


def prettify_message(
    message: str, code: Code = None, config: PrettifierConfig = DEFAULT_CONFIG
) -> str:
    """
    Render a diagnostic message as a readable block.

    Returns:
        The "Type Mismatch" block, or the message unchanged when no
        template matches.
    """
    mismatch = extract(message, code, config.templates)
    if mismatch is None:
        return message
    return format_block(mismatch, block_sides(mismatch, config))


def virtual_text(
    message: str, code: Code = None, config: PrettifierConfig = DEFAULT_CONFIG
) -> str:
    """
    Compact one-line form of a diagnostic: ``actual → expected``.

    Falls back to the first line of the message.
    """
    mismatch = extract(message, code, config.templates)
    if mismatch is not None:
        return summarize(mismatch.actual) + ARROW + summarize(mismatch.expected)
    if not message:
        return ""
    return message.splitlines()[0]


def preview_text(
    message: str, code: Code = None, config: PrettifierConfig = DEFAULT_CONFIG
) -> Optional[str]:
    """Inline preview of the expected type, or None when disabled or unmatched."""
    if not config.show_type_preview:
        return None
    mismatch = extract(message, code, config.templates)
    if mismatch is None:
        return None
    return PREVIEW_PREFIX + summarize(mismatch.expected)


def diagnostic_prefix(config: PrettifierConfig = DEFAULT_CONFIG) -> str:
    """Prefix shown in front of virtual text."""
    return ICON_PREFIX if config.show_icons else PLAIN_PREFIX
