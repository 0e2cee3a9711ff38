"""
Extraction of the two compared types from a TypeScript diagnostic message.

Templates are tried in the fixed order of the template set. When the caller
passes the diagnostic code and it maps to a template, that template is tried
first. No match is not an error: ``extract`` returns None and the caller
shows the original message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from tsprettify.templates import DEFAULT_TEMPLATES, MessageTemplate, TemplateSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TypeMismatch:
    """
    The result of a successful extraction.

    Attributes:
        template: Name of the template that matched
        labels: Display labels for the actual and the expected slot
        actual: The first captured type expression
        expected: The second captured type expression
    """

    template: str
    labels: tuple[str, str]
    actual: str
    expected: str

    @property
    def actual_label(self) -> str:
        return self.labels[0]

    @property
    def expected_label(self) -> str:
        return self.labels[1]


def _candidates(
    code: Union[str, int, None], templates: TemplateSet
) -> Iterator[MessageTemplate]:
    preferred = templates.for_code(code)
    if preferred is not None:
        yield preferred
    for template in templates:
        if template is not preferred:
            yield template


def extract(
    message: Optional[str],
    code: Union[str, int, None] = None,
    templates: TemplateSet = DEFAULT_TEMPLATES,
) -> Optional[TypeMismatch]:
    """
    Extract the actual and the expected type from a diagnostic message.

    Args:
        message: Raw diagnostic message
        code: Optional diagnostic code (``2322``, ``"2322"`` or ``"TS2322"``)
        templates: Templates to try

    Returns:
        The first match, or None when no template captures two non-empty
        type expressions.
    """
    if not message:
        return None

    for template in _candidates(code, templates):
        captured = template.match(message)
        if captured is None:
            continue
        actual, expected = captured
        logger.debug("Message matched template '%s'", template.name)
        return TypeMismatch(
            template=template.name,
            labels=template.labels,
            actual=actual,
            expected=expected,
        )

    logger.debug("No template matched message (code=%s)", code)
    return None
