"""
Message templates for TypeScript type-mismatch diagnostics.

A template is data, not code: a regular expression with exactly two capture
groups (the "actual" and the "expected" type expression) plus the two labels
shown next to them. Templates live in a ``TemplateSet``, an ordered mapping
that also maps TypeScript diagnostic codes to the template to try first.

New templates are added by registering data:

    templates = DEFAULT_TEMPLATES.register(
        "index",
        r"Element implicitly has an '(.+)' type because .* type '(.+)'",
        ("Element type:", "Indexed type:"),
    )
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Sequence, Union

from tsprettify.utils.errors import InvalidConfigurationError, MalformedTemplateError
from tsprettify.utils.similarity import did_you_mean


@dataclass(frozen=True, slots=True)
class MessageTemplate:
    """
    A named rule extracting two type expressions from a diagnostic message.

    Attributes:
        name: Template name (key in the template set)
        pattern: Compiled pattern with exactly two capture groups
        labels: Display labels for the actual and the expected slot
    """

    name: str
    pattern: re.Pattern
    labels: tuple[str, str]

    def match(self, message: str) -> Optional[tuple[str, str]]:
        """
        Match the template against a message.

        Returns:
            The (actual, expected) captures, or None unless both are non-empty.
        """
        found = self.pattern.search(message)
        if found is None:
            return None
        actual, expected = found.group(1), found.group(2)
        if not actual or not expected:
            return None
        return actual, expected


def build_template(
    name: str,
    pattern: Union[str, re.Pattern, None],
    labels: Optional[Sequence[str]],
) -> MessageTemplate:
    """
    Validate and build a message template.

    Raises:
        MalformedTemplateError: If the pattern is missing, does not compile,
            does not have exactly two capture groups, or fewer than two
            string labels are given.
    """
    if not isinstance(name, str) or not name:
        raise MalformedTemplateError("template name must be a non-empty string")

    if pattern is None or (isinstance(pattern, str) and not pattern):
        raise MalformedTemplateError("missing matching pattern", name)

    if isinstance(pattern, str):
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise MalformedTemplateError(f"invalid pattern: {e}", name) from e
    elif isinstance(pattern, re.Pattern):
        compiled = pattern
    else:
        raise MalformedTemplateError(
            f"pattern must be a string, got {type(pattern).__name__}", name
        )

    if compiled.groups != 2:
        raise MalformedTemplateError(
            f"pattern must have exactly 2 capture groups, found {compiled.groups}", name
        )

    if labels is None or isinstance(labels, str) or len(labels) < 2:
        raise MalformedTemplateError("two display labels are required", name)
    if not all(isinstance(label, str) for label in labels[:2]):
        raise MalformedTemplateError("labels must be strings", name)

    return MessageTemplate(name=name, pattern=compiled, labels=(labels[0], labels[1]))


def normalize_code(code: Union[str, int, None]) -> Optional[str]:
    """Normalize a diagnostic code: ``2322``, ``"2322"`` and ``"TS2322"`` all give ``"2322"``."""
    if code is None or isinstance(code, bool):
        return None
    text = str(code).strip()
    if text[:2].upper() == "TS":
        text = text[2:]
    return text or None


@dataclass(frozen=True)
class TemplateSet:
    """
    Ordered, immutable collection of message templates.

    Iteration follows insertion order, so matching is deterministic.
    ``register`` and ``with_codes`` return new sets and never modify the
    receiver.

    Attributes:
        templates: Template name -> template, in matching order
        codes: Normalized diagnostic code -> template name
    """

    templates: Mapping[str, MessageTemplate] = field(default_factory=dict)
    codes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "templates", MappingProxyType(dict(self.templates)))
        object.__setattr__(self, "codes", MappingProxyType(dict(self.codes)))

    def __iter__(self) -> Iterator[MessageTemplate]:
        return iter(self.templates.values())

    def __len__(self) -> int:
        return len(self.templates)

    def __contains__(self, name: object) -> bool:
        return name in self.templates

    def names(self) -> list[str]:
        return list(self.templates)

    def get(self, name: str) -> Optional[MessageTemplate]:
        return self.templates.get(name)

    def for_code(self, code: Union[str, int, None]) -> Optional[MessageTemplate]:
        """Get the template mapped to a diagnostic code, if any."""
        key = normalize_code(code)
        if key is None:
            return None
        name = self.codes.get(key)
        if name is None:
            return None
        return self.templates.get(name)

    def register(
        self,
        name: str,
        pattern: Union[str, re.Pattern, None],
        labels: Optional[Sequence[str]],
    ) -> TemplateSet:
        """
        Return a new set with a template added or replaced.

        A replaced template keeps its position; a new one goes last.

        Raises:
            MalformedTemplateError: If the template is invalid.
        """
        template = build_template(name, pattern, labels)
        templates = dict(self.templates)
        templates[name] = template
        return TemplateSet(templates, self.codes)

    def with_codes(self, codes: Mapping[Any, str]) -> TemplateSet:
        """
        Return a new set with additional code -> template name mappings.

        Raises:
            InvalidConfigurationError: If a code maps to an unknown template.
        """
        merged = dict(self.codes)
        for code, name in codes.items():
            key = normalize_code(code)
            if key is None:
                raise InvalidConfigurationError(f"invalid diagnostic code {code!r}", "codes")
            if name not in self.templates:
                hint = did_you_mean(str(name), self.templates)
                message = f"code {key} maps to unknown template '{name}'"
                raise InvalidConfigurationError(
                    f"{message}; {hint}" if hint else message, "codes"
                )
            merged[key] = name
        return TemplateSet(self.templates, merged)


# Default templates in matching order: the more specific messages come
# before the generic assignability one, which would otherwise swallow them.
_DEFAULT_TEMPLATE_DATA: tuple[tuple[str, str, tuple[str, str]], ...] = (
    (
        "overload",
        r"No overload matches this call(?s:.*)[Tt]ype '(.+)' is not assignable to "
        r"(?:parameter of )?type '(.+)'",
        ("Argument:", "Overload expects:"),
    ),
    (
        "parameter",
        r"[Aa]rgument of type '(.+)' is not assignable to parameter of type '(.+)'\.?",
        ("Argument type:", "Parameter type:"),
    ),
    (
        "missing_props",
        r"Type '(.+)' is missing the following properties from type '(.+)'",
        ("Actual type:", "Required type:"),
    ),
    (
        "property",
        r"Property '(.+)' does not exist on type '(.+)'\.?",
        ("Property:", "Type:"),
    ),
    (
        "assignability",
        r"[Tt]ype '(.+)' is not assignable to .*type '(.+)'\.?",
        ("Actual type:", "Expected type:"),
    ),
    (
        "return_mismatch",
        r"Type '(.+)' is not assignable to type '(.+)'",
        ("Returned:", "Expected return:"),
    ),
)

DEFAULT_CODES: dict[str, str] = {
    "2322": "assignability",
    "2345": "parameter",
    "2339": "property",
    "2741": "missing_props",
    "2416": "return_mismatch",
    "2769": "overload",
}


def _build_defaults() -> TemplateSet:
    templates = TemplateSet()
    for name, pattern, labels in _DEFAULT_TEMPLATE_DATA:
        templates = templates.register(name, pattern, labels)
    return templates.with_codes(DEFAULT_CODES)


DEFAULT_TEMPLATES = _build_defaults()
