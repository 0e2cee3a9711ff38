"""
Prettifier configuration.

Configuration is a single immutable value. It is built once by merging
caller-supplied overrides onto defaults and passed explicitly to every call;
callers wanting different behavior build another value instead of mutating
a shared one.

Usage:
    config = load_config({"indent": "    ", "max_line_length": 100})
    config = load_config_file(Path("prettifier.json"))
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from tsprettify.templates import DEFAULT_TEMPLATES, TemplateSet
from tsprettify.utils.errors import InvalidConfigurationError
from tsprettify.utils.similarity import did_you_mean

logger = logging.getLogger(__name__)

MIN_LINE_LENGTH = 20

DEFAULT_HIGHLIGHT_GROUPS: dict[str, str] = {
    "title": "DiagnosticError",
    "actual": "DiagnosticInfo",
    "expected": "DiagnosticHint",
    "separator": "Comment",
    "diff_add": "DiffAdd",
    "diff_delete": "DiffDelete",
    "diff_text": "DiffText",
}

_BOOL_OPTIONS = ("show_icons", "auto_open_float", "use_diff_highlighting", "show_type_preview")


@dataclass(frozen=True)
class PrettifierConfig:
    """
    Configuration for extraction, formatting and rendering.

    Attributes:
        indent: Indent unit repeated once per nesting level
        max_line_length: Lines longer than this are wrapped at union separators
        show_icons: Use an icon rather than a plain square as diagnostic prefix
        auto_open_float: Host hint to open the verbose rendering automatically
        use_diff_highlighting: Render both sides as an inline token diff
        show_type_preview: Produce the inline "expected type" preview
        highlight_groups: Host highlight group names, opaque to the core
        templates: Message templates and the diagnostic code mapping
    """

    indent: str = "  "
    max_line_length: int = 80
    show_icons: bool = True
    auto_open_float: bool = False
    use_diff_highlighting: bool = True
    show_type_preview: bool = True
    highlight_groups: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_HIGHLIGHT_GROUPS)
    )
    templates: TemplateSet = DEFAULT_TEMPLATES

    def __post_init__(self) -> None:
        _check_indent(self.indent)
        _check_line_length(self.max_line_length)
        for name in _BOOL_OPTIONS:
            _check_bool(name, getattr(self, name))
        if not isinstance(self.templates, TemplateSet):
            raise InvalidConfigurationError(
                f"expected a TemplateSet, got {type(self.templates).__name__}", "templates"
            )
        groups = _check_string_mapping("highlight_groups", self.highlight_groups)
        object.__setattr__(self, "highlight_groups", MappingProxyType(groups))

    def merged(self, overrides: Optional[Mapping[str, Any]]) -> PrettifierConfig:
        """
        Return a new configuration with ``overrides`` merged on top of this one.

        Raises:
            InvalidConfigurationError: If an option is unknown or has a bad value.
            MalformedTemplateError: If a template override is invalid.
        """
        if not overrides:
            return self
        if not isinstance(overrides, Mapping):
            raise InvalidConfigurationError(
                f"overrides must be a mapping, got {type(overrides).__name__}"
            )

        known = {f.name for f in fields(self)} | {"codes"}
        changes: dict[str, Any] = {}
        templates = self.templates

        for key, value in overrides.items():
            if key not in known:
                hint = did_you_mean(str(key), sorted(known))
                message = f"unknown option '{key}'"
                raise InvalidConfigurationError(f"{message}; {hint}" if hint else message, key)

            if key == "highlight_groups":
                groups = dict(self.highlight_groups)
                groups.update(_check_string_mapping(key, value))
                changes[key] = groups
            elif key == "templates":
                templates = _merge_templates(templates, value)
            elif key == "codes":
                continue
            else:
                changes[key] = value

        # Codes go last so they can point at templates added by the same override.
        if "codes" in overrides:
            codes = overrides["codes"]
            if not isinstance(codes, Mapping):
                raise InvalidConfigurationError("expected a mapping of code -> template", "codes")
            templates = templates.with_codes(codes)

        changes["templates"] = templates
        return replace(self, **changes)


def _check_indent(value: Any) -> None:
    if not isinstance(value, str):
        raise InvalidConfigurationError(
            f"indent must be a string, got {type(value).__name__}", "indent"
        )


def _check_line_length(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(
            f"max_line_length must be an integer, got {type(value).__name__}",
            "max_line_length",
        )
    if value < MIN_LINE_LENGTH:
        raise InvalidConfigurationError(
            f"max_line_length must be at least {MIN_LINE_LENGTH}, got {value}",
            "max_line_length",
        )


def _check_bool(name: str, value: Any) -> None:
    if not isinstance(value, bool):
        raise InvalidConfigurationError(
            f"{name} must be a boolean, got {type(value).__name__}", name
        )


def _check_string_mapping(name: str, value: Any) -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise InvalidConfigurationError(
            f"{name} must be a mapping, got {type(value).__name__}", name
        )
    for key, item in value.items():
        if not isinstance(key, str) or not isinstance(item, str):
            raise InvalidConfigurationError(f"{name} entries must map strings to strings", name)
    return dict(value)


def _merge_templates(templates: TemplateSet, value: Any) -> TemplateSet:
    if isinstance(value, TemplateSet):
        return value
    if not isinstance(value, Mapping):
        raise InvalidConfigurationError(
            f"templates must be a mapping, got {type(value).__name__}", "templates"
        )
    for name, entry in value.items():
        if isinstance(entry, Mapping):
            pattern, labels = entry.get("pattern"), entry.get("labels")
        else:
            pattern, labels = None, None
        templates = templates.register(name, pattern, labels)
    return templates


DEFAULT_CONFIG = PrettifierConfig()


def load_config(
    overrides: Optional[Mapping[str, Any]] = None,
    base: Optional[PrettifierConfig] = None,
) -> PrettifierConfig:
    """
    Build a configuration by merging overrides onto a base (defaults by default).

    Args:
        overrides: Plain mapping of option name -> value
        base: Configuration to merge onto

    Returns:
        The new configuration; ``base`` is left untouched.

    Raises:
        InvalidConfigurationError: If an override has a bad type or range.
        MalformedTemplateError: If a template override is invalid.
    """
    config = (base or DEFAULT_CONFIG).merged(overrides)
    logger.debug("Loaded configuration with %d templates", len(config.templates))
    return config


def load_config_file(
    path: Path, base: Optional[PrettifierConfig] = None
) -> PrettifierConfig:
    """
    Load configuration overrides from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidConfigurationError: If the file is not a JSON object or has bad values
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidConfigurationError(f"invalid JSON: {e}", str(path)) from e
    if not isinstance(data, dict):
        raise InvalidConfigurationError("configuration file must contain a JSON object", str(path))
    return load_config(data, base)
