"""
tsprettify - readable TypeScript type-mismatch diagnostics.

Extracts the two compared type expressions from a TypeScript compiler error
message and renders them as an indented block, an inline token diff or a
one-line summary. All operations are pure functions of their inputs and an
immutable configuration value.
"""

from tsprettify.config import DEFAULT_CONFIG, PrettifierConfig, load_config
from tsprettify.core.diff import diff_types
from tsprettify.extractor import TypeMismatch, extract
from tsprettify.formatter import format_type
from tsprettify.render import prettify_message
from tsprettify.summary import summarize
from tsprettify.templates import DEFAULT_TEMPLATES, MessageTemplate, TemplateSet

__version__ = "0.3.0"
__all__ = [
    "extract",
    "format_type",
    "diff_types",
    "summarize",
    "prettify_message",
    "load_config",
    "PrettifierConfig",
    "DEFAULT_CONFIG",
    "TypeMismatch",
    "MessageTemplate",
    "TemplateSet",
    "DEFAULT_TEMPLATES",
]
