"""
Prettified TypeScript diagnostics for LSP clients.

This module adapts LSP diagnostics published by a TypeScript language
server into prettified copies, hover contents and inline hints. It only
reads ``message``, ``code``, ``source`` and ``severity``; everything else
is carried over untouched.
"""

from typing import Iterable, Optional

from lsprotocol import types

from tsprettify.config import DEFAULT_CONFIG, PrettifierConfig
from tsprettify.extractor import extract
from tsprettify.render import prettify_message, preview_text, virtual_text

TYPESCRIPT_SOURCES = frozenset({"tsserver", "typescript", "ts"})


def is_typescript_error(diagnostic: types.Diagnostic) -> bool:
    """Check if a diagnostic is an error reported by a TypeScript server."""
    source = (diagnostic.source or "").lower()
    return source in TYPESCRIPT_SOURCES and diagnostic.severity == types.DiagnosticSeverity.Error


class DiagnosticPrettifier:
    """
    Rewrites TypeScript type-mismatch diagnostics into readable form.

    Diagnostics from other sources, and TypeScript errors no template
    recognizes, are returned as they are.
    """

    def __init__(self, config: PrettifierConfig | None = None) -> None:
        """
        Initialize the prettifier.

        Args:
            config: Optional configuration (templates, diff toggle, preview toggle)
        """
        self.config = config or DEFAULT_CONFIG

    def _matches(self, diagnostic: types.Diagnostic) -> bool:
        if not is_typescript_error(diagnostic):
            return False
        return extract(diagnostic.message, diagnostic.code, self.config.templates) is not None

    def prettify(self, diagnostic: types.Diagnostic) -> types.Diagnostic:
        """
        Get a copy of the diagnostic with its message prettified.

        Args:
            diagnostic: The diagnostic as published by the TypeScript server

        Returns:
            A new diagnostic, or the same object when nothing matched
        """
        if not self._matches(diagnostic):
            return diagnostic

        return types.Diagnostic(
            range=diagnostic.range,
            message=prettify_message(diagnostic.message, diagnostic.code, self.config),
            severity=diagnostic.severity,
            code=diagnostic.code,
            code_description=diagnostic.code_description,
            source=diagnostic.source,
            tags=diagnostic.tags,
            related_information=diagnostic.related_information,
            data=diagnostic.data,
        )

    def prettify_all(self, diagnostics: Iterable[types.Diagnostic]) -> list[types.Diagnostic]:
        """Prettify every diagnostic of a document."""
        return [self.prettify(diagnostic) for diagnostic in diagnostics]

    def virtual_text(self, diagnostic: types.Diagnostic) -> str:
        """One-line text for a diagnostic, compact for TypeScript mismatches."""
        if not is_typescript_error(diagnostic):
            return diagnostic.message
        return virtual_text(diagnostic.message, diagnostic.code, self.config)

    def hover_for(self, diagnostics: Iterable[types.Diagnostic]) -> types.Hover | None:
        """
        Build hover content from the first prettifiable diagnostic.

        Args:
            diagnostics: Diagnostics under the cursor

        Returns:
            A markdown hover over the diagnostic's range, or None
        """
        for diagnostic in diagnostics:
            if not self._matches(diagnostic):
                continue
            block = prettify_message(diagnostic.message, diagnostic.code, self.config)
            return types.Hover(
                contents=types.MarkupContent(
                    kind=types.MarkupKind.Markdown,
                    value=f"```\n{block}\n```",
                ),
                range=diagnostic.range,
            )
        return None

    def inline_hint(self, diagnostics: Iterable[types.Diagnostic]) -> Optional[str]:
        """Preview of the expected type for the first TypeScript error that has one."""
        for diagnostic in diagnostics:
            if not is_typescript_error(diagnostic):
                continue
            hint = preview_text(diagnostic.message, diagnostic.code, self.config)
            if hint is not None:
                return hint
        return None
