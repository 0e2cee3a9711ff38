"""
Error types for the TypeScript error prettifier.

Only configuration and template registration report failures to the caller;
every formatting operation is total and degrades to pass-through instead.
"""

from typing import Optional


class PrettifierError(Exception):
    """Base exception for all prettifier errors."""

    def __init__(self, message: str, context: Optional[str] = None) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.context:
            return f"[{self.context}] {self.message}"
        return self.message


class InvalidConfigurationError(PrettifierError):
    """
    Raised when a configuration override violates a type or range constraint.

    The configuration being built is rejected as a whole; whatever
    configuration the caller held before stays in effect.
    """

    def __init__(self, message: str, option: Optional[str] = None) -> None:
        self.option = option
        super().__init__(message, option)


class MalformedTemplateError(PrettifierError):
    """
    Raised when a message template cannot be registered.

    This error is raised when:
    - The template has no matching pattern
    - The pattern does not compile or lacks exactly two capture groups
    - Fewer than two display labels are given
    """

    def __init__(self, message: str, template: Optional[str] = None) -> None:
        self.template = template
        super().__init__(message, f"template '{template}'" if template else None)
