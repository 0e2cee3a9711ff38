"""
Prettifier Utilities Package.

Common error types and string similarity helpers.
"""

from tsprettify.utils.errors import (
    InvalidConfigurationError,
    MalformedTemplateError,
    PrettifierError,
)
from tsprettify.utils.similarity import did_you_mean, levenshtein_distance, suggest_similar

__all__ = [
    # Errors
    "PrettifierError",
    "InvalidConfigurationError",
    "MalformedTemplateError",
    # String similarity
    "levenshtein_distance",
    "suggest_similar",
    "did_you_mean",
]
