"""
tsprettify Language Server Protocol (LSP) integration.

This package connects the prettifier to editors:
- Prettified copies of TypeScript diagnostics
- Hover contents and inline hints for type mismatches
- A command server exposing extract / format / diff / summarize

Usage:
    # Start the LSP server (stdio mode)
    tsprettify-lsp

    # Or run as a module
    python -m tsprettify.lsp
"""

from tsprettify.lsp.diagnostics import DiagnosticPrettifier, is_typescript_error
from tsprettify.lsp.server import PrettifierLanguageServer, PrettifierSession, main

__all__ = [
    "DiagnosticPrettifier",
    "is_typescript_error",
    "PrettifierLanguageServer",
    "PrettifierSession",
    "main",
]
