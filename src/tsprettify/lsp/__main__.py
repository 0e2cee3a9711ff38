"""
Entry point for running the tsprettify LSP server as a module.

Usage:
    python -m tsprettify.lsp
    python -m tsprettify.lsp --tcp --port 2088
"""

from tsprettify.lsp.server import main

if __name__ == "__main__":
    main()
