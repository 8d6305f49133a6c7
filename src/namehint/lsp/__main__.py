"""
Entry point for running the namehint LSP server as a module.

Usage:
    python -m namehint.lsp
    python -m namehint.lsp --tcp --port 2088
"""

from namehint.lsp.server import main

if __name__ == "__main__":
    main()
