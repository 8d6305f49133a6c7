"""
namehint Language Server Protocol (LSP) integration.

This package exposes namehint diagnostics to editors:
- Conversion of diagnostics to LSP diagnostics carrying suggestions
- Quick-fix code actions replacing an unresolved name
- A ``namehint.suggest`` command for ad-hoc ranking

Usage:
    # Start the LSP server (stdio mode)
    namehint-lsp

    # Or run as a module
    python -m namehint.lsp
"""

from namehint.lsp.code_actions import build_code_actions
from namehint.lsp.diagnostics import to_lsp_diagnostic, to_lsp_diagnostics

__all__ = [
    "build_code_actions",
    "to_lsp_diagnostic",
    "to_lsp_diagnostics",
]
