"""
Conversion of namehint diagnostics into LSP diagnostics.

Suggested names travel in the LSP diagnostic's ``data`` field so the code
action handler can offer them as quick fixes when the client sends the
diagnostic back.
"""

from lsprotocol import types

from namehint.diagnostics import Diagnostic, DiagnosticSeverity

SOURCE = "namehint"

_SEVERITY_MAP = {
    DiagnosticSeverity.ERROR: types.DiagnosticSeverity.Error,
    DiagnosticSeverity.WARNING: types.DiagnosticSeverity.Warning,
    DiagnosticSeverity.INFO: types.DiagnosticSeverity.Information,
    DiagnosticSeverity.HINT: types.DiagnosticSeverity.Hint,
}


def diagnostic_range(diag: Diagnostic) -> types.Range:
    """
    Get the 0-indexed LSP range of a diagnostic.

    The span is preferred; without one the range covers a single character
    at the location, and without a location the start of the document.
    """
    if diag.span is not None:
        span = diag.span
        return types.Range(
            start=types.Position(line=max(0, span.start_line - 1), character=max(0, span.start_col - 1)),
            end=types.Position(line=max(0, span.end_line - 1), character=max(0, span.end_col - 1)),
        )

    line = 0
    character = 0
    if diag.location is not None:
        line = max(0, diag.location.line - 1)  # Convert to 0-indexed
        character = max(0, diag.location.column - 1)

    return types.Range(
        start=types.Position(line=line, character=character),
        end=types.Position(line=line, character=character + 1),
    )


def to_lsp_diagnostic(diag: Diagnostic) -> types.Diagnostic:
    """
    Convert a namehint diagnostic into an LSP diagnostic.

    Args:
        diag: The namehint diagnostic

    Returns:
        The LSP diagnostic, with suggested names in ``data``
    """
    message_parts = [diag.message]
    for note in diag.notes:
        message_parts.append(f"note: {note}")
    if diag.help_text:
        message_parts.append(f"help: {diag.help_text}")

    return types.Diagnostic(
        range=diagnostic_range(diag),
        message="\n".join(message_parts),
        severity=_SEVERITY_MAP.get(diag.severity, types.DiagnosticSeverity.Error),
        source=SOURCE,
        code=diag.code,
        data={"suggestions": diag.suggested_names},
    )


def to_lsp_diagnostics(diagnostics: list[Diagnostic]) -> list[types.Diagnostic]:
    """Convert a list of namehint diagnostics."""
    return [to_lsp_diagnostic(diag) for diag in diagnostics]
