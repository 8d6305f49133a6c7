"""
Quick fixes for namehint diagnostics.

Every suggested name attached to a diagnostic becomes a code action that
replaces the unresolved name with the suggestion. The best suggestion is
marked as preferred.
"""

from typing import Any

from lsprotocol import types

from namehint.lsp.diagnostics import SOURCE


def suggestions_of(diagnostic: types.Diagnostic) -> list[str]:
    """
    Get the suggested names carried by an LSP diagnostic.

    Diagnostics from other sources, or without a well-formed ``data``
    payload, carry none.
    """
    if diagnostic.source != SOURCE:
        return []

    data: Any = diagnostic.data
    if not isinstance(data, dict):
        return []

    suggestions = data.get("suggestions")
    if not isinstance(suggestions, list):
        return []
    return [name for name in suggestions if isinstance(name, str) and name]


def build_code_actions(
    uri: str,
    diagnostics: list[types.Diagnostic],
) -> list[types.CodeAction]:
    """
    Build quick-fix code actions for the given diagnostics.

    Args:
        uri: The document the diagnostics belong to
        diagnostics: Diagnostics from the code action request context

    Returns:
        One replacement action per suggested name
    """
    actions: list[types.CodeAction] = []

    for diagnostic in diagnostics:
        for index, name in enumerate(suggestions_of(diagnostic)):
            edit = types.TextEdit(range=diagnostic.range, new_text=name)
            actions.append(
                types.CodeAction(
                    title=f"Change to '{name}'",
                    kind=types.CodeActionKind.QuickFix,
                    diagnostics=[diagnostic],
                    is_preferred=index == 0,
                    edit=types.WorkspaceEdit(changes={uri: [edit]}),
                )
            )

    return actions
