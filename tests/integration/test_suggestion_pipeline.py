"""
Integration tests for the full suggestion pipeline.

Candidate collection -> ranking -> diagnostics -> LSP diagnostics -> quick fixes
"""

from lsprotocol import types

from namehint.config import CONFIG_FILENAME, load_config
from namehint.context import SymbolOrigin, gather_prioritized
from namehint.diagnostics import DiagnosticEmitter
from namehint.formatting import Parameter, SymbolInfo, SymbolKind
from namehint.lsp.code_actions import build_code_actions
from namehint.lsp.diagnostics import to_lsp_diagnostics
from namehint.pools import CandidatePoolCache
from namehint.utils.errors import SourceLocation

SOURCE = """\
public string Greet(string lastName)
{
    var firstName = "Ada";
    return frstName + " " + lastName;
}
"""

URI = "file:///project/Greeter.cs"


def collect_scope() -> list[tuple[str, SymbolInfo]]:
    return [
        ("firstName", SymbolInfo("firstName", SymbolKind.LOCAL, "string")),
        ("lastName", SymbolInfo("lastName", SymbolKind.PARAMETER, "string")),
        (
            "Greet",
            SymbolInfo("Greet", SymbolKind.METHOD, "string", owner="Greeter", parameters=(Parameter("lastName", "string"),)),
        ),
    ]


class TestSuggestionPipeline:
    """Test the suggestion pipeline end to end."""

    def test_unresolved_variable_to_quick_fix(self) -> None:
        """Test that a typo becomes a diagnostic and a preferred quick fix."""
        cache = CandidatePoolCache()
        scope = cache.get_or_build(("Greeter.cs", "Greet"), collect_scope)

        emitter = DiagnosticEmitter(SOURCE, "Greeter.cs")
        loc = SourceLocation(line=4, column=12, filename="Greeter.cs")
        diag = emitter.emit_variable_not_found("frstName", loc, scope)

        assert diag is not None
        assert diag.suggested_names[0] == "firstName"
        assert "\n- [Local] string firstName" in diag.message

        rendered = emitter.format_all(use_color=False)
        assert "  4 |     return frstName + \" \" + lastName;" in rendered
        assert "   = help: did you mean `firstName`?" in rendered

        lsp_diagnostics = to_lsp_diagnostics(emitter.diagnostics)
        assert lsp_diagnostics[0].range == types.Range(
            start=types.Position(line=3, character=11),
            end=types.Position(line=3, character=19),
        )

        actions = build_code_actions(URI, lsp_diagnostics)
        preferred = [a for a in actions if a.is_preferred]
        assert [a.title for a in preferred] == ["Change to 'firstName'"]
        edit = preferred[0].edit.changes[URI][0]
        assert edit.new_text == "firstName"
        assert edit.range == lsp_diagnostics[0].range

        # The cached pool is reused for the next unresolved name
        cache.get_or_build(("Greeter.cs", "Greet"), collect_scope)
        assert cache.builds == 1

    def test_prioritized_scopes(self) -> None:
        """Test that merged scopes feed the diagnostic in priority order."""
        pools = {
            SymbolOrigin.EXTERNAL_LIBRARY: [("firstName", "Library.firstName")],
            SymbolOrigin.LOCAL_SCOPE: [("lastName", "local lastName")],
        }
        prioritized = gather_prioritized("frstName", pools)

        emitter = DiagnosticEmitter()
        # Keys in priority order; the emitter re-ranks by similarity alone
        diag = emitter.emit_nameof_not_found(
            "frstName", None, [(s.name, s.value) for s in prioritized]
        )

        assert [s.name for s in prioritized] == ["lastName", "firstName"]
        assert diag.suggested_names == ["firstName", "lastName"]
        assert diag.span is None

    def test_project_configuration(self, tmp_path) -> None:
        """Test that project settings shape the emitted diagnostics."""
        path = tmp_path / CONFIG_FILENAME
        path.write_text(
            "[suggestions]\nmax_suggestions = 1\ndisabled = [\"namespaces\"]\n",
            encoding="utf-8",
        )
        config = load_config(path)
        emitter = DiagnosticEmitter(config=config)
        loc = SourceLocation(line=1, column=1)

        diag = emitter.emit_variable_not_found("frstName", loc, collect_scope())
        assert diag.suggested_names == ["firstName"]
        assert emitter.emit_namespace_not_found("Sytem", loc, ["System"]) is None
        assert emitter.error_count() == 1
