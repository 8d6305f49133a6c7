"""
Pytest configuration and shared fixtures for namehint tests.
"""

import pytest

from namehint.config import SuggestionConfig
from namehint.diagnostics import DiagnosticEmitter
from namehint.formatting import Parameter, SymbolInfo, SymbolKind
from namehint.utils.errors import SourceLocation


@pytest.fixture
def name_pool() -> list[tuple[str, str]]:
    """The classic keyed pool of person-name fields."""
    return [
        ("firstName", "string firstName"),
        ("lastName", "string lastName"),
        ("fullName", "string fullName"),
        ("username", "string username"),
    ]


@pytest.fixture
def text_members() -> list[tuple[str, SymbolInfo]]:
    """Members of a small string-like type."""
    members = [
        SymbolInfo("Length", SymbolKind.PROPERTY, "int", owner="Text"),
        SymbolInfo("Left", SymbolKind.METHOD, "Text", owner="Text", parameters=(Parameter("count", "int"),)),
        SymbolInfo("Substring", SymbolKind.METHOD, "Text", owner="Text", parameters=(Parameter("start", "int"),)),
    ]
    return [(m.name, m) for m in members]


@pytest.fixture
def location_factory():
    """Factory fixture for creating source locations."""

    def _create_location(line: int = 1, column: int = 1, filename: str = "example.cs") -> SourceLocation:
        return SourceLocation(line=line, column=column, filename=filename)

    return _create_location


@pytest.fixture
def emitter_factory():
    """Factory fixture for creating diagnostic emitters."""

    def _create_emitter(
        source: str = "",
        config: SuggestionConfig | None = None,
    ) -> DiagnosticEmitter:
        return DiagnosticEmitter(source, "example.cs", config=config)

    return _create_emitter
