"""
Rust-like "did you mean" diagnostics for unresolved names.

This module turns an unresolved name and a candidate pool into a diagnostic
message listing the best matches. The host that discovered the unresolved
name supplies the candidates; ranking is done by ``namehint.similarity`` and
each category applies its own relevance threshold on top.

Example output:
    error[NH001]: Member 'Lenght' does not exist on type 'Text'.
    - Length: int
    - LengthOf(value: string): int
      --> example.cs:5:12
       |
     5 |     var size = text.Lenght;
       |                     ^^^^^^
       |
       = help: did you mean `Length`?
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from namehint.config import SuggestionConfig
from namehint.context import SymbolOrigin, UsageContext, gather_prioritized
from namehint.formatting import entity_kind, format_any
from namehint.similarity.ranking import (
    ScoredCandidate,
    filter_by_score,
    rank_flat,
    rank_keyed,
)
from namehint.utils.errors import SourceLocation

logger = logging.getLogger(__name__)

PayloadFormatter = Callable[[Any], str]


# =============================================================================
# Diagnostic Severity Levels
# =============================================================================


class DiagnosticSeverity(Enum):
    """Severity level for diagnostic messages."""

    ERROR = "error"  # The name cannot be resolved
    WARNING = "warning"  # Resolves, but likely not what was meant
    INFO = "info"  # Informational message
    HINT = "hint"  # Suggestion for improvement

    def color_code(self) -> str:
        """Get ANSI color code for terminal output."""
        colors = {
            DiagnosticSeverity.ERROR: "\033[91m",  # Red
            DiagnosticSeverity.WARNING: "\033[93m",  # Yellow
            DiagnosticSeverity.INFO: "\033[96m",  # Cyan
            DiagnosticSeverity.HINT: "\033[92m",  # Green
        }
        return colors.get(self, "")

    @property
    def label(self) -> str:
        """Get the label for this severity."""
        return self.value


# =============================================================================
# Diagnostic Catalog
# =============================================================================


@dataclass(frozen=True, slots=True)
class DiagnosticDescriptor:
    """
    Static description of one kind of unresolved-name diagnostic.

    Attributes:
        code: Diagnostic code like "NH001"
        category: Configuration category the diagnostic belongs to
        title: Short title
        message_format: ``str.format`` template of the message
        description: Longer explanation for documentation
    """

    code: str
    category: str
    title: str
    message_format: str
    description: str


MEMBER_NOT_FOUND = DiagnosticDescriptor(
    code="NH001",
    category="members",
    title="Member not found",
    message_format="Member '{name}' does not exist on type '{type_name}'. {suggestions}",
    description="This member does not exist on the given type.",
)

VARIABLE_NOT_FOUND = DiagnosticDescriptor(
    code="NH002",
    category="variables",
    title="Variable not found",
    message_format="Variable '{name}' does not exist in the current scope. {suggestions}",
    description="This variable does not exist in the current scope.",
)

NAMESPACE_NOT_FOUND = DiagnosticDescriptor(
    code="NH003",
    category="namespaces",
    title="Namespace not found",
    message_format="Namespace '{name}' does not exist, Did you mean: {suggestions}",
    description="This namespace does not exist.",
)

NAMED_ARGUMENT_NOT_FOUND = DiagnosticDescriptor(
    code="NH004",
    category="named_arguments",
    title="Named argument not found",
    message_format=(
        "Parameter '{name}' does not exist for {target_kind} '{target}', "
        "Available signatures: {suggestions}"
    ),
    description="This named argument does not exist for the method or constructor.",
)

NAMEOF_NOT_FOUND = DiagnosticDescriptor(
    code="NH005",
    category="nameof",
    title="Invalid nameof argument",
    message_format="Nameof '{name}' does not exist, Did you mean: {suggestions}",
    description="The argument used in the nameof() operator does not exist in the current scope.",
)

DESCRIPTORS: dict[str, DiagnosticDescriptor] = {
    d.code: d
    for d in (
        MEMBER_NOT_FOUND,
        VARIABLE_NOT_FOUND,
        NAMESPACE_NOT_FOUND,
        NAMED_ARGUMENT_NOT_FOUND,
        NAMEOF_NOT_FOUND,
    )
}


def format_suggestion_list(lines: Iterable[str]) -> str:
    """Render suggestion lines as a bulleted block: ``"\\n- a\\n- b"``."""
    return "\n- " + "\n- ".join(lines)


# =============================================================================
# Core Diagnostic Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """
    A span of source code for highlighting.

    Represents a range in the source that should be underlined in
    diagnostic output.
    """

    start_line: int
    start_col: int
    end_line: int
    end_col: int
    filename: str = "<input>"

    @classmethod
    def from_location(
        cls,
        loc: SourceLocation,
        length: int = 1,
    ) -> "SourceSpan":
        """Create a span from a SourceLocation."""
        return cls(
            start_line=loc.line,
            start_col=loc.column,
            end_line=loc.line,
            end_col=loc.column + length,
            filename=loc.filename or "<input>",
        )

    @property
    def is_multiline(self) -> bool:
        """Check if this span covers multiple lines."""
        return self.start_line != self.end_line

    @property
    def length(self) -> int:
        """Get the length on a single line."""
        if self.is_multiline:
            return 1
        return max(1, self.end_col - self.start_col)

    def __str__(self) -> str:
        return f"{self.filename}:{self.start_line}:{self.start_col}"


@dataclass
class Diagnostic:
    """
    A diagnostic for an unresolved name, with its suggestions.

    Attributes:
        severity: The severity level
        code: Diagnostic code like "NH001"
        message: The full message, suggestion list included
        location: Source location of the unresolved name
        span: Source span to underline
        suggestion: Optional short "did you mean X?" help line
        help_text: Optional longer help explanation
        notes: Additional notes
        data: Machine-readable payload; ``data["suggestions"]`` holds the
            suggested names for code fixes
    """

    severity: DiagnosticSeverity
    code: str
    message: str
    location: Optional[SourceLocation] = None
    span: Optional[SourceSpan] = None
    suggestion: Optional[str] = None
    help_text: Optional[str] = None
    notes: list[str] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def suggested_names(self) -> list[str]:
        """Get the names a code fix may substitute."""
        return list(self.data.get("suggestions", []))

    def add_note(self, note: str) -> "Diagnostic":
        """Add a note and return self for chaining."""
        self.notes.append(note)
        return self

    def with_suggestion(self, suggestion: str) -> "Diagnostic":
        """Set suggestion and return self for chaining."""
        self.suggestion = suggestion
        return self

    def with_help(self, help_text: str) -> "Diagnostic":
        """Set help text and return self for chaining."""
        self.help_text = help_text
        return self


# =============================================================================
# Diagnostic Emitter
# =============================================================================


class DiagnosticEmitter:
    """
    Collects and formats unresolved-name diagnostics.

    Each ``emit_*`` method ranks the candidates it is given, applies the
    category's threshold from the configuration and records a diagnostic
    when there is something to suggest. It returns the diagnostic, or None
    when nothing was reported.

    Example:
        emitter = DiagnosticEmitter(source_code, "example.cs")
        emitter.emit_variable_not_found("frstName", loc, [("firstName", local)])
        print(emitter.format_all(use_color=False))
    """

    def __init__(
        self,
        source: str = "",
        filename: str = "<input>",
        config: Optional[SuggestionConfig] = None,
    ) -> None:
        """
        Initialize the diagnostic emitter.

        Args:
            source: The source text containing the unresolved names
            filename: The filename for diagnostic output
            config: Suggestion settings (defaults apply when omitted)
        """
        self.source = source
        self.source_lines = source.splitlines() if source else []
        self.filename = filename
        self.config = config or SuggestionConfig()
        self.diagnostics: list[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> Diagnostic:
        """Add a diagnostic and return it."""
        self.diagnostics.append(diagnostic)
        return diagnostic

    def suggest(
        self,
        category: str,
        name: str,
        candidates: Iterable[tuple[str, Any]],
    ) -> list[ScoredCandidate[Any]]:
        """
        Rank candidates for a category and apply its threshold.

        Args:
            category: Configuration category
            name: The unresolved name
            candidates: ``(key, payload)`` pairs

        Returns:
            Relevant suggestions, best first
        """
        ranked = rank_keyed(name, candidates, limit=self.config.max_suggestions)
        return filter_by_score(
            ranked,
            self.config.threshold(category),
            strict=self.config.is_strict(category),
        )

    def _emit_suggestions(
        self,
        descriptor: DiagnosticDescriptor,
        name: str,
        loc: Optional[SourceLocation],
        candidates: Iterable[tuple[str, Any]],
        formatter: Optional[PayloadFormatter],
        **message_args: str,
    ) -> Optional[Diagnostic]:
        if not self.config.is_enabled(descriptor.category):
            return None

        similar = self.suggest(descriptor.category, name, candidates)
        return self._report(descriptor, name, loc, similar, formatter, **message_args)

    def _report(
        self,
        descriptor: DiagnosticDescriptor,
        name: str,
        loc: Optional[SourceLocation],
        similar: Sequence[Any],
        formatter: Optional[PayloadFormatter],
        **message_args: str,
    ) -> Optional[Diagnostic]:
        # similar: ranked items exposing .name and .value, best first
        if not similar:
            logger.debug("No suggestions for %s '%s'", descriptor.category, name)
            return None

        render = formatter or format_any
        message = descriptor.message_format.format(
            name=name,
            suggestions=format_suggestion_list(render(s.value) for s in similar),
            **message_args,
        )

        diag = Diagnostic(
            severity=DiagnosticSeverity.ERROR,
            code=descriptor.code,
            message=message,
            location=loc,
            span=SourceSpan.from_location(loc, len(name)) if loc else None,
            suggestion=f"did you mean `{similar[0].name}`?",
            data={
                "suggestions": [s.name for s in similar],
                "kind": entity_kind(similar[0].value),
            },
        )
        return self.add(diag)

    def emit_member_not_found(
        self,
        name: str,
        type_name: str,
        loc: Optional[SourceLocation],
        members: Iterable[tuple[str, Any]],
        formatter: Optional[PayloadFormatter] = None,
    ) -> Optional[Diagnostic]:
        """
        Emit a member-not-found error listing similar members.

        Args:
            name: The member name that was not found
            type_name: The type it was looked up on
            loc: Location of the member name
            members: ``(member name, payload)`` pairs of the type
            formatter: Renders a payload into a suggestion line

        Returns:
            The created Diagnostic, or None if nothing was similar enough
        """
        return self._emit_suggestions(
            MEMBER_NOT_FOUND, name, loc, members, formatter, type_name=type_name
        )

    def emit_variable_not_found(
        self,
        name: str,
        loc: Optional[SourceLocation],
        candidates: Iterable[tuple[str, Any]],
        formatter: Optional[PayloadFormatter] = None,
    ) -> Optional[Diagnostic]:
        """
        Emit a variable-not-found error listing similar identifiers.

        The kind of the best suggestion (local, parameter, ...) is added
        as a note.
        """
        diag = self._emit_suggestions(VARIABLE_NOT_FOUND, name, loc, candidates, formatter)
        return self._note_closest_kind(diag)

    def emit_variable_not_found_in_scopes(
        self,
        name: str,
        loc: Optional[SourceLocation],
        pools: Mapping[SymbolOrigin, Iterable[tuple[str, Any]]],
        usage: UsageContext = UsageContext.UNKNOWN,
        formatter: Optional[PayloadFormatter] = None,
    ) -> Optional[Diagnostic]:
        """
        Emit a variable-not-found error from candidates grouped by scope.

        Candidates are weighed by origin and by the configured common type
        names (see ``gather_prioritized``), then limited by the
        ``variables`` threshold and ``max_suggestions``.

        Args:
            name: The identifier that was not found
            loc: Location of the identifier
            pools: ``(name, payload)`` pairs per origin
            usage: Where the identifier appeared
            formatter: Renders a payload into a suggestion line

        Returns:
            The created Diagnostic, or None if nothing was similar enough
        """
        category = VARIABLE_NOT_FOUND.category
        if not self.config.is_enabled(category):
            return None

        similar = gather_prioritized(
            name,
            pools,
            min_similarity=self.config.threshold(category),
            limit=self.config.max_suggestions,
            common_type_names=self.config.common_type_names,
            usage=usage,
        )
        if self.config.is_strict(category):
            threshold = self.config.threshold(category)
            similar = [s for s in similar if s.similarity > threshold]

        diag = self._report(VARIABLE_NOT_FOUND, name, loc, similar, formatter)
        return self._note_closest_kind(diag)

    def _note_closest_kind(self, diag: Optional[Diagnostic]) -> Optional[Diagnostic]:
        if diag is not None:
            kind = diag.data["kind"].lower()
            article = "an" if kind and kind[0] in "aeiou" else "a"
            diag.add_note(f"closest match is {article} {kind}")
        return diag

    def emit_namespace_not_found(
        self,
        name: str,
        loc: Optional[SourceLocation],
        namespaces: Iterable[str],
    ) -> Optional[Diagnostic]:
        """Emit a namespace-not-found error listing similar namespaces."""
        return self._emit_suggestions(
            NAMESPACE_NOT_FOUND,
            name,
            loc,
            ((ns, ns) for ns in namespaces),
            None,
        )

    def emit_nameof_not_found(
        self,
        name: str,
        loc: Optional[SourceLocation],
        candidates: Iterable[tuple[str, Any]],
        formatter: Optional[PayloadFormatter] = None,
    ) -> Optional[Diagnostic]:
        """Emit an error for a ``nameof`` argument that does not resolve."""
        return self._emit_suggestions(NAMEOF_NOT_FOUND, name, loc, candidates, formatter)

    def emit_named_argument_not_found(
        self,
        name: str,
        target: str,
        loc: Optional[SourceLocation],
        parameter_names: Iterable[str],
        signatures: Sequence[str],
        target_kind: str = "method",
    ) -> Optional[Diagnostic]:
        """
        Emit an error for a named argument no overload declares.

        The message lists every available signature; the parameter names
        most similar to ``name`` become the code-fix suggestions.

        Args:
            name: The argument name used at the call site
            target: The invoked method or constructor name
            loc: Location of the argument name
            parameter_names: Parameter names across all overloads
            signatures: Display signatures of all overloads
            target_kind: "method" or "constructor"

        Returns:
            The created Diagnostic, or None if the parameter exists or
            there are no signatures to show
        """
        category = NAMED_ARGUMENT_NOT_FOUND.category
        if not self.config.is_enabled(category):
            return None

        parameters = list(dict.fromkeys(p for p in parameter_names if p))
        if name in parameters or not signatures:
            return None

        similar = filter_by_score(
            rank_flat(name, parameters, limit=self.config.max_suggestions),
            self.config.threshold(category),
            strict=self.config.is_strict(category),
        )

        message = NAMED_ARGUMENT_NOT_FOUND.message_format.format(
            name=name,
            target_kind=target_kind,
            target=target,
            suggestions=format_suggestion_list(signatures),
        )

        diag = Diagnostic(
            severity=DiagnosticSeverity.ERROR,
            code=NAMED_ARGUMENT_NOT_FOUND.code,
            message=message,
            location=loc,
            span=SourceSpan.from_location(loc, len(name)) if loc else None,
            data={"suggestions": [s.name for s in similar]},
        )
        if similar:
            diag.with_suggestion(f"did you mean `{similar[0].name}`?")
        return self.add(diag)

    # =========================================================================
    # Formatting
    # =========================================================================

    def format_diagnostic(
        self,
        diag: Diagnostic,
        source_lines: Optional[list[str]] = None,
        use_color: bool = True,
    ) -> str:
        """
        Format a diagnostic like Rust's compiler output.

        Args:
            diag: The diagnostic to format
            source_lines: Source lines (uses self.source_lines if not provided)
            use_color: Whether to use ANSI color codes

        Returns:
            Formatted multi-line string
        """
        lines: list[str] = []
        src_lines = source_lines or self.source_lines

        # ANSI codes
        reset = "\033[0m" if use_color else ""
        bold = "\033[1m" if use_color else ""
        blue = "\033[94m" if use_color else ""
        green = "\033[92m" if use_color else ""
        severity_color = diag.severity.color_code() if use_color else ""

        # Header: error[NH001]: Member 'Lenght' does not exist ...
        header = (
            f"{severity_color}{bold}{diag.severity.label}[{diag.code}]{reset}: "
            f"{bold}{diag.message}{reset}"
        )
        lines.append(header)

        if diag.location:
            loc = diag.location
            filename = loc.filename or self.filename
            lines.append(f"  {blue}-->{reset} {filename}:{loc.line}:{loc.column}")

            if src_lines and 1 <= loc.line <= len(src_lines):
                lines.append(f"   {blue}|{reset}")

                source_line = src_lines[loc.line - 1]
                lines.append(f"{blue}{loc.line:3} |{reset} {source_line}")

                if diag.span:
                    col = diag.span.start_col
                    length = diag.span.length
                else:
                    col = loc.column
                    length = 1

                padding = " " * (col - 1)
                underline = "^" * length
                lines.append(f"   {blue}|{reset} {padding}{severity_color}{underline}{reset}")
                lines.append(f"   {blue}|{reset}")

        if diag.help_text:
            lines.append(f"   {blue}={reset} {green}help:{reset} {diag.help_text}")

        if diag.suggestion:
            lines.append(f"   {blue}={reset} {green}help:{reset} {diag.suggestion}")

        for note in diag.notes:
            lines.append(f"   {blue}={reset} {bold}note:{reset} {note}")

        return "\n".join(lines)

    def format_all(self, use_color: bool = True) -> str:
        """Format all diagnostics as a single string."""
        formatted: list[str] = []
        for diag in self.diagnostics:
            formatted.append(self.format_diagnostic(diag, use_color=use_color))
        return "\n\n".join(formatted)

    def has_errors(self) -> bool:
        """Check if any error diagnostics have been emitted."""
        return any(d.severity == DiagnosticSeverity.ERROR for d in self.diagnostics)

    def error_count(self) -> int:
        """Count error diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == DiagnosticSeverity.ERROR)

    def warning_count(self) -> int:
        """Count warning diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == DiagnosticSeverity.WARNING)

    def clear(self) -> None:
        """Clear all diagnostics."""
        self.diagnostics.clear()


__all__ = [
    # Core types
    "DiagnosticSeverity",
    "DiagnosticDescriptor",
    "SourceSpan",
    "Diagnostic",
    "DiagnosticEmitter",
    # Catalog
    "MEMBER_NOT_FOUND",
    "VARIABLE_NOT_FOUND",
    "NAMESPACE_NOT_FOUND",
    "NAMED_ARGUMENT_NOT_FOUND",
    "NAMEOF_NOT_FOUND",
    "DESCRIPTORS",
    "format_suggestion_list",
]
