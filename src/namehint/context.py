"""
Contextual prioritization of suggestions.

When candidates come from several scopes, a name declared next to the
unresolved identifier is a better guess than an equally similar name from
an external library. This module weighs composite similarity by where a
candidate came from and returns one merged, deduplicated ranking.

Example:
    pools = {
        SymbolOrigin.LOCAL_SCOPE: [("count", local_symbol)],
        SymbolOrigin.EXTERNAL_LIBRARY: [("Counter", "collections.Counter")],
    }
    for suggestion in gather_prioritized("cont", pools):
        print(suggestion.name, suggestion.final_score)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from namehint.formatting import SymbolInfo, SymbolKind
from namehint.similarity.ranking import MAX_SUGGESTIONS, MIN_SCORE
from namehint.similarity.scoring import composite_score

# Similarity at which well-known type names get an extra boost
HIGH_SIMILARITY_THRESHOLD = 0.8
COMMON_TYPE_BONUS = 0.25

DEFAULT_COMMON_TYPE_NAMES: frozenset[str] = frozenset(
    {
        "Dictionary",
        "List",
        "Array",
        "String",
        "StringBuilder",
        "HashSet",
        "Queue",
        "Stack",
        "ConcurrentDictionary",
        "IEnumerable",
        "ICollection",
        "IList",
        "IDictionary",
        "Task",
        "DateTime",
        "TimeSpan",
        "Guid",
    }
)


class SymbolOrigin(Enum):
    """Where a candidate symbol was found, nearest scope first."""

    LOCAL_SCOPE = "local"
    CURRENT_CLASS = "class"
    CURRENT_PROJECT = "project"
    EXTERNAL_LIBRARY = "library"

    @property
    def bonus(self) -> float:
        """Get the score bonus for candidates of this origin."""
        bonuses = {
            SymbolOrigin.LOCAL_SCOPE: 0.3,
            SymbolOrigin.CURRENT_CLASS: 0.2,
            SymbolOrigin.CURRENT_PROJECT: 0.1,
            SymbolOrigin.EXTERNAL_LIBRARY: 0.0,
        }
        return bonuses[self]


def short_type_name(name: str) -> str:
    """
    Get the simple name of a qualified, possibly generic, type name.

    Example:
        >>> short_type_name("System.Collections.Generic.List<System.String>")
        'List'
        >>> short_type_name("System.Collections.Generic.Dictionary`2")
        'Dictionary'
    """
    cut = min((i for i in (name.find("<"), name.find("`")) if i >= 0), default=len(name))
    return name[:cut].rsplit(".", 1)[-1]


class UsageContext(Enum):
    """The syntactic position an unresolved name appeared in."""

    UNKNOWN = "unknown"
    TYPE = "type"
    VALUE = "value"
    ATTRIBUTE = "attribute"
    NAMESPACE = "namespace"


_VALUE_KINDS = frozenset(
    {
        SymbolKind.METHOD,
        SymbolKind.FIELD,
        SymbolKind.PROPERTY,
        SymbolKind.LOCAL,
        SymbolKind.PARAMETER,
        SymbolKind.TYPE,
    }
)


def _fits_usage(value: Any, usage: UsageContext) -> bool:
    if usage is UsageContext.UNKNOWN:
        return True

    if isinstance(value, str):
        if usage is UsageContext.ATTRIBUTE:
            return "Attribute" in value
        if usage is UsageContext.NAMESPACE:
            return "." in value
        return True

    if isinstance(value, SymbolInfo):
        if usage is UsageContext.TYPE:
            return value.kind is SymbolKind.TYPE
        if usage is UsageContext.ATTRIBUTE:
            return value.kind is SymbolKind.TYPE and "Attribute" in value.name
        if usage is UsageContext.NAMESPACE:
            return value.kind is SymbolKind.NAMESPACE
        return value.kind in _VALUE_KINDS

    return False


def filter_by_usage(
    entries: Optional[Iterable[tuple[str, Any]]],
    usage: UsageContext,
) -> list[tuple[str, Any]]:
    """
    Keep the candidates whose payload can appear where the name was used.

    Plain string payloads are treated as type names: they fit type and
    value positions, attribute positions when they contain "Attribute",
    and namespace positions when they are dotted. Payloads that are
    neither strings nor ``SymbolInfo`` only survive ``UsageContext.UNKNOWN``.

    Args:
        entries: ``(key, payload)`` pairs
        usage: Where the unresolved name appeared

    Returns:
        The fitting pairs, in their original order
    """
    return [(name, value) for name, value in entries or () if _fits_usage(value, usage)]


@dataclass(frozen=True, slots=True)
class PrioritizedSuggestion:
    """
    A suggestion weighed by the scope it came from.

    Attributes:
        name: The candidate key that was scored
        value: The caller's opaque payload
        similarity: Composite similarity of ``name`` to the query
        origin: Where the candidate was found
        common_type_names: Names that earn the common-type bonus
    """

    name: str
    value: Any
    similarity: float
    origin: SymbolOrigin
    common_type_names: frozenset[str] = DEFAULT_COMMON_TYPE_NAMES

    @property
    def common_type_bonus(self) -> float:
        """Get the bonus for a highly similar, widely used type name."""
        if self.similarity < HIGH_SIMILARITY_THRESHOLD:
            return 0.0
        if short_type_name(self.name) in self.common_type_names:
            return COMMON_TYPE_BONUS
        return 0.0

    @property
    def final_score(self) -> float:
        """Get the similarity plus origin and common-type bonuses."""
        return self.similarity + self.origin.bonus + self.common_type_bonus


def gather_prioritized(
    query: Optional[str],
    pools: Mapping[SymbolOrigin, Iterable[tuple[str, Any]]],
    min_similarity: float = MIN_SCORE,
    limit: int = MAX_SUGGESTIONS,
    common_type_names: Optional[Iterable[str]] = None,
    key: Optional[Callable[[PrioritizedSuggestion], str]] = None,
    usage: UsageContext = UsageContext.UNKNOWN,
) -> list[PrioritizedSuggestion]:
    """
    Merge candidates from several scopes into one ranked suggestion list.

    Args:
        query: The unresolved name
        pools: Candidate ``(key, payload)`` pairs per origin
        min_similarity: Minimum composite similarity, before bonuses
        limit: Maximum number of suggestions
        common_type_names: Override for the common-type bonus set
        key: Identity used to deduplicate the same symbol seen from
            several scopes (defaults to the candidate name)
        usage: Where the name appeared; candidates that cannot appear
            there are dropped before scoring

    Returns:
        Suggestions sorted by final score, then similarity, best first
    """
    if not query or not pools:
        return []

    type_names = (
        frozenset(common_type_names)
        if common_type_names is not None
        else DEFAULT_COMMON_TYPE_NAMES
    )
    identity = key or (lambda suggestion: suggestion.name)

    best: dict[str, PrioritizedSuggestion] = {}
    for origin, entries in pools.items():
        for name, value in filter_by_usage(entries, usage):
            if not name or name == query:
                continue
            similarity = composite_score(query, name)
            if similarity < min_similarity:
                continue
            suggestion = PrioritizedSuggestion(name, value, similarity, origin, type_names)
            ident = identity(suggestion)
            current = best.get(ident)
            if current is None or suggestion.final_score > current.final_score:
                best[ident] = suggestion

    ranked = sorted(
        best.values(),
        key=lambda s: (s.final_score, s.similarity),
        reverse=True,
    )
    return ranked[:max(0, limit)]


__all__ = [
    "HIGH_SIMILARITY_THRESHOLD",
    "COMMON_TYPE_BONUS",
    "DEFAULT_COMMON_TYPE_NAMES",
    "SymbolOrigin",
    "UsageContext",
    "PrioritizedSuggestion",
    "short_type_name",
    "filter_by_usage",
    "gather_prioritized",
]
