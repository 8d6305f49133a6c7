"""
Candidate ranking for "did you mean" suggestions.

Two entry shapes share one pipeline: drop invalid candidates, score each
against the unknown name, sort by descending score and keep the top
entries. ``rank_keyed`` carries an opaque payload with every candidate;
``rank_flat`` works on bare names.

The rankers never apply a score cutoff. Callers decide what is relevant
enough to show, which is what the ``find_*`` helpers below do with the
usual 0.3 threshold.
"""

from __future__ import annotations

from typing import Generic, Iterable, NamedTuple, Optional, TypeVar

from namehint.similarity.scoring import composite_score

T = TypeVar("T")

# Number of suggestions a "did you mean" message shows
MAX_SUGGESTIONS = 5

# Practical relevance cutoff used by the diagnostic layers
MIN_SCORE = 0.3


class ScoredCandidate(NamedTuple, Generic[T]):
    """A keyed candidate with its composite score."""

    name: str
    value: T
    score: float


class ScoredName(NamedTuple):
    """A bare candidate name with its composite score."""

    name: str
    score: float


def rank_keyed(
    unknown: Optional[str],
    candidates: Optional[Iterable[tuple[str, T]]],
    limit: int = MAX_SUGGESTIONS,
) -> list[ScoredCandidate[T]]:
    """
    Rank ``(key, value)`` candidates by similarity of their key to a name.

    Pairs with an empty key are skipped, and so is a key equal to the
    unknown name: the literal name is not a suggestion for itself.
    Duplicate keys are allowed and ranked independently.

    Args:
        unknown: The unresolved name
        candidates: Pairs of search key and opaque payload
        limit: Maximum number of results (default 5; negative means none)

    Returns:
        Up to ``limit`` scored candidates, best first
    """
    if not unknown or not candidates:
        return []

    scored = [
        ScoredCandidate(key, value, composite_score(unknown, key))
        for key, value in candidates
        if key and key != unknown
    ]
    scored.sort(key=lambda item: item.score, reverse=True)
    return scored[:max(0, limit)]


def rank_flat(
    unknown: Optional[str],
    candidates: Optional[Iterable[Optional[str]]],
    limit: int = MAX_SUGGESTIONS,
) -> list[ScoredName]:
    """
    Rank plain candidate names by similarity to a name.

    ``None`` and empty entries are skipped.

    Args:
        unknown: The unresolved name
        candidates: Candidate names
        limit: Maximum number of results (default 5; negative means none)

    Returns:
        Up to ``limit`` scored names, best first
    """
    if not unknown or not candidates:
        return []

    scored = [
        ScoredName(name, composite_score(unknown, name))
        for name in candidates
        if name
    ]
    scored.sort(key=lambda item: item.score, reverse=True)
    return scored[:max(0, limit)]


R = TypeVar("R", ScoredCandidate, ScoredName)


def filter_by_score(results: Iterable[R], min_score: float, strict: bool = False) -> list[R]:
    """
    Keep ranked results that reach a caller threshold.

    Args:
        results: Ranked results
        min_score: The threshold
        strict: Require ``score > min_score`` instead of ``>=``
    """
    if strict:
        return [item for item in results if item.score > min_score]
    return [item for item in results if item.score >= min_score]


def find_similar_symbols(
    query: Optional[str],
    entries: Optional[Iterable[tuple[str, T]]],
    min_score: float = MIN_SCORE,
    limit: int = MAX_SUGGESTIONS,
    strict: bool = False,
) -> list[ScoredCandidate[T]]:
    """
    Find keyed candidates similar enough to a name to suggest.

    Ranked results are sorted, so the candidates reaching ``min_score``
    always form a prefix of the ranking and truncating first is safe.

    Example:
        >>> entries = [("firstName", 1), ("lastName", 2), ("zip", 3)]
        >>> [c.name for c in find_similar_symbols("frstName", entries)]
        ['firstName', 'lastName']
    """
    return filter_by_score(rank_keyed(query, entries, limit), min_score, strict)


def find_similar_names(
    query: Optional[str],
    names: Optional[Iterable[Optional[str]]],
    min_score: float = MIN_SCORE,
    limit: int = MAX_SUGGESTIONS,
    strict: bool = False,
) -> list[ScoredName]:
    """
    Find candidate names similar enough to a name to suggest.

    Args:
        query: The unresolved name
        names: Candidate names (``None`` entries are skipped)
        min_score: Minimum composite score (default 0.3)
        limit: Maximum number of suggestions (default 5)
        strict: Require ``score > min_score`` instead of ``>=``

    Returns:
        Similar names, best first
    """
    return filter_by_score(rank_flat(query, names, limit), min_score, strict)


def find_best_match(
    query: Optional[str],
    names: Optional[Iterable[Optional[str]]],
    min_score: float = MIN_SCORE,
) -> Optional[str]:
    """
    Find the single best matching name.

    Returns:
        The best match or None if no name is close enough
    """
    similar = find_similar_names(query, names, min_score, limit=1)
    return similar[0].name if similar else None


__all__ = [
    "MAX_SUGGESTIONS",
    "MIN_SCORE",
    "ScoredCandidate",
    "ScoredName",
    "rank_keyed",
    "rank_flat",
    "filter_by_score",
    "find_similar_symbols",
    "find_similar_names",
    "find_best_match",
]
