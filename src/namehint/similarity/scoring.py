"""
Composite relevance score for "did you mean" suggestions.

The composite score starts from Jaro-Winkler similarity of the normalized
names and adds bonuses for an exact normalized match, substring
containment and shared word tokens, minus a small penalty for candidates
longer than the query. The result is a ranking metric, not a probability:
it is not clamped and regularly exceeds 1.0 for strong matches.

Example:
    >>> composite_score("", "")
    1.5
    >>> composite_score("firstName", "firstname") > 1.0
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from namehint.similarity.jaro import jaro_winkler
from namehint.similarity.normalize import normalize, split_identifier

EXACT_MATCH_BONUS = 0.3
CONTAINMENT_BONUS = 0.2
TOKEN_EQUAL_BONUS = 0.2
TOKEN_PREFIX_BONUS = 0.1
MULTI_TOKEN_BONUS = 0.2
MULTI_TOKEN_MIN_MATCHES = 2
LENGTH_PENALTY_PER_CHAR = 0.01


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """
    The individual terms of a composite score.

    Attributes:
        base: Jaro-Winkler similarity of the normalized names
        exact: Exact normalized match bonus
        containment: Substring containment bonus
        tokens: Token overlap bonus
        length_penalty: Penalty for extra candidate characters
    """

    base: float
    exact: float
    containment: float
    tokens: float
    length_penalty: float

    @property
    def total(self) -> float:
        """Get the composite score these terms add up to."""
        return self.base + self.exact + self.containment + self.tokens - self.length_penalty


def exact_match_bonus(norm_unknown: str, norm_candidate: str) -> float:
    """Get the bonus for two equal normalized names."""
    return EXACT_MATCH_BONUS if norm_unknown == norm_candidate else 0.0


def containment_bonus(norm_unknown: str, norm_candidate: str) -> float:
    """Get the bonus for one normalized name containing the other."""
    if norm_unknown in norm_candidate or norm_candidate in norm_unknown:
        return CONTAINMENT_BONUS
    return 0.0


def token_bonus(unknown: str, candidate: str) -> float:
    """
    Get the bonus for word tokens shared by two raw identifiers.

    Every pair of distinct tokens is compared: an equal pair adds 0.2, a
    pair where one token is a prefix of the other adds 0.1. Once two or
    more pairs have matched, a further 0.2 is added.
    """
    # dict.fromkeys keeps first-seen order so the float sum is reproducible
    query_tokens = dict.fromkeys(split_identifier(unknown))
    candidate_tokens = dict.fromkeys(split_identifier(candidate))

    bonus = 0.0
    matched = 0
    for tq in query_tokens:
        for tc in candidate_tokens:
            if tq == tc:
                bonus += TOKEN_EQUAL_BONUS
                matched += 1
            elif tq.startswith(tc) or tc.startswith(tq):
                bonus += TOKEN_PREFIX_BONUS
                matched += 1

    if matched >= MULTI_TOKEN_MIN_MATCHES:
        bonus += MULTI_TOKEN_BONUS

    return bonus


def length_penalty(unknown: str, candidate: str) -> float:
    """Get the penalty for each character the candidate has beyond the query."""
    return max(0, len(candidate) - len(unknown)) * LENGTH_PENALTY_PER_CHAR


def score_breakdown(unknown: Optional[str], candidate: Optional[str]) -> ScoreBreakdown:
    """
    Compute every term of the composite score.

    Args:
        unknown: The unresolved name (``None`` is treated as empty)
        candidate: The candidate name (``None`` is treated as empty)

    Returns:
        The score terms; ``breakdown.total`` is the composite score
    """
    unknown = unknown or ""
    candidate = candidate or ""

    norm_unknown = normalize(unknown)
    norm_candidate = normalize(candidate)

    return ScoreBreakdown(
        base=jaro_winkler(norm_unknown, norm_candidate),
        exact=exact_match_bonus(norm_unknown, norm_candidate),
        containment=containment_bonus(norm_unknown, norm_candidate),
        tokens=token_bonus(unknown, candidate),
        length_penalty=length_penalty(unknown, candidate),
    )


def composite_score(unknown: Optional[str], candidate: Optional[str]) -> float:
    """
    Compute the composite relevance score of a candidate for an unknown name.

    Higher is better. Exact normalized matches score at least 1.3 before
    token bonuses; unrelated names usually land below 0.5.
    """
    return score_breakdown(unknown, candidate).total


__all__ = [
    "EXACT_MATCH_BONUS",
    "CONTAINMENT_BONUS",
    "TOKEN_EQUAL_BONUS",
    "TOKEN_PREFIX_BONUS",
    "MULTI_TOKEN_BONUS",
    "LENGTH_PENALTY_PER_CHAR",
    "ScoreBreakdown",
    "exact_match_bonus",
    "containment_bonus",
    "token_bonus",
    "length_penalty",
    "score_breakdown",
    "composite_score",
]
