"""
namehint Similarity Package.

The fuzzy-identifier similarity and suggestion-ranking engine:
- normalize: Normalization and identifier tokenization
- jaro: Jaro and Jaro-Winkler similarity
- scoring: Composite relevance score
- ranking: Keyed and flat candidate rankers, caller-side thresholds

Every function here is pure and safe to call from many threads at once.
"""

from namehint.similarity.jaro import jaro, jaro_winkler
from namehint.similarity.normalize import normalize, split_identifier
from namehint.similarity.ranking import (
    MAX_SUGGESTIONS,
    MIN_SCORE,
    ScoredCandidate,
    ScoredName,
    filter_by_score,
    find_best_match,
    find_similar_names,
    find_similar_symbols,
    rank_flat,
    rank_keyed,
)
from namehint.similarity.scoring import ScoreBreakdown, composite_score, score_breakdown

__all__ = [
    # Normalizer and tokenizer
    "normalize",
    "split_identifier",
    # Edit-distance core
    "jaro",
    "jaro_winkler",
    # Composite scorer
    "ScoreBreakdown",
    "composite_score",
    "score_breakdown",
    # Ranker
    "MAX_SUGGESTIONS",
    "MIN_SCORE",
    "ScoredCandidate",
    "ScoredName",
    "rank_keyed",
    "rank_flat",
    # Caller-side thresholds
    "filter_by_score",
    "find_similar_symbols",
    "find_similar_names",
    "find_best_match",
]
