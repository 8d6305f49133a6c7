"""
namehint - "Did you mean ...?" suggestions for unresolved identifiers.

namehint ranks candidate names against an unresolved identifier using
Jaro-Winkler similarity with exact-match, containment and token-overlap
bonuses, and turns the best matches into compiler-style diagnostics.
"""

from namehint.similarity import (
    composite_score,
    jaro,
    jaro_winkler,
    normalize,
    rank_flat,
    rank_keyed,
    split_identifier,
)

__version__ = "0.1.0"
__all__ = [
    "normalize",
    "split_identifier",
    "jaro",
    "jaro_winkler",
    "composite_score",
    "rank_keyed",
    "rank_flat",
]
