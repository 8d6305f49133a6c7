"""
Jaro and Jaro-Winkler string similarity.

Both metrics return a value in [0, 1] where 1.0 means identical. They are
the character-level base of the composite suggestion score: Jaro counts
characters that match within a sliding window, and Jaro-Winkler adds a
bonus for a shared prefix, which suits identifiers where the start of a
name is usually typed correctly.

The Jaro base comes from rapidfuzz. The Winkler step is applied here for
every prefix length, without the 0.7 boost threshold that
``rapidfuzz.distance.JaroWinkler`` uses.

Example:
    >>> round(jaro("hello", "hallo"), 4)
    0.8667
    >>> round(jaro_winkler("martha", "marhta"), 4)
    0.9611
"""

from __future__ import annotations

from typing import Optional

from rapidfuzz.distance import Jaro

# Jaro-Winkler prefix scaling, and the longest prefix that earns a bonus.
PREFIX_SCALE = 0.1
MAX_PREFIX = 4


def jaro(s1: Optional[str], s2: Optional[str]) -> float:
    """
    Compute the Jaro similarity between two strings.

    Matching characters must lie within ``max(len) // 2 - 1`` positions of
    each other; half the out-of-order matches (rounded down) count as
    transpositions.

    Args:
        s1: First string (``None`` is treated as empty)
        s2: Second string (``None`` is treated as empty)

    Returns:
        Similarity in [0, 1]; 1.0 for equal strings, including two empty
        strings, and 0.0 when exactly one string is empty
    """
    s1 = s1 or ""
    s2 = s2 or ""

    if s1 == s2:
        return 1.0
    if not s1 or not s2:
        return 0.0

    return Jaro.similarity(s1, s2)


def common_prefix_length(s1: str, s2: str, limit: int = MAX_PREFIX) -> int:
    """Get the length of the shared prefix, capped at ``limit``."""
    prefix = 0
    for a, b in zip(s1[:limit], s2[:limit]):
        if a != b:
            break
        prefix += 1
    return prefix


def jaro_winkler(s1: Optional[str], s2: Optional[str]) -> float:
    """
    Compute the Jaro-Winkler similarity between two strings.

    The Jaro score is raised by ``prefix * 0.1 * (1 - jaro)`` where
    ``prefix`` is the common prefix length, at most 4. The result is never
    below the plain Jaro score.
    """
    s1 = s1 or ""
    s2 = s2 or ""

    similarity = jaro(s1, s2)
    prefix = common_prefix_length(s1, s2)
    return similarity + prefix * PREFIX_SCALE * (1 - similarity)


__all__ = [
    "PREFIX_SCALE",
    "MAX_PREFIX",
    "jaro",
    "common_prefix_length",
    "jaro_winkler",
]
