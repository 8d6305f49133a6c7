"""
Identifier normalization and tokenization.

Both functions accept ``None`` and never raise. They prepare identifiers
for comparison: ``normalize`` produces a case- and separator-insensitive
form for character-level similarity, ``split_identifier`` produces the
word tokens used for token-overlap bonuses.
"""

from __future__ import annotations

import re
from typing import Optional

# Split before every ASCII capital, and at underscores, whitespace and digits.
_SPLIT_PATTERN = re.compile(r"(?=[A-Z])|[_\s\d]")

_SEPARATOR_PATTERN = re.compile(r"[_\s]")


def normalize(text: Optional[str]) -> str:
    """
    Normalize an identifier for similarity comparison.

    Lowercases the text and removes every underscore and whitespace
    character. Other punctuation is kept.

    Example:
        >>> normalize("Hello_World")
        'helloworld'
        >>> normalize(None)
        ''
    """
    if not text:
        return ""
    return _SEPARATOR_PATTERN.sub("", text.lower())


def split_identifier(text: Optional[str]) -> list[str]:
    """
    Split an identifier into lowercase word tokens.

    Boundaries are camel-case humps (each capital starts a new token),
    underscores, whitespace and digits. Digits never appear in the result.

    Example:
        >>> split_identifier("XMLHttpRequest")
        ['x', 'm', 'l', 'http', 'request']
        >>> split_identifier("get123Users456")
        ['get', 'users']
    """
    if not text:
        return []
    return [part.lower() for part in _SPLIT_PATTERN.split(text) if part]


__all__ = [
    "normalize",
    "split_identifier",
]
