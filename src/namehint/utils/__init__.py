"""
namehint Utilities Package.

Common utilities for error handling and source locations.
"""

from namehint.utils.errors import (
    CandidateFileError,
    ConfigError,
    NameHintError,
    SourceLocation,
)

__all__ = [
    "NameHintError",
    "ConfigError",
    "CandidateFileError",
    "SourceLocation",
]
