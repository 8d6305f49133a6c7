"""
Error types and source location tracking for namehint.

The similarity engine itself never raises; these errors belong to the
layers around it (configuration loading, candidate files, the CLI).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """
    Represents a location in the source code of an unresolved name.

    Attributes:
        line: 1-indexed line number
        column: 1-indexed column number
        offset: 0-indexed offset from start of source
        filename: Optional filename for error reporting
    """

    line: int
    column: int
    offset: int = 0
    filename: Optional[str] = None

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


class NameHintError(Exception):
    """Base exception for all namehint errors."""

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
    ) -> None:
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location:
            return f"[{self.location}] {self.message}"
        return self.message


class ConfigError(NameHintError):
    """
    Raised when a namehint configuration cannot be loaded.

    This error is raised when:
    - The configuration file cannot be read or is not valid TOML
    - A threshold is not a non-negative number
    - An unknown suggestion category is referenced
    """

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
    ) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    def _format_message(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class CandidateFileError(NameHintError):
    """Raised when a candidate list file cannot be read."""

    def __init__(self, message: str, path: Union[str, Path]) -> None:
        self.path = Path(path)
        super().__init__(message)

    def _format_message(self) -> str:
        return f"{self.path}: {self.message}"
