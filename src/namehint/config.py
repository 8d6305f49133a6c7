"""
Configuration for suggestion diagnostics.

Settings are read from the ``[suggestions]`` table of a ``namehint.toml``
file:

    [suggestions]
    max_suggestions = 5
    disabled = ["nameof"]
    strict = ["members"]
    common_type_names = ["List", "Dictionary"]

    [suggestions.thresholds]
    members = 0.3
    variables = 0.35

The ranking engine does not read configuration; the diagnostic layer
applies these thresholds on top of the ranked scores.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from namehint.context import DEFAULT_COMMON_TYPE_NAMES
from namehint.similarity.ranking import MAX_SUGGESTIONS, MIN_SCORE
from namehint.utils.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "namehint.toml"

# Diagnostic categories, one per kind of unresolved name
CATEGORIES: tuple[str, ...] = (
    "members",
    "variables",
    "namespaces",
    "named_arguments",
    "nameof",
)


def _default_thresholds() -> dict[str, float]:
    return {category: MIN_SCORE for category in CATEGORIES}


@dataclass
class SuggestionConfig:
    """
    Settings for the suggestion diagnostics.

    Example:
        config = SuggestionConfig()
        config.set_threshold("variables", 0.4)
        config.disable("nameof")
    """

    max_suggestions: int = MAX_SUGGESTIONS
    thresholds: dict[str, float] = field(default_factory=_default_thresholds)
    strict_categories: set[str] = field(default_factory=set)
    enabled: set[str] = field(default_factory=lambda: set(CATEGORIES))
    common_type_names: frozenset[str] = DEFAULT_COMMON_TYPE_NAMES

    def threshold(self, category: str) -> float:
        """Get the minimum score for a category."""
        return self.thresholds.get(category, MIN_SCORE)

    def is_strict(self, category: str) -> bool:
        """Check whether a category requires scores strictly above its threshold."""
        return category in self.strict_categories

    def is_enabled(self, category: str) -> bool:
        """Check whether a category produces diagnostics."""
        return category in self.enabled

    def set_threshold(self, category: str, value: float) -> None:
        """Set the minimum score for a category."""
        _check_category(category)
        if value < 0:
            raise ConfigError(f"threshold for '{category}' must not be negative")
        self.thresholds[category] = float(value)

    def enable(self, category: str) -> None:
        """Turn a category on."""
        _check_category(category)
        self.enabled.add(category)

    def disable(self, category: str) -> None:
        """Turn a category off."""
        _check_category(category)
        self.enabled.discard(category)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SuggestionConfig":
        """
        Build a configuration from a parsed ``[suggestions]`` table.

        Raises:
            ConfigError: If a value has the wrong type or a category is unknown
        """
        config = cls()

        if "max_suggestions" in data:
            value = data["max_suggestions"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigError("max_suggestions must be a positive integer")
            config.max_suggestions = value

        thresholds = data.get("thresholds", {})
        if not isinstance(thresholds, Mapping):
            raise ConfigError("thresholds must be a table")
        for category, value in thresholds.items():
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ConfigError(f"threshold for '{category}' must be a number")
            config.set_threshold(category, value)

        for category in _string_list(data, "disabled"):
            config.disable(category)

        if "strict" in data:
            strict = _string_list(data, "strict")
            for category in strict:
                _check_category(category)
            config.strict_categories = set(strict)

        if "common_type_names" in data:
            config.common_type_names = frozenset(_string_list(data, "common_type_names"))

        return config


def _check_category(category: str) -> None:
    if category not in CATEGORIES:
        known = ", ".join(CATEGORIES)
        raise ConfigError(f"unknown suggestion category '{category}' (expected one of: {known})")


def _string_list(data: Mapping[str, Any], key: str) -> list[str]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key} must be a list of strings")
    return value


def find_config(start: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """
    Find the nearest ``namehint.toml`` in ``start`` or its parents.

    Returns:
        The path, or None if no configuration file exists
    """
    directory = Path(start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Optional[Union[str, Path]] = None) -> SuggestionConfig:
    """
    Load suggestion settings from a TOML file.

    Args:
        path: Configuration file; when None the nearest ``namehint.toml``
            is used, and defaults apply if there is none

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings
    """
    config_path = Path(path) if path is not None else find_config()
    if config_path is None:
        logger.debug("No %s found, using default settings", CONFIG_FILENAME)
        return SuggestionConfig()

    try:
        with config_path.open("rb") as f:
            document = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read configuration: {e.strerror or e}", config_path) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML: {e}", config_path) from e

    table = document.get("suggestions", {})
    if not isinstance(table, dict):
        raise ConfigError("[suggestions] must be a table", config_path)

    try:
        config = SuggestionConfig.from_mapping(table)
    except ConfigError as e:
        raise ConfigError(e.message, config_path) from e

    logger.debug("Loaded suggestion settings from %s", config_path)
    return config


__all__ = [
    "CONFIG_FILENAME",
    "CATEGORIES",
    "SuggestionConfig",
    "find_config",
    "load_config",
]
