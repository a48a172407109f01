"""Search engine configuration constants.

This module centralizes fuzzy-matching tolerances and pagination sizes.
Adjust these constants, or override them from a YAML file, to tune search
behaviour on a given dataset.

YAML layout:
    search:
      threshold: 0.4
      min_match_char_length: 2
      distance: 100
      location: 0
      field_weights:
        lex: 2
        lex_arb: 2
        root: 1.5
        def: 1
    pagination:
      page_size: 100
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

import yaml

from omani_lexicon.core.schemas import RECORD_FIELDS

# ============================================================================
# FUZZY MATCH CONSTANTS
# ============================================================================

# Acceptance threshold: 0.0 requires an exact match, 1.0 matches anything
DEFAULT_THRESHOLD = 0.4

# Shortest run of matched characters that counts as a hit
DEFAULT_MIN_MATCH_CHAR_LENGTH = 2

# How far from the expected location a match may drift before it is rejected
DEFAULT_DISTANCE = 100
DEFAULT_LOCATION = 0

# Searched fields and their relative weights (JSON keys)
DEFAULT_FIELD_WEIGHTS: Tuple[Tuple[str, float], ...] = (
    ("lex", 2.0),
    ("lex_arb", 2.0),
    ("root", 1.5),
    ("def", 1.0),
)


# ============================================================================
# PAGINATION CONSTANTS
# ============================================================================

DEFAULT_PAGE_SIZE = 100


@dataclass(frozen=True)
class EngineSettings:
    """Tunable knobs for the matcher and the pagination controller.

    Attributes:
        threshold: Maximum accepted match score (0.0 - 1.0).
        min_match_char_length: Minimum run of matched characters.
        distance: Divisor for the location penalty; 0 disables drift.
        location: Expected position of a match inside a field value.
        field_weights: ``(json_key, weight)`` pairs for the searched fields.
        page_size: Initial window size and "show more" increment.
    """

    threshold: float = DEFAULT_THRESHOLD
    min_match_char_length: int = DEFAULT_MIN_MATCH_CHAR_LENGTH
    distance: int = DEFAULT_DISTANCE
    location: int = DEFAULT_LOCATION
    field_weights: Tuple[Tuple[str, float], ...] = field(
        default_factory=lambda: DEFAULT_FIELD_WEIGHTS
    )
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"Invalid threshold: {self.threshold}. Must be within [0, 1].")
        if self.min_match_char_length < 1:
            raise ValueError("min_match_char_length must be >= 1")
        if self.distance < 0 or self.location < 0:
            raise ValueError("distance and location must be non-negative")
        if self.page_size < 1:
            raise ValueError(f"Invalid page_size: {self.page_size}. Must be >= 1.")
        if not self.field_weights:
            raise ValueError("field_weights must name at least one field")
        for key, weight in self.field_weights:
            if key not in RECORD_FIELDS:
                raise ValueError(f"Unknown search field: {key}")
            if weight <= 0:
                raise ValueError(f"Weight for '{key}' must be positive, got {weight}")


def _section(data: Mapping[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Section '{name}' must be a mapping")
    return value


def settings_from_mapping(data: Mapping[str, Any]) -> EngineSettings:
    """Build settings from a parsed YAML/JSON mapping; missing keys keep defaults."""
    search = _section(data, "search")
    pagination = _section(data, "pagination")
    kwargs: Dict[str, Any] = {}
    try:
        if "threshold" in search:
            kwargs["threshold"] = float(search["threshold"])
        if "min_match_char_length" in search:
            kwargs["min_match_char_length"] = int(search["min_match_char_length"])
        if "distance" in search:
            kwargs["distance"] = int(search["distance"])
        if "location" in search:
            kwargs["location"] = int(search["location"])
        if "field_weights" in search:
            weights = search["field_weights"] or {}
            if not isinstance(weights, dict):
                raise ValueError("search.field_weights must be a mapping")
            kwargs["field_weights"] = tuple((str(k), float(v)) for k, v in weights.items())
        if "page_size" in pagination:
            kwargs["page_size"] = int(pagination["page_size"])
    except TypeError as e:
        raise ValueError(f"Invalid settings value: {e}") from e
    return EngineSettings(**kwargs)


def load_settings(config_file: Path) -> EngineSettings:
    """Load engine settings from a YAML file.

    Raises:
        FileNotFoundError: If ``config_file`` does not exist.
        ValueError: If the YAML is malformed or a value is out of range.
    """
    if not config_file.exists():
        raise FileNotFoundError(f"Settings file not found: {config_file}")
    try:
        with config_file.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_file}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {config_file}")
    return settings_from_mapping(data)


__all__ = [
    "DEFAULT_DISTANCE",
    "DEFAULT_FIELD_WEIGHTS",
    "DEFAULT_LOCATION",
    "DEFAULT_MIN_MATCH_CHAR_LENGTH",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_THRESHOLD",
    "EngineSettings",
    "load_settings",
    "settings_from_mapping",
]
