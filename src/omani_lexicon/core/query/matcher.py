"""Weighted fuzzy index over the searchable record fields.

The index is built once per store. A record matches a query when at least one
of its indexed fields matches; its score combines the per-field Bitap scores
with the normalized field weights and a field-length norm, so short exact
headword hits rank above long definitions that merely contain the query.
"""

from __future__ import annotations

import logging
import math
import re
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from omani_lexicon.config import EngineSettings
from omani_lexicon.core.schemas import Record, is_blank
from .bitap import BitapOptions, BitapSearcher

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"[^ ]+")


@dataclass(frozen=True)
class WeightedKey:
    name: str  # JSON key, e.g. "def"
    weight: float  # normalized, all keys sum to 1


@dataclass(frozen=True)
class IndexedValue:
    text: str
    norm: float


@dataclass(frozen=True)
class IndexedRecord:
    position: int
    record: Record
    values: Tuple[Optional[IndexedValue], ...]  # aligned with MatcherIndex.keys


@dataclass(frozen=True)
class MatcherIndex:
    keys: Tuple[WeightedKey, ...]
    entries: Tuple[IndexedRecord, ...]
    options: BitapOptions


@dataclass(frozen=True)
class ScoredRecord:
    position: int
    record: Record
    score: float
    matched_keys: Tuple[str, ...]


def field_norm(value: str) -> float:
    """Length norm ``1 / sqrt(token_count)`` rounded to 3 decimals.

    Examples:
        >>> field_norm("book"), field_norm("a small book")
        (1.0, 0.577)
    """
    tokens = len(_TOKEN_RE.findall(value))
    return round(1 / math.sqrt(max(tokens, 1)), 3)


def normalize_weights(field_weights: Iterable[Tuple[str, float]]) -> Tuple[WeightedKey, ...]:
    pairs = list(field_weights)
    total = sum(weight for _, weight in pairs)
    return tuple(WeightedKey(name, weight / total) for name, weight in pairs)


def build_index(records: Iterable[Record], settings: Optional[EngineSettings] = None) -> MatcherIndex:
    """Index the weighted text fields of every record, in store order."""
    settings = settings or EngineSettings()
    keys = normalize_weights(settings.field_weights)
    entries: List[IndexedRecord] = []
    for position, record in enumerate(records):
        values: List[Optional[IndexedValue]] = []
        for key in keys:
            raw = record.get(key.name)
            if is_blank(raw):
                values.append(None)
            else:
                values.append(IndexedValue(text=raw, norm=field_norm(raw)))
        entries.append(IndexedRecord(position=position, record=record, values=tuple(values)))

    options = BitapOptions(
        threshold=settings.threshold,
        distance=settings.distance,
        location=settings.location,
        min_match_char_length=settings.min_match_char_length,
    )
    logger.info("Built fuzzy index over %d records (%d fields)", len(entries), len(keys))
    return MatcherIndex(keys=keys, entries=tuple(entries), options=options)


def search_scored(index: MatcherIndex, text: str) -> List[ScoredRecord]:
    """Return every matching record with its combined score, best first."""
    searcher = BitapSearcher(text, index.options)
    results: List[ScoredRecord] = []
    for entry in index.entries:
        total = 1.0
        matched: List[str] = []
        for key, value in zip(index.keys, entry.values):
            if value is None:
                continue
            result = searcher.search_in(value.text)
            if not result.is_match:
                continue
            base = sys.float_info.epsilon if result.score == 0 else result.score
            total *= base ** (key.weight * value.norm)
            matched.append(key.name)
        if matched:
            results.append(
                ScoredRecord(
                    position=entry.position,
                    record=entry.record,
                    score=total,
                    matched_keys=tuple(matched),
                )
            )
    results.sort(key=lambda r: (r.score, r.position))
    return results


def search(index: MatcherIndex, text: str) -> Tuple[Record, ...]:
    """Records approximately matching ``text``, best match first.

    Ties keep store order. The text is used as given; callers trim it.
    """
    return tuple(r.record for r in search_scored(index, text))


__all__ = [
    "IndexedRecord",
    "IndexedValue",
    "MatcherIndex",
    "ScoredRecord",
    "WeightedKey",
    "build_index",
    "field_norm",
    "normalize_weights",
    "search",
    "search_scored",
]
