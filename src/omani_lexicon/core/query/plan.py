from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, List, Mapping, Optional, Tuple

from omani_lexicon.core.enums import FilterField
from omani_lexicon.core.schemas import Record, is_rootless
from omani_lexicon.core.store import RecordStore, coerce_filter_field
from .matcher import MatcherIndex, search

logger = logging.getLogger(__name__)

MISSING_ROOT_FILTER = "missing_root_only"

Predicate = Callable[[Record], bool]


@dataclass(frozen=True)
class Query:
    """Free text plus optional structured filters.

    Blank filter values count as unset, like an empty dropdown selection.
    """

    text: str = ""
    pos: Optional[str] = None
    sem: Optional[str] = None
    dialect: Optional[str] = None
    missing_root_only: bool = False

    @property
    def search_text(self) -> str:
        return (self.text or "").strip()

    def active_filters(self) -> List[Tuple[FilterField, str]]:
        out: List[Tuple[FilterField, str]] = []
        for ff in FilterField:
            value = getattr(self, ff.value)
            if value:
                out.append((ff, value))
        return out

    def has_filters(self) -> bool:
        return bool(self.active_filters()) or self.missing_root_only

    @property
    def is_empty(self) -> bool:
        """True when there is neither search text nor any active filter."""
        return not self.search_text and not self.has_filters()

    def with_filters(self, **filters: Any) -> "Query":
        """Return a copy with filters replaced; unknown keys raise InvalidFilterError."""
        changes: dict = {}
        for key, value in filters.items():
            if key == MISSING_ROOT_FILTER:
                changes[key] = bool(value)
            else:
                changes[coerce_filter_field(key).value] = value
        return replace(self, **changes)


@dataclass(frozen=True)
class QueryResult:
    result_set: Tuple[Record, ...]
    is_browse_prompt: bool

    def __len__(self) -> int:
        return len(self.result_set)


BROWSE_PROMPT = QueryResult(result_set=(), is_browse_prompt=True)


def build_query(text: str = "", filters: Optional[Mapping[str, Any]] = None) -> Query:
    """Construct a Query from text and a ``{field: value}`` filter mapping.

    Raises:
        InvalidFilterError: If a key is not pos, sem, dialect or missing_root_only.
    """
    return Query(text=text).with_filters(**dict(filters or {}))


def _filter_predicates(query: Query) -> List[Predicate]:
    predicates: List[Predicate] = []
    for ff, expected in query.active_filters():
        # Exact, untrimmed comparison against the raw record value
        predicates.append(lambda r, name=ff.value, want=expected: r.get(name) == want)
    if query.missing_root_only:
        predicates.append(is_rootless)
    return predicates


def evaluate(store: RecordStore, index: MatcherIndex, query: Query) -> QueryResult:
    """Evaluate ``query`` against the store.

    1. Empty query -> browse prompt, no records.
    2. Non-blank text -> fuzzy matches in rank order; otherwise the whole
       store in store order.
    3. Filters are ANDed over those candidates, keeping their order.
    """
    if query.is_empty:
        return BROWSE_PROMPT

    text = query.search_text
    if text:
        candidates = search(index, text)
    else:
        candidates = store.records

    predicates = _filter_predicates(query)
    if predicates:
        filtered = tuple(r for r in candidates if all(p(r) for p in predicates))
    else:
        filtered = tuple(candidates)

    logger.debug(
        "Query text=%r filters=%s: %d candidates, %d results",
        text,
        [f"{ff.value}={v}" for ff, v in query.active_filters()],
        len(candidates),
        len(filtered),
    )
    return QueryResult(result_set=filtered, is_browse_prompt=False)


__all__ = [
    "BROWSE_PROMPT",
    "MISSING_ROOT_FILTER",
    "Query",
    "QueryResult",
    "build_query",
    "evaluate",
]
