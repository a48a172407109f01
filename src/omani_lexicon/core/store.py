"""Write-once in-memory record store.

The store owns every Record. It is filled exactly once by the loader and only
read afterwards; vocabularies for the filter dropdowns are derived from it on
demand.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import polars as pl

from .enums import FilterField
from .errors import InvalidFilterError, LoadError
from .schemas import RECORD_FIELDS, Record

logger = logging.getLogger(__name__)


def coerce_filter_field(field: Union[str, FilterField]) -> FilterField:
    """Return the FilterField for ``field`` or raise InvalidFilterError."""
    try:
        return FilterField(field)
    except ValueError as e:
        allowed = ", ".join(f.value for f in FilterField)
        raise InvalidFilterError(f"Unknown filter field: {field!r} (expected one of: {allowed})") from e


class RecordStore:
    """Ordered, immutable collection of lexicon records."""

    def __init__(self) -> None:
        self._records: Tuple[Record, ...] = ()
        self._loaded = False
        self._frame: Optional[pl.DataFrame] = None

    def load(self, records: Sequence[Union[Record, Mapping[str, Any]]]) -> None:
        """Fill the store once.

        Raises:
            LoadError: If ``records`` is not a sequence of mappings, or if the
                store has already been loaded.
        """
        if self._loaded:
            raise LoadError("Record store is already loaded; reloading is not supported")
        if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Sequence):
            raise LoadError(f"Expected a sequence of records, got {type(records).__name__}")

        out: List[Record] = []
        for i, item in enumerate(records):
            if isinstance(item, Record):
                out.append(item)
            elif isinstance(item, Mapping):
                out.append(Record.from_mapping(item))
            else:
                raise LoadError(f"Record {i} is not an object: {type(item).__name__}")

        self._records = tuple(out)
        self._loaded = True
        logger.info("Loaded %d lexicon entries", len(self._records))

    @classmethod
    def from_records(cls, records: Sequence[Union[Record, Mapping[str, Any]]]) -> "RecordStore":
        store = cls()
        store.load(records)
        return store

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def to_frame(self) -> pl.DataFrame:
        """Return the records as a string-typed polars DataFrame (cached)."""
        if self._frame is None:
            schema = {key: pl.Utf8 for key in RECORD_FIELDS}
            rows = [{key: r.get(key) for key in RECORD_FIELDS} for r in self._records]
            self._frame = pl.DataFrame(rows, schema=schema)
        return self._frame

    def _trimmed_values(self, field: FilterField) -> pl.LazyFrame:
        col = pl.col(field.value).str.strip_chars()
        return (
            self.to_frame()
            .lazy()
            .select(col)
            .filter(col.is_not_null() & (col != ""))
        )

    def vocabulary(self, field: Union[str, FilterField]) -> List[str]:
        """Sorted distinct non-blank trimmed values of a filter field.

        Examples:
            >>> store = RecordStore.from_records([{"pos": " noun"}, {"pos": "verb"}, {}])
            >>> store.vocabulary("pos")
            ['noun', 'verb']
        """
        ff = coerce_filter_field(field)
        values = self._trimmed_values(ff).unique().collect()[ff.value].to_list()
        return sorted(values)

    def vocabulary_counts(self, field: Union[str, FilterField]) -> List[Dict[str, Any]]:
        """Distinct trimmed values with record counts, most frequent first."""
        ff = coerce_filter_field(field)
        return (
            self._trimmed_values(ff)
            .group_by(ff.value)
            .agg(pl.len().alias("count"))
            .sort(["count", ff.value], descending=[True, False])
            .collect()
            .to_dicts()
        )


__all__ = ["RecordStore", "coerce_filter_field"]
