"""Record schema and field definitions for lexicon data.

This module defines the fields of a dictionary entry as they appear in the
JSON dataset, and the single blank/rootless predicate shared by filtering,
grouping and display.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

# JSON keys in dataset order. "def" is stored on the attribute "definition".
RECORD_FIELDS: Tuple[str, ...] = (
    "lex",
    "lex_arb",
    "root",
    "def",
    "pos",
    "sem",
    "dialect",
    "ref",
    "etym",
    "phon",
    "measure",
    "src",
    "pg",
    "id",
)

_ATTRIBUTE_FOR_KEY: Dict[str, str] = {"def": "definition"}


def attribute_name(key: str) -> str:
    """Map a JSON key to the Record attribute that stores it."""
    return _ATTRIBUTE_FOR_KEY.get(key, key)


def is_blank(value: Optional[str]) -> bool:
    """Return True when ``value`` is absent or only whitespace.

    Examples:
        >>> is_blank(None), is_blank("  "), is_blank(" ktb ")
        (True, True, False)
    """
    return value is None or not str(value).strip()


@dataclass(frozen=True)
class Record:
    """A single lexicon entry.

    Every attribute is optional. Keys that are not part of the schema are kept
    in ``extras`` and ignored by the engine.
    """

    lex: Optional[str] = None
    lex_arb: Optional[str] = None
    root: Optional[str] = None
    definition: Optional[str] = None
    pos: Optional[str] = None
    sem: Optional[str] = None
    dialect: Optional[str] = None
    ref: Optional[str] = None
    etym: Optional[str] = None
    phon: Optional[str] = None
    measure: Optional[str] = None
    src: Optional[str] = None
    pg: Optional[str] = None
    id: Optional[str] = None
    extras: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Record":
        """Build a Record from a JSON object.

        Non-string scalars (e.g. numeric page or id) are converted to ``str``;
        ``None`` stays absent.
        """
        values: Dict[str, Optional[str]] = {}
        extras: Dict[str, Any] = {}
        for key, value in data.items():
            if key in RECORD_FIELDS:
                values[attribute_name(key)] = None if value is None else str(value)
            else:
                extras[key] = value
        return cls(**values, extras=extras)

    def get(self, key: str) -> Optional[str]:
        """Return a field by its JSON key (``"def"`` included)."""
        if key not in RECORD_FIELDS:
            raise KeyError(key)
        return getattr(self, attribute_name(key))

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-shaped mapping, omitting absent fields."""
        out: Dict[str, Any] = {}
        for key in RECORD_FIELDS:
            value = self.get(key)
            if value is not None:
                out[key] = value
        out.update(self.extras)
        return out

    @property
    def root_key(self) -> Optional[str]:
        """Trimmed root, or None for rootless records."""
        if is_blank(self.root):
            return None
        return str(self.root).strip()


def is_rootless(record: Record) -> bool:
    """Shared rootless predicate: root absent or blank after trimming."""
    return is_blank(record.root)


__all__ = [
    "RECORD_FIELDS",
    "Record",
    "attribute_name",
    "is_blank",
    "is_rootless",
]
