"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class FilterField(str, Enum):
    """Record attributes that can be used as structured filters.

    Values are the record's JSON keys to ease interchange with the UI layer.
    """

    POS = "pos"
    SEM = "sem"
    DIALECT = "dialect"


class ViewMode(str, Enum):
    """Presentation modes for a result set."""

    LIST = "list"
    ROOT = "root"


__all__ = ["FilterField", "ViewMode"]
