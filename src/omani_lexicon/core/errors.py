"""Error taxonomy for the lexicon engine.

Zero results is not an error; only a broken dataset or a caller passing an
unknown filter raise.
"""

from __future__ import annotations


class LexiconError(ValueError):
    """Base class for lexicon engine errors."""


class LoadError(LexiconError):
    """Dataset is missing or malformed, or the store was loaded twice.

    Fatal for the session; callers show an "error loading data" state and do
    not retry.
    """


class InvalidFilterError(LexiconError):
    """A caller passed a filter key the engine does not know."""


__all__ = ["LexiconError", "LoadError", "InvalidFilterError"]
