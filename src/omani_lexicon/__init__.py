"""Omani Lexicon Search: in-memory query engine for lexicon data.

Fuzzy text search combined with structured filters, incremental pagination,
and grouping by root over a write-once record store. Rendering is left to
presentation listeners (see ``omani_lexicon.session``).
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
