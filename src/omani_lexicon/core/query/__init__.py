"""Core query engine public API.

Exposes the functions used by the session layer. Implementations live in
sibling modules: fuzzy matching (bitap, matcher), query evaluation (plan),
list pagination (pagination) and root grouping (grouping).
"""

from .matcher import MatcherIndex, build_index, search
from .plan import BROWSE_PROMPT, Query, QueryResult, build_query, evaluate
from .pagination import Window, has_more, next_batch_size, remaining, reset, reveal_more, visible
from .grouping import MISSING_ROOT_KEY, RootGroup, group_by_root

__all__ = [
    "MatcherIndex",
    "build_index",
    "search",
    "BROWSE_PROMPT",
    "Query",
    "QueryResult",
    "build_query",
    "evaluate",
    "Window",
    "has_more",
    "next_batch_size",
    "remaining",
    "reset",
    "reveal_more",
    "visible",
    "MISSING_ROOT_KEY",
    "RootGroup",
    "group_by_root",
]
