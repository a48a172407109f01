"""Display fallbacks and result summaries for presentation layers.

Nothing here produces markup; these helpers return the plain strings a UI
shows so that every front end degrades the same way on incomplete records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from omani_lexicon.core.enums import ViewMode
from omani_lexicon.core.schemas import Record, is_blank
from omani_lexicon.core.query import QueryResult, RootGroup, Window, has_more, next_batch_size, remaining

HEADWORD_FALLBACK = "N/A"
DEFINITION_FALLBACK = "No definition available"
PREVIEW_FALLBACK = "No definition"
MISSING_ROOT_BADGE = "Missing root"
MISSING_ROOT_TITLE = "Missing Root Data"
PREVIEW_LENGTH = 150

# (json key, label) in display order
DETAIL_LABELS: Tuple[Tuple[str, str], ...] = (
    ("ref", "Reference"),
    ("etym", "Etymology"),
    ("phon", "Phonology"),
    ("measure", "Measure"),
    ("src", "Source"),
    ("pg", "Page"),
    ("id", "ID"),
)


@dataclass(frozen=True)
class Badge:
    kind: str  # "root" | "missing" | "pos" | "sem" | "dialect"
    text: str


def pluralize_entries(count: int) -> str:
    return "entry" if count == 1 else "entries"


def headword(record: Record) -> str:
    return record.lex or HEADWORD_FALLBACK


def definition(record: Record) -> str:
    return record.definition or DEFINITION_FALLBACK


def definition_preview(record: Record, limit: int = PREVIEW_LENGTH) -> str:
    """Definition truncated to ``limit`` characters for the root view."""
    text = record.definition
    if not text:
        return PREVIEW_FALLBACK
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def badges(record: Record) -> List[Badge]:
    """Root (or missing-root) badge first, then pos, sem and dialect."""
    out: List[Badge] = []
    if is_blank(record.root):
        out.append(Badge("missing", MISSING_ROOT_BADGE))
    else:
        out.append(Badge("root", f"Root: {record.root}"))
    for key in ("pos", "sem", "dialect"):
        value = record.get(key)
        if not is_blank(value):
            out.append(Badge(key, value))
    return out


def details(record: Record) -> List[Tuple[str, str]]:
    """``(label, value)`` rows for the expandable details section."""
    return [(label, record.get(key)) for key, label in DETAIL_LABELS if record.get(key)]


def browse_summary(total_entries: int) -> str:
    return f"{total_entries} entries loaded. Start typing to search."


def list_summary(window: Window) -> str:
    if has_more(window):
        return f"Showing first {window.revealed} of {window.total} {pluralize_entries(window.total)}"
    return f"Showing {window.total} {pluralize_entries(window.total)}"


def root_summary(result: QueryResult) -> str:
    return f"Showing {len(result)} entries organized by root"


def show_more_label(window: Window) -> str:
    """Label for the "show more" button; empty when nothing is left."""
    if not has_more(window):
        return ""
    return f"Show {next_batch_size(window)} more ({remaining(window)} remaining)"


def group_title(group: RootGroup) -> str:
    return MISSING_ROOT_TITLE if group.missing else group.key


def group_count(group: RootGroup) -> str:
    return f"({len(group)} {pluralize_entries(len(group))})"


def result_summary(
    result: QueryResult, view: ViewMode, store_size: int, window: Optional[Window] = None
) -> str:
    """Status line for the current result.

    The list view needs the current window; without one the full result is
    described.
    """
    if result.is_browse_prompt:
        return browse_summary(store_size)
    if ViewMode(view) is ViewMode.ROOT:
        return root_summary(result)
    if window is None:
        return f"Showing {len(result)} {pluralize_entries(len(result))}"
    return list_summary(window)


__all__ = [
    "Badge",
    "DETAIL_LABELS",
    "badges",
    "browse_summary",
    "definition",
    "definition_preview",
    "details",
    "group_count",
    "group_title",
    "headword",
    "list_summary",
    "pluralize_entries",
    "result_summary",
    "root_summary",
    "show_more_label",
]
