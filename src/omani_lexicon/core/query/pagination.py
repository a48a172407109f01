"""Growable window over an ordered result set ("show N more").

Windows are values: every operation returns a new Window. A new search or
filter change must start from ``reset``; ``reveal_more`` only ever extends the
window it is given.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from omani_lexicon.config import DEFAULT_PAGE_SIZE
from omani_lexicon.core.schemas import Record


@dataclass(frozen=True)
class Window:
    full_set: Tuple[Record, ...]
    revealed: int
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"Invalid page_size: {self.page_size}. Must be >= 1.")
        if not 0 <= self.revealed <= len(self.full_set):
            raise ValueError(
                f"revealed={self.revealed} outside [0, {len(self.full_set)}]"
            )

    @property
    def total(self) -> int:
        return len(self.full_set)


def reset(result_set: Sequence[Record], page_size: int = DEFAULT_PAGE_SIZE) -> Window:
    """Start a window showing the first ``page_size`` records."""
    records = tuple(result_set)
    if page_size < 1:
        raise ValueError(f"Invalid page_size: {page_size}. Must be >= 1.")
    return Window(full_set=records, revealed=min(page_size, len(records)), page_size=page_size)


def reveal_more(window: Window, increment: Optional[int] = None) -> Window:
    """Grow the window by ``increment`` (default: its page size), clamped.

    Calling on a fully revealed window returns it unchanged.
    """
    step = window.page_size if increment is None else increment
    if step < 1:
        raise ValueError(f"Invalid increment: {step}. Must be >= 1.")
    revealed = min(window.revealed + step, window.total)
    if revealed == window.revealed:
        return window
    return Window(full_set=window.full_set, revealed=revealed, page_size=window.page_size)


def visible(window: Window) -> Tuple[Record, ...]:
    return window.full_set[: window.revealed]


def has_more(window: Window) -> bool:
    return window.revealed < window.total


def remaining(window: Window) -> int:
    return window.total - window.revealed


def next_batch_size(window: Window) -> int:
    """How many records the next ``reveal_more`` would add."""
    return min(remaining(window), window.page_size)


__all__ = [
    "Window",
    "has_more",
    "next_batch_size",
    "remaining",
    "reset",
    "reveal_more",
    "visible",
]
