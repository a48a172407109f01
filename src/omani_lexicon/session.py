"""Interactive search session and the presentation boundary.

A LexiconSession owns the loaded store, the fuzzy index and the current
SessionState. Every interaction (typing, changing a filter, "show more",
switching view, clearing) replaces the state wholesale and notifies the
registered presentation listeners.

To render results, implement the PresentationListener protocol:

    ```python
    class ConsoleView:
        def on_query_result(self, result, view):
            ...

        def on_window_change(self, window):
            ...

        def on_groups_change(self, groups):
            ...
    ```
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Protocol, Sequence, Tuple, Union

from omani_lexicon.config import EngineSettings
from omani_lexicon.core.enums import ViewMode
from omani_lexicon.core.loader import DEFAULT_DATA_FILE, load_store_json
from omani_lexicon.core.schemas import Record
from omani_lexicon.core.store import RecordStore
from omani_lexicon.core.query import (
    MatcherIndex,
    Query,
    QueryResult,
    RootGroup,
    Window,
    build_index,
    evaluate,
    group_by_root,
    reset,
    reveal_more,
)

logger = logging.getLogger(__name__)


class PresentationListener(Protocol):
    """Consumer of engine outputs (a UI, a console printer, a test spy)."""

    def on_query_result(self, result: QueryResult, view: ViewMode) -> None:
        """Called after every query evaluation."""

    def on_window_change(self, window: Window) -> None:
        """Called after the list-view window is reset or grown."""

    def on_groups_change(self, groups: Tuple[RootGroup, ...]) -> None:
        """Called after the result set is re-grouped for the root view."""


@dataclass(frozen=True)
class SessionState:
    """Snapshot of one session; never mutated, only replaced.

    Attributes:
        query: Last query evaluated (empty query at start).
        view: Active view mode.
        result: Last QueryResult, or None before any query ran.
        window: List-view window, or None outside the list view / on the
            browse prompt.
        groups: Root-view groups, or None outside the root view.
    """

    query: Query = Query()
    view: ViewMode = ViewMode.LIST
    result: Optional[QueryResult] = None
    window: Optional[Window] = None
    groups: Optional[Tuple[RootGroup, ...]] = None

    @property
    def is_browse_prompt(self) -> bool:
        return self.result is None or self.result.is_browse_prompt


class LexiconSession:
    """Drive the query engine from discrete UI events."""

    def __init__(
        self,
        store: RecordStore,
        settings: Optional[EngineSettings] = None,
        listeners: Iterable[PresentationListener] = (),
    ) -> None:
        self.store = store
        self.settings = settings or EngineSettings()
        self.index: MatcherIndex = build_index(store.records, self.settings)
        self.listeners: List[PresentationListener] = list(listeners)
        self._state = SessionState()

    @classmethod
    def from_records(
        cls,
        records: Sequence[Union[Record, Mapping[str, Any]]],
        settings: Optional[EngineSettings] = None,
        listeners: Iterable[PresentationListener] = (),
    ) -> "LexiconSession":
        return cls(RecordStore.from_records(records), settings, listeners)

    @classmethod
    def from_json(
        cls,
        path: Path = DEFAULT_DATA_FILE,
        settings: Optional[EngineSettings] = None,
        listeners: Iterable[PresentationListener] = (),
    ) -> "LexiconSession":
        """Load the dataset file and start a session; LoadError propagates."""
        return cls(load_store_json(path), settings, listeners)

    @property
    def state(self) -> SessionState:
        return self._state

    def add_listener(self, listener: PresentationListener) -> None:
        self.listeners.append(listener)

    # ------------------------------------------------------------------
    # Interactions
    # ------------------------------------------------------------------

    def search(self, query: Query) -> SessionState:
        """Evaluate ``query`` and refresh the active view from scratch."""
        result = evaluate(self.store, self.index, query)
        state = SessionState(query=query, view=self._state.view, result=result)
        self._emit_query_result(result, state.view)

        if not result.is_browse_prompt:
            if state.view is ViewMode.LIST:
                state = replace(state, window=reset(result.result_set, self.settings.page_size))
                self._emit_window(state.window)
            else:
                state = replace(state, groups=group_by_root(result.result_set))
                self._emit_groups(state.groups)

        self._state = state
        return state

    def clear(self) -> SessionState:
        """Drop text and filters, returning to the browse prompt."""
        return self.search(Query())

    def reveal_more(self, increment: Optional[int] = None) -> SessionState:
        """Show the next page in the list view; no-op without a window."""
        window = self._state.window
        if self._state.view is not ViewMode.LIST or window is None:
            logger.debug("reveal_more ignored: no active list window")
            return self._state
        grown = reveal_more(window, increment)
        if grown is window:
            return self._state
        self._state = replace(self._state, window=grown)
        self._emit_window(grown)
        return self._state

    def switch_view(self, view: Union[str, ViewMode]) -> SessionState:
        """Change view mode.

        ``root`` groups the current result set, or the whole store while the
        browse prompt is showing. ``list`` always restarts pagination.
        """
        mode = ViewMode(view)
        state = self._state
        if state.is_browse_prompt:
            records: Tuple[Record, ...] = self.store.records
        else:
            records = state.result.result_set

        if mode is ViewMode.ROOT:
            groups = group_by_root(records)
            state = replace(state, view=mode, window=None, groups=groups)
            self._state = state
            self._emit_groups(groups)
        else:
            window = None if state.is_browse_prompt else reset(records, self.settings.page_size)
            state = replace(state, view=mode, window=window, groups=None)
            self._state = state
            if window is not None:
                self._emit_window(window)
        return state

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def _emit_query_result(self, result: QueryResult, view: ViewMode) -> None:
        for listener in self.listeners:
            listener.on_query_result(result, view)

    def _emit_window(self, window: Window) -> None:
        for listener in self.listeners:
            listener.on_window_change(window)

    def _emit_groups(self, groups: Tuple[RootGroup, ...]) -> None:
        for listener in self.listeners:
            listener.on_groups_change(groups)


__all__ = ["LexiconSession", "PresentationListener", "SessionState"]
