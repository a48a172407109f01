"""Tests for the "show N more" pagination window."""

from dataclasses import FrozenInstanceError

import pytest

from omani_lexicon.core.query import has_more, next_batch_size, remaining, reset, reveal_more, visible
from omani_lexicon.core.query.pagination import Window
from omani_lexicon.core.schemas import Record


@pytest.fixture
def records_250():
    return tuple(Record(lex=f"word{i}") for i in range(250))


def test_pages_through_250_records(records_250):
    window = reset(records_250, 100)
    assert len(visible(window)) == 100
    assert has_more(window)
    assert next_batch_size(window) == 100

    window = reveal_more(window, 100)
    assert len(visible(window)) == 200
    assert has_more(window)
    assert remaining(window) == 50
    assert next_batch_size(window) == 50

    window = reveal_more(window, 100)
    assert len(visible(window)) == 250
    assert not has_more(window)
    assert visible(window) == records_250


def test_reveal_more_defaults_to_page_size(records_250):
    window = reveal_more(reset(records_250, 30))
    assert window.revealed == 60
    assert window.page_size == 30


@pytest.mark.parametrize("n,m,size", [(100, 100, 250), (10, 5, 12), (5, 50, 3), (1, 1, 0)])
def test_visible_length_is_clamped(n, m, size):
    records = [Record(lex=str(i)) for i in range(size)]
    window = reveal_more(reset(records, n), m)
    assert len(visible(window)) == min(n + m, size)


def test_reveal_more_when_fully_revealed_is_a_no_op(records_250):
    full = reveal_more(reveal_more(reset(records_250, 100)))
    full = reveal_more(full)
    assert reveal_more(full) is full
    assert reveal_more(reveal_more(full, 7), 1000) == full
    assert full.revealed == 250


def test_visible_preserves_order():
    records = [Record(lex=c) for c in "cab"]
    assert [r.lex for r in visible(reset(records, 2))] == ["c", "a"]


def test_windows_are_immutable(records_250):
    first = reset(records_250, 100)
    second = reveal_more(first)
    assert first.revealed == 100
    assert second.revealed == 200
    with pytest.raises(FrozenInstanceError):
        first.revealed = 5


def test_empty_result_set():
    window = reset([], 100)
    assert visible(window) == ()
    assert not has_more(window)
    assert next_batch_size(window) == 0


@pytest.mark.parametrize("bad", [0, -1])
def test_non_positive_sizes_rejected(records_250, bad):
    with pytest.raises(ValueError):
        reset(records_250, bad)
    with pytest.raises(ValueError):
        reveal_more(reset(records_250), bad)


def test_window_validates_revealed():
    with pytest.raises(ValueError, match="outside"):
        Window(full_set=(Record(),), revealed=2)
