"""Tests for the Bitap approximate pattern search."""

import pytest

from omani_lexicon.core.query.bitap import (
    MAX_BITS,
    BitapOptions,
    BitapSearcher,
    bitap_search,
    compute_score,
    mask_to_indices,
    pattern_alphabet,
)


def test_compute_score_combines_errors_and_proximity():
    assert compute_score("book", errors=1) == 0.25
    assert compute_score("book", current_location=10) == pytest.approx(0.1)
    assert compute_score("book", errors=2, current_location=5) == pytest.approx(0.55)


def test_compute_score_without_distance():
    assert compute_score("book", errors=1, distance=0) == 0.25
    assert compute_score("book", current_location=3, distance=0) == 1.0


def test_pattern_alphabet():
    assert pattern_alphabet("abca") == {"a": 0b1001, "b": 0b0100, "c": 0b0010}


def test_mask_to_indices_drops_short_runs():
    assert mask_to_indices([1, 0, 1, 1, 1, 0, 1, 1], 2) == [(2, 4), (6, 7)]
    assert mask_to_indices([1, 0, 1], 2) == []
    assert mask_to_indices([1, 0, 1], 1) == [(0, 0), (2, 2)]
    assert mask_to_indices([], 1) == []


def test_exact_value_scores_zero():
    result = BitapSearcher("Book").search_in("book")
    assert result.is_match
    assert result.score == 0.0
    assert result.indices == ((0, 3),)


def test_substring_near_start_is_penalized_by_location():
    result = BitapSearcher("book").search_in("a book")
    assert result.is_match
    assert result.score == pytest.approx(0.02)
    assert result.indices == ((2, 5),)


def test_prefix_match_gets_minimum_score():
    result = BitapSearcher("book").search_in("booking")
    assert result.is_match
    assert result.score == pytest.approx(0.001)


def test_single_typo_is_tolerated():
    result = BitapSearcher("bok").search_in("book")
    assert result.is_match
    assert result.score == pytest.approx(1 / 3)


def test_unrelated_text_does_not_match():
    assert not BitapSearcher("book").search_in("tree").is_match
    assert not BitapSearcher("book").search_in("house").is_match


def test_match_too_far_from_start_is_rejected():
    text = "x" * 60 + " book"
    assert not BitapSearcher("book").search_in(text).is_match


def test_single_character_needs_a_run_of_two():
    searcher = BitapSearcher("a")
    assert searcher.search_in("a").is_match
    assert searcher.search_in("aardvark").is_match
    assert not searcher.search_in("cat").is_match


def test_threshold_zero_only_accepts_exact_occurrence_at_location():
    options = BitapOptions(threshold=0.0)
    assert BitapSearcher("book", options).search_in("booking").is_match
    assert not BitapSearcher("bok", options).search_in("book").is_match


def test_long_patterns_are_chunked():
    pattern = "abcdefghij" * 4
    searcher = BitapSearcher(pattern)
    assert [c.start_index for c in searcher.chunks] == [0, 8]
    assert all(len(c.pattern) == MAX_BITS for c in searcher.chunks)
    assert searcher.search_in(pattern + " tail").is_match


def test_bitap_search_rejects_oversized_chunk():
    pattern = "a" * (MAX_BITS + 1)
    with pytest.raises(ValueError, match="exceeds max"):
        bitap_search("text", pattern, pattern_alphabet(pattern), BitapOptions())


def test_empty_pattern_matches_nothing():
    assert not BitapSearcher("").search_in("book").is_match
