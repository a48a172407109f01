"""Bitap approximate pattern search for typo-tolerant matching.

A field value matches a pattern when some position in the value can be
reached with few enough errors (insertions, deletions, substitutions) and
close enough to the expected location. The score is::

    errors / len(pattern) + |location - expected_location| / distance

and a match is accepted when the score is within the threshold. Lower is
better; a value equal to the pattern scores 0.

Matching is case-insensitive. Patterns longer than MAX_BITS characters are
split into chunks that are searched independently and averaged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

MAX_BITS = 32

# Floor for non-exact matches so they never tie with an exact one
MIN_SCORE = 0.001


@dataclass(frozen=True)
class BitapOptions:
    threshold: float = 0.4
    distance: int = 100
    location: int = 0
    min_match_char_length: int = 2


@dataclass(frozen=True)
class BitapResult:
    is_match: bool
    score: float
    indices: Tuple[Tuple[int, int], ...] = ()


@dataclass(frozen=True)
class _Chunk:
    pattern: str
    alphabet: Dict[str, int]
    start_index: int


def compute_score(
    pattern: str,
    *,
    errors: int = 0,
    current_location: int = 0,
    expected_location: int = 0,
    distance: int = 100,
) -> float:
    accuracy = errors / len(pattern)
    proximity = abs(expected_location - current_location)
    if not distance:
        return 1.0 if proximity else accuracy
    return accuracy + proximity / distance


def pattern_alphabet(pattern: str) -> Dict[str, int]:
    """Bit mask per character; bit ``len - i - 1`` is set for position ``i``."""
    mask: Dict[str, int] = {}
    length = len(pattern)
    for i, ch in enumerate(pattern):
        mask[ch] = mask.get(ch, 0) | (1 << (length - i - 1))
    return mask


def mask_to_indices(match_mask: List[int], min_match_char_length: int) -> List[Tuple[int, int]]:
    """Collapse a per-character match mask into ``(start, end)`` runs.

    Runs shorter than ``min_match_char_length`` are dropped.

    Examples:
        >>> mask_to_indices([0, 1, 1, 0, 1], 2)
        [(1, 2)]
    """
    indices: List[Tuple[int, int]] = []
    start = -1
    for i, matched in enumerate(match_mask):
        if matched and start == -1:
            start = i
        elif not matched and start != -1:
            if i - start >= min_match_char_length:
                indices.append((start, i - 1))
            start = -1
    if match_mask and match_mask[-1] and start != -1 and len(match_mask) - start >= min_match_char_length:
        indices.append((start, len(match_mask) - 1))
    return indices


def bitap_search(
    text: str, pattern: str, alphabet: Dict[str, int], options: BitapOptions
) -> BitapResult:
    """Search one pattern chunk (at most MAX_BITS characters) in ``text``."""
    if len(pattern) > MAX_BITS:
        raise ValueError(f"Pattern length exceeds max of {MAX_BITS}")

    pattern_len = len(pattern)
    text_len = len(text)
    distance = options.distance
    expected_location = max(0, min(options.location, text_len))
    current_threshold = options.threshold
    best_location = expected_location
    match_mask = [0] * text_len

    # Exact occurrences first; they tighten the threshold for the bitap pass.
    index = text.find(pattern, best_location)
    while index > -1:
        score = compute_score(
            pattern,
            current_location=index,
            expected_location=expected_location,
            distance=distance,
        )
        current_threshold = min(score, current_threshold)
        best_location = index + pattern_len
        for k in range(index, index + pattern_len):
            match_mask[k] = 1
        index = text.find(pattern, best_location)

    best_location = -1
    last_bits: Dict[int, int] = {}
    final_score = 1.0
    bin_max = pattern_len + text_len
    mask = 1 << (pattern_len - 1)

    for i in range(pattern_len):
        # Widest window around the expected location still within threshold
        bin_min = 0
        bin_mid = bin_max
        while bin_min < bin_mid:
            score = compute_score(
                pattern,
                errors=i,
                current_location=expected_location + bin_mid,
                expected_location=expected_location,
                distance=distance,
            )
            if score <= current_threshold:
                bin_min = bin_mid
            else:
                bin_max = bin_mid
            bin_mid = (bin_max - bin_min) // 2 + bin_min

        bin_max = bin_mid
        start = max(1, expected_location - bin_mid + 1)
        finish = min(expected_location + bin_mid, text_len) + pattern_len

        bits: Dict[int, int] = {finish + 1: (1 << i) - 1}
        j = finish
        while j >= start:
            current_location = j - 1
            char_match = alphabet.get(text[current_location], 0) if current_location < text_len else 0
            if current_location < text_len:
                match_mask[current_location] = 1 if char_match else 0

            bits[j] = ((bits[j + 1] << 1) | 1) & char_match
            if i:
                bits[j] |= (
                    ((last_bits.get(j + 1, 0) | last_bits.get(j, 0)) << 1)
                    | 1
                    | last_bits.get(j + 1, 0)
                )

            if bits[j] & mask:
                final_score = compute_score(
                    pattern,
                    errors=i,
                    current_location=current_location,
                    expected_location=expected_location,
                    distance=distance,
                )
                if final_score <= current_threshold:
                    current_threshold = final_score
                    best_location = current_location
                    if best_location <= expected_location:
                        break
                    start = max(1, 2 * expected_location - best_location)
            j -= 1

        # One more error can no longer beat the current best
        score = compute_score(
            pattern,
            errors=i + 1,
            current_location=expected_location,
            expected_location=expected_location,
            distance=distance,
        )
        if score > current_threshold:
            break
        last_bits = bits

    indices = mask_to_indices(match_mask, options.min_match_char_length)
    return BitapResult(
        is_match=best_location >= 0 and bool(indices),
        score=max(MIN_SCORE, final_score),
        indices=tuple(indices),
    )


class BitapSearcher:
    """Case-insensitive approximate searcher for a single query string."""

    def __init__(self, pattern: str, options: BitapOptions = BitapOptions()) -> None:
        self.pattern = pattern.lower()
        self.options = options
        self.chunks: List[_Chunk] = []
        if not self.pattern:
            return

        length = len(self.pattern)
        if length > MAX_BITS:
            remainder = length % MAX_BITS
            end = length - remainder
            for i in range(0, end, MAX_BITS):
                self._add_chunk(self.pattern[i : i + MAX_BITS], i)
            if remainder:
                start_index = length - MAX_BITS
                self._add_chunk(self.pattern[start_index:], start_index)
        else:
            self._add_chunk(self.pattern, 0)

    def _add_chunk(self, pattern: str, start_index: int) -> None:
        self.chunks.append(_Chunk(pattern, pattern_alphabet(pattern), start_index))

    def search_in(self, text: str) -> BitapResult:
        text = text.lower()
        if self.pattern == text:
            return BitapResult(is_match=True, score=0.0, indices=((0, len(text) - 1),))
        if not self.chunks:
            return BitapResult(is_match=False, score=1.0)

        all_indices: List[Tuple[int, int]] = []
        total_score = 0.0
        has_matches = False
        for chunk in self.chunks:
            chunk_options = BitapOptions(
                threshold=self.options.threshold,
                distance=self.options.distance,
                location=self.options.location + chunk.start_index,
                min_match_char_length=self.options.min_match_char_length,
            )
            result = bitap_search(text, chunk.pattern, chunk.alphabet, chunk_options)
            if result.is_match:
                has_matches = True
                all_indices.extend(result.indices)
            total_score += result.score

        if not has_matches:
            return BitapResult(is_match=False, score=1.0)
        return BitapResult(
            is_match=True,
            score=total_score / len(self.chunks),
            indices=tuple(all_indices),
        )


__all__ = [
    "MAX_BITS",
    "BitapOptions",
    "BitapResult",
    "BitapSearcher",
    "bitap_search",
    "compute_score",
    "mask_to_indices",
    "pattern_alphabet",
]
