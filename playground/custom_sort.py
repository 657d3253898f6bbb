"""Ordering strings by the parity and length of each string."""

from __future__ import annotations

from typing import Iterable, List


def _is_odd(word: str) -> bool:
    return len(word) % 2 == 1


def custom_sorting(words: Iterable[str]) -> List[str]:
    """Odd-length strings by ascending length, then even-length ones by descending length.

    Strings of equal length are ordered lexicographically.
    """
    odd = []
    even = []
    for word in words:
        (odd if _is_odd(word) else even).append(word)
    odd.sort(key=lambda w: (len(w), w))
    even.sort(key=lambda w: (-len(w), w))
    return odd + even


def custom_sorting_v2(words: Iterable[str]) -> List[str]:
    """Odd-length strings before even-length ones, each by ascending length, then lexicographically."""
    return sorted(words, key=lambda w: (not _is_odd(w), len(w), w))