"""Subset, partition and backtracking problems."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import chain, combinations
from operator import xor
from typing import Iterable, Iterator, Sequence

MAX_WORD_LENGTH = 10


def max_score_words(
    words: Sequence[str], letters: Iterable[str], score: Sequence[int]
) -> int:
    """Best total score of a set of words spelled from ``letters``, each used once.

    ``score[i]`` is the value of the i-th lower-case letter.
    """
    available = Counter(letters)
    word_scores = [sum(score[ord(ch) - ord("a")] for ch in word) for word in words]
    indices = range(len(words))
    best = 0
    for chosen in chain.from_iterable(
        combinations(indices, size) for size in range(1, len(words) + 1)
    ):
        needed: Counter[str] = Counter()
        for index in chosen:
            needed.update(words[index])
        if needed <= available:
            best = max(best, sum(word_scores[index] for index in chosen))
    return best


def subset_xor_sum(nums: Sequence[int]) -> int:
    """Sum over every subset of the XOR of its members."""
    return sum(
        reduce(xor, subset, 0)
        for size in range(len(nums) + 1)
        for subset in combinations(nums, size)
    )


def beautiful_subsets(nums: Sequence[int], k: int) -> int:
    """Count non-empty subsets in which no two members differ by exactly ``k``."""
    chosen: Counter[int] = Counter()

    def explore(index: int) -> int:
        if index == len(nums):
            return 1
        value = nums[index]
        count = 0
        if chosen[value - k] == 0 and chosen[value + k] == 0:
            chosen[value] += 1
            count += explore(index + 1)
            chosen[value] -= 1
        return count + explore(index + 1)

    return explore(0) - 1


def count_triplets(arr: Sequence[int]) -> int:
    """Count ``(i, j, k)``, ``i < j <= k``, where ``arr[i:j]`` and ``arr[j:k+1]``
    have the same XOR."""
    prefix = [0]
    for value in arr:
        prefix.append(prefix[-1] ^ value)
    return sum(
        k - i for i, k in combinations(range(len(arr)), 2) if prefix[i] == prefix[k + 1]
    )


def word_break(s: str, word_dict: Iterable[str]) -> list[str]:
    """Every way to split ``s`` into dictionary words, joined by single spaces.

    Words longer than ``MAX_WORD_LENGTH`` are never used.
    """
    words = set(word_dict)

    def splits(start: int) -> Iterator[tuple[str, ...]]:
        if start >= len(s):
            yield ()
            return
        for end in range(start + 1, min(start + MAX_WORD_LENGTH, len(s)) + 1):
            piece = s[start:end]
            if piece in words:
                for rest in splits(end):
                    yield (piece, *rest)

    return [" ".join(parts) for parts in splits(0)]