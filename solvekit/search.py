"""Binary-search problems on sorted data and numeric ranges."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from typing import Sequence


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of ``target`` in a sorted list, or ``[-1, -1]``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a sorted list, or where it would be inserted."""
    return bisect_left(nums, target)


def _can_place(positions: Sequence[int], distance: int, balls: int) -> bool:
    placed = 1
    last = positions[0]
    for position in positions[1:]:
        if position - last >= distance:
            placed += 1
            last = position
        if placed >= balls:
            return True
    return False


def max_distance(position: Sequence[int], m: int) -> int:
    """Largest minimum gap achievable when placing ``m`` balls in the baskets."""
    if m < 2:
        raise ValueError("m must be at least 2")
    if not position:
        raise ValueError("position must not be empty")
    ordered = sorted(position)
    low, high = 1, (ordered[-1] - ordered[0]) // (m - 1)
    best = 1
    while low <= high:
        mid = (low + high) // 2
        if _can_place(ordered, mid, m):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def special_array(nums: Sequence[int]) -> int:
    """The ``x`` with exactly ``x`` values ``>= x``, or -1 if there is none."""
    ordered = sorted(nums)
    n = len(ordered)
    for candidate in range(1, n + 1):
        if n - bisect_left(ordered, candidate) == candidate:
            return candidate
    return -1


def judge_square_sum(c: int) -> bool:
    """Tell whether ``c`` is the sum of two squares of non-negative integers."""
    if c < 0:
        raise ValueError("c must not be negative")
    left, right = 0, math.isqrt(c)
    while left <= right:
        total = left * left + right * right
        if total == c:
            return True
        if total > c:
            right -= 1
        else:
            left += 1
    return False