"""Problems on integer arrays: sums, counting, rearranging and scheduling."""

from __future__ import annotations

import heapq
from collections import Counter
from itertools import accumulate
from typing import MutableSequence, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[i, j]`` with ``i < j`` and ``nums[i] + nums[j] == target``.

    The pair found first while scanning left to right wins; ``[-1, -1]`` means
    there is none.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        needed = target - value
        if needed in seen:
            return [seen[needed], index]
        seen[value] = index
    return [-1, -1]


def height_checker(heights: Sequence[int]) -> int:
    """Count positions where ``heights`` differs from its sorted order."""
    return sum(a != b for a, b in zip(heights, sorted(heights)))


def three_consecutive_odds(arr: Sequence[int]) -> bool:
    """Tell whether three odd numbers stand next to each other."""
    run = 0
    for value in arr:
        if value % 2:
            run += 1
            if run == 3:
                return True
        else:
            run = 0
    return False


def number_of_subarrays(nums: Sequence[int], k: int) -> int:
    """Count contiguous subarrays holding exactly ``k`` odd numbers."""
    prefix_counts: Counter[int] = Counter({0: 1})
    odds = 0
    result = 0
    for value in nums:
        odds += value & 1
        if odds - k >= 0:
            result += prefix_counts[odds - k]
        prefix_counts[odds] += 1
    return result


def majority_element(nums: Sequence[int]) -> int:
    """Return the first value seen more than ``len(nums) // 2`` times, else -1."""
    counts = Counter(nums)
    half = len(nums) // 2
    for value in nums:
        if counts[value] > half:
            return value
    return -1


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    n = len(nums)
    if n == 0:
        return
    shift = k % n
    if shift:
        nums[:] = list(nums[-shift:]) + list(nums[:-shift])


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Move the distinct values of a sorted list to its front; return how many.

    Items past the returned count are left as they were.
    """
    count = 0
    for value in list(nums):
        if count == 0 or value != nums[count - 1]:
            nums[count] = value
            count += 1
    return count


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` into the next lexicographic permutation, in place.

    The last permutation wraps round to the first (ascending order).
    """
    n = len(nums)
    pivot = next((i for i in range(n - 2, -1, -1) if nums[i] < nums[i + 1]), -1)
    if pivot == -1:
        nums.reverse()
        return
    swap = next(i for i in range(n - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1:] = reversed(nums[pivot + 1:])


def intersect(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Return the multiset intersection of two lists, in ascending order."""
    common = Counter(nums1) & Counter(nums2)
    return sorted(common.elements())


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    left, right = 0, len(height) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        if height[left] < height[right]:
            left_max = max(left_max, height[left])
            water += left_max - height[left]
            left += 1
        else:
            right_max = max(right_max, height[right])
            water += right_max - height[right]
            right -= 1
    return water


def find_maximized_capital(
    k: int, w: int, profits: Sequence[int], capital: Sequence[int]
) -> int:
    """Final capital after greedily finishing at most ``k`` affordable projects."""
    projects = sorted(zip(capital, profits))
    available: list[int] = []
    position = 0
    for _ in range(k):
        while position < len(projects) and projects[position][0] <= w:
            heapq.heappush(available, -projects[position][1])
            position += 1
        if not available:
            break
        w -= heapq.heappop(available)
    return w


def check_subarray_sum(nums: Sequence[int], k: int) -> bool:
    """Tell whether a subarray of length two or more sums to a multiple of ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    first_seen = {0: -1}
    total = 0
    for index, value in enumerate(nums):
        total += value
        remainder = total % k
        if remainder in first_seen:
            if index - first_seen[remainder] >= 2:
                return True
        else:
            first_seen[remainder] = index
    return False


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low, index, high = 0, 0, len(nums) - 1
    while index <= high:
        if nums[index] == 0:
            nums[index], nums[low] = nums[low], nums[index]
            low += 1
            index += 1
        elif nums[index] == 2:
            nums[index], nums[high] = nums[high], nums[index]
            high -= 1
        else:
            index += 1


def max_profit_assignment(
    difficulty: Sequence[int], profit: Sequence[int], worker: Sequence[int]
) -> int:
    """Total profit when each worker takes the best job no harder than their ability."""
    hardest = max(difficulty)
    best = [0] * (hardest + 1)
    for level, gain in zip(difficulty, profit):
        best[level] = max(best[level], gain)
    best = list(accumulate(best, max))
    return sum(best[min(ability, hardest)] for ability in worker if ability >= 0)


def min_increment_for_unique(nums: Sequence[int]) -> int:
    """Fewest +1 moves needed to make every value distinct."""
    increments = 0
    next_available = None
    for value, count in sorted(Counter(nums).items()):
        start = value if next_available is None else max(next_available, value)
        increments += (start - value) * count + count * (count - 1) // 2
        next_available = start + count
    return increments


def garbage_collection(garbage: Sequence[str], travel: Sequence[int]) -> int:
    """Minutes for the metal, paper and glass trucks to clear every house."""
    prefix = [0, *accumulate(travel)]
    total = 0
    for kind in "PGM":
        last = None
        for index, house in enumerate(garbage):
            found = house.count(kind)
            if found:
                total += found
                last = index
        if last is not None:
            total += prefix[last]
    return total