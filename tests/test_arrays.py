from collections import Counter
from itertools import permutations

import pytest

from solvekit.arrays import (
    check_subarray_sum,
    find_maximized_capital,
    garbage_collection,
    height_checker,
    intersect,
    majority_element,
    max_profit_assignment,
    max_sub_array,
    min_increment_for_unique,
    next_permutation,
    number_of_subarrays,
    remove_duplicates,
    rotate,
    sort_colors,
    three_consecutive_odds,
    trap,
    two_sum,
)


@pytest.mark.parametrize(
    "nums, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([-5, 10, 0, 4], -1)],
)
def test_two_sum_finds_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_missing_pair():
    assert two_sum([1, 2, 3], 100) == [-1, -1]


def test_height_checker_sorted_is_zero():
    assert height_checker([1, 1, 2, 3, 5]) == 0


def test_height_checker_unsorted_is_positive_and_bounded():
    heights = [5, 1, 2, 3, 4]
    result = height_checker(heights)
    assert 0 < result <= len(heights)


def test_three_consecutive_odds():
    assert three_consecutive_odds([2, 6, 4, 1]) is False
    assert three_consecutive_odds([1, 2, 34, 3, 4, 5, 7, 23, 12]) is True
    assert three_consecutive_odds([1, 3, 2, 5, 7]) is False


def test_number_of_subarrays_all_odd_single():
    nums = [1, 3, 5, 7, 9]
    assert number_of_subarrays(nums, 1) == len(nums)


def test_number_of_subarrays_no_odds():
    assert number_of_subarrays([2, 4, 6], 1) == 0


def test_majority_element():
    assert majority_element([4, 9, 4, 9, 4]) == 4


def test_majority_element_missing():
    assert majority_element([1, 2, 3, 4]) == -1


@pytest.mark.parametrize("k", [0, 1, 3, 7, 12])
def test_rotate_moves_each_item(k):
    original = [10, 20, 30, 40, 50, 60, 70]
    nums = list(original)
    rotate(nums, k)
    n = len(original)
    assert all(nums[(i + k) % n] == value for i, value in enumerate(original))


def test_rotate_round_trip():
    nums = [1, 2, 3, 4, 5]
    rotate(nums, 2)
    rotate(nums, len(nums) - 2)
    assert nums == [1, 2, 3, 4, 5]


def test_rotate_empty():
    nums = []
    rotate(nums, 3)
    assert nums == []


def test_remove_duplicates():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    original = list(nums)
    count = remove_duplicates(nums)
    assert count == len(set(original))
    assert nums[:count] == sorted(set(original))
    assert len(nums) == len(original)


def test_next_permutation_walks_all_permutations():
    ordered = sorted(set(permutations([1, 2, 3, 3])))
    for current, following in zip(ordered, ordered[1:] + ordered[:1]):
        nums = list(current)
        next_permutation(nums)
        assert tuple(nums) == following


def test_intersect_with_itself():
    values = [4, 9, 5, 9, 4]
    assert intersect(values, values) == sorted(values)


def test_intersect_properties():
    a = [4, 9, 5, 1, 1]
    b = [9, 4, 9, 8, 4, 1]
    result = intersect(a, b)
    assert result == sorted(result)
    assert result == intersect(b, a)
    counts = Counter(result)
    assert all(counts[v] <= min(a.count(v), b.count(v)) for v in counts)
    assert intersect(a, []) == []


def test_trap_examples():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6
    assert trap([]) == 0
    assert trap([1, 2, 3, 4]) == 0


def test_find_maximized_capital_no_projects_taken():
    assert find_maximized_capital(0, 7, [5, 6], [0, 0]) == 7
    assert find_maximized_capital(3, 1, [5, 6], [10, 20]) == 1


def test_find_maximized_capital_all_affordable():
    profits = [1, 2, 3]
    assert find_maximized_capital(3, 0, profits, [0, 0, 0]) == sum(profits)


def test_check_subarray_sum():
    assert check_subarray_sum([23, 2, 4, 6, 7], 6) is True
    assert check_subarray_sum([6], 6) is False


def test_check_subarray_sum_zero_k():
    with pytest.raises(ValueError):
        check_subarray_sum([1, 2], 0)


def test_max_sub_array():
    assert max_sub_array([1, 2, 3]) == sum([1, 2, 3])
    assert max_sub_array([-4, -2, -7]) == max([-4, -2, -7])


def test_max_sub_array_empty():
    with pytest.raises(ValueError):
        max_sub_array([])


def test_sort_colors():
    nums = [2, 0, 2, 1, 1, 0, 2, 0]
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


def test_max_profit_assignment_strong_workers():
    difficulty = [2, 4, 6, 8, 10]
    profit = [10, 20, 30, 40, 50]
    worker = [10, 12, 100]
    assert max_profit_assignment(difficulty, profit, worker) == len(worker) * max(profit)


def test_max_profit_assignment_weak_workers():
    assert max_profit_assignment([85, 47, 57], [24, 66, 99], [40, 25, 25]) == 0


def test_min_increment_for_unique():
    assert min_increment_for_unique([1, 5, 9]) == 0
    assert min_increment_for_unique([3, 2, 1, 2, 1, 7]) == 6


def test_garbage_collection_single_house():
    assert garbage_collection(["MMM", "", ""], [5, 7]) == len("MMM")