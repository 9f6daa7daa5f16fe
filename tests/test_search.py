import pytest

from solvekit.search import (
    judge_square_sum,
    max_distance,
    search_insert,
    search_range,
    special_array,
)


@pytest.mark.parametrize("target", [5, 7, 8, 10])
def test_search_range_present(target):
    nums = [5, 7, 7, 8, 8, 8, 10]
    first, last = search_range(nums, target)
    assert first == nums.index(target)
    assert last == len(nums) - 1 - nums[::-1].index(target)


def test_search_range_missing():
    assert search_range([5, 7, 7, 8, 8, 10], 6) == [-1, -1]
    assert search_range([], 0) == [-1, -1]


def test_search_insert_existing():
    nums = [1, 3, 5, 6]
    assert search_insert(nums, 5) == nums.index(5)


@pytest.mark.parametrize("target", [0, 2, 4, 7])
def test_search_insert_keeps_order(target):
    nums = [1, 3, 5, 6]
    index = search_insert(nums, target)
    grown = list(nums)
    grown.insert(index, target)
    assert grown == sorted(grown)
    assert all(value < target for value in nums[:index])


def test_max_distance_two_balls():
    position = [5, 4, 3, 2, 1, 1000000000]
    assert max_distance(position, 2) == max(position) - min(position)


def test_max_distance_three_balls():
    assert max_distance([1, 2, 3, 4, 7], 3) == 3


def test_max_distance_needs_two_balls():
    with pytest.raises(ValueError):
        max_distance([1, 2, 3], 1)


def test_special_array_found():
    nums = [3, 5]
    assert special_array(nums) == len(nums)


def test_special_array_missing():
    assert special_array([0, 0]) == -1


def test_special_array_invariant():
    nums = [0, 4, 3, 0, 4]
    x = special_array(nums)
    assert x == 3
    assert sum(value >= x for value in nums) == x


@pytest.mark.parametrize("a, b", [(0, 0), (1, 2), (3, 4), (12, 35), (1000, 999)])
def test_judge_square_sum_true(a, b):
    assert judge_square_sum(a * a + b * b) is True


def test_judge_square_sum_false():
    assert judge_square_sum(3) is False


def test_judge_square_sum_negative():
    with pytest.raises(ValueError):
        judge_square_sum(-1)