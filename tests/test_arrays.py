from collections import deque
from itertools import combinations
from statistics import median

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.arrays import (
    binary_search,
    find_median_sorted_arrays,
    longest_increasing_subsequence,
    longest_mountain,
    max_profit,
    max_subarray_sum,
    minimum_abs_difference,
    rotate_left,
    rotate_right,
    sorted_squares,
    three_sum,
)

ints = st.lists(st.integers(-50, 50), max_size=30)


@given(ints)
def test_sorted_squares_matches_sorted(values):
    values = sorted(values)
    assert sorted_squares(values) == sorted(v * v for v in values)


@given(st.lists(st.integers(-100, 100), unique=True, max_size=30), st.integers(-100, 100))
def test_binary_search(values, target):
    values.sort()
    index = binary_search(values, target)
    if target in values:
        assert values[index] == target
    else:
        assert index is None


def test_binary_search_source_example():
    values = [2, 4, 6, 8, 10, 12, 14]
    assert values[binary_search(values, 10)] == 10
    assert binary_search(values, 5) is None


def test_max_subarray_sum_example():
    assert max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3]) == 7


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=20))
def test_max_subarray_sum_is_best_slice(values):
    sums = {sum(values[i:j]) for i, j in combinations(range(len(values) + 1), 2)}
    assert max_subarray_sum(values) == max(sums)


def test_max_subarray_sum_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


@given(ints, st.integers(0, 100))
def test_rotate_right_matches_deque(values, k):
    expected = deque(values)
    expected.rotate(k)
    assert rotate_right(values, k) == list(expected)


@given(ints, st.integers(0, 100))
def test_rotate_left_inverts_right(values, d):
    assert rotate_left(rotate_right(values, d), d) == values


def test_rotation_rejects_negative():
    with pytest.raises(ValueError):
        rotate_left([1, 2, 3], -1)
    with pytest.raises(ValueError):
        rotate_right([1, 2, 3], -1)


def test_three_sum_classic():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


@given(st.lists(st.integers(-10, 10), max_size=15))
def test_three_sum_invariants(values):
    result = three_sum(values)
    assert len({tuple(t) for t in result}) == len(result)
    for triplet in result:
        assert sum(triplet) == 0
        assert triplet == sorted(triplet)
    found = {tuple(sorted(c)) for c in combinations(values, 3) if sum(c) == 0}
    assert {tuple(t) for t in result} == found


@given(st.lists(st.integers(0, 100), max_size=20))
def test_max_profit_is_best_pair(prices):
    pairs = [b - a for a, b in combinations(prices, 2)]
    assert max_profit(prices) == max([0, *pairs])


def test_max_profit_falling_prices():
    assert max_profit([5, 4, 3, 2, 1]) == 0


def test_longest_mountain_whole_array():
    values = [1, 2, 3, 2, 1]
    assert longest_mountain(values) == len(values)


def test_longest_mountain_none():
    assert longest_mountain([1, 2, 3, 4]) == 0
    assert longest_mountain([2, 2]) == 0


def test_minimum_abs_difference_even_spacing():
    values = [9, 3, 6, 0]
    ordered = sorted(values)
    assert minimum_abs_difference(values) == list(zip(ordered, ordered[1:]))


def test_minimum_abs_difference_short():
    assert minimum_abs_difference([4]) == []


@given(
    st.lists(st.integers(-100, 100), max_size=15),
    st.lists(st.integers(-100, 100), max_size=15),
)
def test_median_matches_statistics(first, second):
    if not first and not second:
        second = [0]
    first.sort()
    second.sort()
    assert find_median_sorted_arrays(first, second) == median(first + second)


def test_median_both_empty():
    with pytest.raises(ValueError):
        find_median_sorted_arrays([], [])


def test_lis_source_example():
    assert longest_increasing_subsequence([20, 32, 19, 43, 31, 60, 51, 70]) == [
        20, 32, 43, 51, 70,
    ]


@given(st.lists(st.integers(-20, 20), max_size=15))
def test_lis_is_increasing_subsequence(values):
    result = longest_increasing_subsequence(values)
    assert all(a < b for a, b in zip(result, result[1:]))
    remaining = iter(values)
    assert all(item in remaining for item in result)
    assert bool(result) == bool(values)