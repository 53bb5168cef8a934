from hypothesis import given
from hypothesis import strategies as st

from dynprog.alternating_sum import (
    max_alternating_sum_memo,
    max_alternating_sum_recursive,
    max_alternating_sum_space_optimized,
    max_alternating_sum_tabulation,
)

small_lists = st.lists(st.integers(-100, 100), max_size=12)
positive_lists = st.lists(st.integers(1, 1000), min_size=1, max_size=12)


def test_driver_example():
    nums = [4, 2, 5, 3]
    assert max_alternating_sum_recursive(nums) == 7
    assert max_alternating_sum_memo(nums) == 7
    assert max_alternating_sum_tabulation(nums) == 7
    assert max_alternating_sum_space_optimized(nums) == 7


def test_empty():
    assert max_alternating_sum_recursive([]) == 0
    assert max_alternating_sum_memo([]) == 0
    assert max_alternating_sum_tabulation([]) == 0
    assert max_alternating_sum_space_optimized([]) == 0


def test_single_positive_value():
    assert max_alternating_sum_recursive([9]) == 9
    assert max_alternating_sum_memo([9]) == 9
    assert max_alternating_sum_tabulation([9]) == 9
    assert max_alternating_sum_space_optimized([9]) == 9


@given(small_lists)
def test_methods_agree(nums):
    expected = max_alternating_sum_recursive(nums)
    assert max_alternating_sum_memo(nums) == expected
    assert max_alternating_sum_tabulation(nums) == expected
    assert max_alternating_sum_space_optimized(nums) == expected


@given(positive_lists)
def test_at_least_largest_element(nums):
    assert max_alternating_sum_space_optimized(nums) >= max(nums)


@given(small_lists)
def test_bounded_by_absolute_sum(nums):
    result = max_alternating_sum_tabulation(nums)
    assert 0 <= result <= sum(abs(value) for value in nums)


@given(positive_lists)
def test_non_decreasing_input_gives_maximum(nums):
    ordered = sorted(nums)
    assert max_alternating_sum_memo(ordered) == ordered[-1]