import pytest
from hypothesis import given
from hypothesis import strategies as st

from dynprog.frog_jump import (
    min_cost_memo,
    min_cost_space_optimized,
    min_cost_tabulation,
)

heights_lists = st.lists(st.integers(-1000, 1000), min_size=1, max_size=60)


def test_driver_example():
    heights = [30, 10, 60, 10, 60, 50]
    assert min_cost_memo(heights) == 40
    assert min_cost_tabulation(heights) == 40
    assert min_cost_space_optimized(heights) == 40


def test_single_stone_costs_nothing():
    assert min_cost_memo([17]) == 0
    assert min_cost_tabulation([17]) == 0
    assert min_cost_space_optimized([17]) == 0


def test_two_stones_cost_their_difference():
    assert min_cost_memo([3, 11]) == 8
    assert min_cost_tabulation([3, 11]) == 8
    assert min_cost_space_optimized([3, 11]) == 8


def test_empty_raises():
    with pytest.raises(ValueError):
        min_cost_memo([])
    with pytest.raises(ValueError):
        min_cost_tabulation([])
    with pytest.raises(ValueError):
        min_cost_space_optimized([])


@given(heights_lists)
def test_methods_agree(heights):
    memo = min_cost_memo(heights)
    assert min_cost_tabulation(heights) == memo
    assert min_cost_space_optimized(heights) == memo


@given(heights_lists)
def test_bounded_by_single_steps(heights):
    single_steps = sum(abs(b - a) for a, b in zip(heights, heights[1:]))
    assert min_cost_tabulation(heights) <= single_steps


@given(heights_lists)
def test_at_least_distance_between_ends(heights):
    assert min_cost_space_optimized(heights) >= abs(heights[-1] - heights[0])


@given(st.integers(-100, 100), st.integers(1, 30))
def test_flat_ground_matches_single_stone(height, count):
    heights = [height] * count
    assert min_cost_memo(heights) == min_cost_memo([height])


def test_input_not_mutated():
    heights = [30, 10, 60, 10, 60, 50]
    snapshot = list(heights)
    min_cost_memo(heights)
    min_cost_tabulation(heights)
    min_cost_space_optimized(heights)
    assert heights == snapshot