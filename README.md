# dynprog

Six classic dynamic programming problems, each solved several ways so the
approaches can be compared side by side: plain recursion, recursion with
memoization, bottom-up tabulation and a space-optimized pass. For any valid
input, all approaches to a problem return the same answer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Problems

### Frog jump: `dynprog.frog_jump`

A frog starts on the first stone and wants to reach the last one. It can jump
one or two stones ahead, and a jump costs the absolute difference in height.
The functions return the cheapest total cost.

```python
from dynprog.frog_jump import min_cost_memo, min_cost_tabulation, min_cost_space_optimized

heights = [30, 10, 60, 10, 60, 50]
min_cost_tabulation(heights)       # 40
```

An empty list of heights raises `ValueError`. A single stone costs `0`.

### House robber: `dynprog.house_robber`

The largest total that can be taken from a row of houses without taking two
neighbours.

```python
from dynprog.house_robber import rob_brute_force, rob_memoization, rob_tabulation, rob_optimized

rob_optimized([2, 7, 9, 3, 1])     # 12
```

An empty row gives `0`.

### Maximum alternating subsequence sum: `dynprog.alternating_sum`

Pick a subsequence. Its alternating sum adds the elements at even positions
and subtracts those at odd positions, counting positions within the
subsequence. The functions return the largest such sum.

```python
from dynprog.alternating_sum import (
    max_alternating_sum_recursive,
    max_alternating_sum_memo,
    max_alternating_sum_tabulation,
    max_alternating_sum_space_optimized,
)

max_alternating_sum_space_optimized([4, 2, 5, 3])   # 7
```

An empty list gives `0`.

### Minimum falling path sum II: `dynprog.falling_path`

Pick one element from each row of a matrix so that elements in adjacent rows
lie in different columns. The functions return the smallest total.

```python
from dynprog.falling_path import min_falling_path_sum

min_falling_path_sum([[1, 2, 3], [4, 5, 6], [7, 8, 9]])   # 13
```

`min_falling_path_sum` uses the O(n·m) two-minimums method
(`min_falling_path_sum_fully_optimized`). The other approaches are
`min_falling_path_sum_recursive`, `min_falling_path_sum_memo`,
`min_falling_path_sum_tabulation` and `min_falling_path_sum_space_optimized`.

`ValueError` is raised for an empty matrix, for rows of different lengths, and
for a matrix of several rows with only one column.

### Minimum path sum: `dynprog.path_sum`

Moving only right or down from the top-left cell of a grid to the
bottom-right cell, the smallest sum of the cells passed through.

```python
from dynprog.path_sum import min_path_sum_tabulation, min_path_sum_in_place

grid = [[1, 3, 1], [1, 5, 1], [4, 2, 1]]
min_path_sum_tabulation(grid)      # 7
```

The other approaches are `min_path_sum_recursive`, `min_path_sum_memo` and
`min_path_sum_space_optimized`. `min_path_sum_in_place` overwrites every cell
of the grid you pass with its best running total. An empty grid or rows of
different lengths raise `ValueError`.

### Unique paths: `dynprog.unique_paths`

The number of paths from the top-left to the bottom-right of an `n × m` grid
when each move goes right or down.

```python
from dynprog.unique_paths import count_paths_tabulation

count_paths_tabulation(3, 3)       # 6
```

The other approaches are `count_paths_recursive`, `count_paths_memo` and
`count_paths_space_optimized`. A dimension below 1 raises `ValueError`.

## A note on the recursive versions

The plain recursive solutions take exponential time; they show the problem's
structure and are meant for small inputs. The memoized versions recurse once
per sub-problem, so very large inputs can hit Python's recursion limit. For
those, use the tabulation or space-optimized functions.

## What this package does not do

It is a library of functions only: there is no command-line program, and
nothing reads input from files or prints results.