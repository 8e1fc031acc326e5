# arraylab

Small, dependency-free implementations of well-known array and matrix
algorithms. They cover two-pointer scans, prefix sums, in-place partitioning,
spiral traversal, grid search, k-sum search and interval merging. Every
function takes ordinary Python lists.

## Installation

```
pip install arraylab
```

To run the test suite:

```
pip install "arraylab[test]"
pytest
```

## Modules

### `arraylab.arrays`

| Function | Result |
| --- | --- |
| `majority_element(nums)` | the value that occurs more than `len(nums) // 2` times. If there is none, the largest value. |
| `find_duplicate(nums)` | the repeated value in a list of `n + 1` numbers drawn from `1..n`, found by cycle detection |
| `trap(heights)` | units of rain water held by an elevation map |
| `merge_sorted(nums1, m, nums2, n)` | merges the first `n` items of `nums2` into the first `m` items of `nums1`, in place |
| `single_number(nums)` | the value that appears once when every other value appears twice |
| `max_profit(prices)` | the best profit from one buy followed by one later sale (never below 0) |
| `max_area(heights)` | the largest water container formed by two of the lines |
| `max_subarray(nums)` | the largest sum of a non-empty contiguous run |
| `sort_colors(nums)` | sorts a list of 0s, 1s and 2s in place in one pass. Any other value is placed with the 2s. |
| `next_permutation(nums)` | rearranges `nums` in place into its next lexicographic permutation. The last permutation wraps around to ascending order. |
| `product_except_self(nums)` | for each position, the product of all other elements, computed without division |
| `subarray_sum(nums, k)` | the number of contiguous runs that sum to `k` |

The following functions raise `ValueError` when given an empty list:
`majority_element`, `find_duplicate`, `single_number`, `max_profit` and
`max_subarray`.

`merge_sorted` raises `ValueError` in three cases:

- `m` or `n` is negative
- `n` exceeds `len(nums2)`
- `nums1` has no room for `m + n` items

Positions in `nums1` past `m + n` are left untouched.

### `arraylab.matrix`

| Function | Result |
| --- | --- |
| `find_missing_and_repeated(grid)` | `[repeated, missing]` for an `n x n` grid of values from `1..n²`. An entry is `-1` when no value fits it. A value outside the range raises `ValueError`. |
| `spiral_order(matrix)` | the elements in clockwise spiral order (`[]` for an empty matrix) |
| `search_sorted_rows_cols(matrix, target)` | membership test for a matrix whose rows and columns each ascend |
| `search_matrix(matrix, target)` | membership test for a matrix that ascends when read row by row (binary search) |
| `set_zeroes(matrix)` | zeroes, in place, every row and column that holds a zero |
| `word_exists(board, word)` | whether `word` can be traced through horizontally or vertically adjacent cells, using each cell at most once |

### `arraylab.sums`

| Function | Result |
| --- | --- |
| `three_sum(nums)` | every distinct ascending triple summing to zero |
| `four_sum(nums, target)` | every distinct ascending quadruple summing to `target` |

### `arraylab.intervals`

| Function | Result |
| --- | --- |
| `merge_intervals(intervals)` | the union of `[start, end]` intervals as sorted, non-overlapping intervals. Intervals that touch at an end point are joined. |

## Examples

```python
from arraylab.arrays import trap, next_permutation, subarray_sum
from arraylab.matrix import spiral_order, word_exists
from arraylab.sums import three_sum
from arraylab.intervals import merge_intervals

trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])        # 6

nums = [1, 2, 3]
next_permutation(nums)
nums                                              # [1, 3, 2]

subarray_sum([1, 1, 1], 2)                        # 2

spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])   # [1, 2, 3, 6, 9, 8, 7, 4, 5]

board = [list("ABCE"), list("SFCS"), list("ADEE")]
word_exists(board, "ABCCED")                      # True

three_sum([-1, 0, 1, 2, -1, -4])                  # [[-1, -1, 2], [-1, 0, 1]]

merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]])
# [[1, 6], [8, 10], [15, 18]]
```

The following functions change the list they are given and return `None`:
`merge_sorted`, `sort_colors`, `next_permutation` and `set_zeroes`.

The other functions do not change their arguments. Some of them sort a copy
internally.

## What it does not do

arraylab is a library only. It has no command-line program. It reads no
input files and stores nothing. You call its functions from your own Python
code.