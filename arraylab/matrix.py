"""Algorithms over two-dimensional grids."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence, Sequence

__all__ = [
    "find_missing_and_repeated",
    "spiral_order",
    "search_sorted_rows_cols",
    "search_matrix",
    "set_zeroes",
    "word_exists",
]

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def find_missing_and_repeated(grid: Sequence[Sequence[int]]) -> list[int]:
    """Return ``[repeated, missing]`` for an n x n grid of values from 1..n*n.

    Either entry is -1 when no value fits it.
    """
    limit = len(grid) * len(grid)
    counts = Counter(value for row in grid for value in row)
    out_of_range = sorted(value for value in counts if not 1 <= value <= limit)
    if out_of_range:
        raise ValueError(f"values outside 1..{limit}: {out_of_range}")
    repeating = missing = -1
    for value in range(1, limit + 1):
        seen = counts[value]
        if seen == 2:
            repeating = value
        elif seen == 0:
            missing = value
    return [repeating, missing]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` in clockwise spiral order."""
    result: list[int] = []
    if not matrix:
        return result
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(row[right] for row in matrix[top : bottom + 1])
        right -= 1
        if top <= bottom and left <= right:
            result.extend(reversed(matrix[bottom][left : right + 1]))
            bottom -= 1
            result.extend(row[left] for row in reversed(matrix[top : bottom + 1]))
            left += 1
    return result


def search_sorted_rows_cols(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows and columns ascend."""
    if not matrix or not matrix[0]:
        return False
    rows = len(matrix)
    row, col = 0, len(matrix[0]) - 1
    while row < rows and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix that ascends when read row by row."""
    if not matrix:
        return False
    width = len(matrix[0])
    low, high = 0, len(matrix) * width - 1
    while low <= high:
        mid = (low + high) // 2
        row, col = divmod(mid, width)
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def set_zeroes(matrix: Sequence[MutableSequence[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {index for index, row in enumerate(matrix) if 0 in row}
    zero_cols = {col for row in matrix for col, value in enumerate(row) if value == 0}
    for index, row in enumerate(matrix):
        if index in zero_rows:
            row[:] = [0] * len(row)
        else:
            for col in zero_cols:
                if col < len(row):
                    row[col] = 0


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent cells of ``board``.

    Cells join horizontally or vertically and each cell is used at most once.
    """
    rows = len(board)
    cols = len(board[0]) if rows else 0

    def trace(row: int, col: int, position: int, used: set[tuple[int, int]]) -> bool:
        if position == len(word):
            return True
        if not (0 <= row < rows and 0 <= col < cols):
            return False
        if (row, col) in used or board[row][col] != word[position]:
            return False
        used.add((row, col))
        found = any(
            trace(row + d_row, col + d_col, position + 1, used)
            for d_row, d_col in _STEPS
        )
        used.discard((row, col))
        return found

    return any(
        trace(row, col, 0, set()) for row in range(rows) for col in range(cols)
    )