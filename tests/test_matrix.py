import copy
import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraylab.matrix import (
    find_missing_and_repeated,
    search_matrix,
    search_sorted_rows_cols,
    set_zeroes,
    spiral_order,
    word_exists,
)

BOARD = [
    ["A", "B", "C", "E"],
    ["S", "F", "C", "S"],
    ["A", "D", "E", "E"],
]


def _chunk(values, width):
    return [values[start : start + width] for start in range(0, len(values), width)]


@given(st.data())
def test_find_missing_and_repeated_recovers_pair(data):
    n = data.draw(st.integers(min_value=2, max_value=5))
    limit = n * n
    values = data.draw(st.permutations(list(range(1, limit + 1))))
    values = list(values)
    slot = data.draw(st.integers(min_value=0, max_value=limit - 1))
    missing = values[slot]
    repeated = data.draw(
        st.sampled_from([v for v in range(1, limit + 1) if v != missing])
    )
    values[slot] = repeated
    grid = _chunk(values, n)
    assert find_missing_and_repeated(grid) == [repeated, missing]


def test_find_missing_and_repeated_rejects_out_of_range():
    with pytest.raises(ValueError):
        find_missing_and_repeated([[1, 5], [2, 3]])
    with pytest.raises(ValueError):
        find_missing_and_repeated([[0, 1], [2, 3]])


def test_spiral_order_worked_example():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert spiral_order(matrix) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_spiral_order_empty():
    assert spiral_order([]) == []
    assert spiral_order([[]]) == []


@given(
    st.integers(min_value=1, max_value=6),
    st.integers(min_value=1, max_value=6),
)
def test_spiral_order_visits_every_cell_once(rows, cols):
    matrix = _chunk(list(range(rows * cols)), cols)
    result = spiral_order(matrix)
    assert sorted(result) == list(range(rows * cols))
    assert result[:cols] == matrix[0]


@given(st.integers(min_value=1, max_value=6))
def test_spiral_order_single_column_is_top_down(rows):
    matrix = [[value] for value in range(rows)]
    assert spiral_order(matrix) == list(range(rows))


@st.composite
def _staircase_matrices(draw):
    row_bases = sorted(draw(st.lists(st.integers(-20, 20), min_size=1, max_size=5)))
    col_bases = sorted(draw(st.lists(st.integers(-20, 20), min_size=1, max_size=5)))
    return [[r + c for c in col_bases] for r in row_bases]


@given(_staircase_matrices(), st.integers(-50, 50))
def test_search_sorted_rows_cols_matches_membership(matrix, target):
    present = any(target in row for row in matrix)
    assert search_sorted_rows_cols(matrix, target) is present


@given(_staircase_matrices())
def test_search_sorted_rows_cols_finds_every_element(matrix):
    for value in itertools.chain.from_iterable(matrix):
        assert search_sorted_rows_cols(matrix, value) is True


def test_search_sorted_rows_cols_empty():
    assert search_sorted_rows_cols([], 3) is False
    assert search_sorted_rows_cols([[]], 3) is False


@st.composite
def _row_major_matrices(draw):
    width = draw(st.integers(min_value=1, max_value=5))
    height = draw(st.integers(min_value=1, max_value=5))
    values = sorted(
        draw(
            st.lists(
                st.integers(-30, 30), min_size=width * height, max_size=width * height
            )
        )
    )
    return _chunk(values, width)


@given(_row_major_matrices(), st.integers(-40, 40))
def test_search_matrix_matches_membership(matrix, target):
    present = any(target in row for row in matrix)
    assert search_matrix(matrix, target) is present


@given(_row_major_matrices())
def test_search_matrix_finds_every_element(matrix):
    for value in itertools.chain.from_iterable(matrix):
        assert search_matrix(matrix, value) is True


def test_search_matrix_empty():
    assert search_matrix([], 1) is False


@given(
    st.lists(
        st.lists(st.integers(1, 9), min_size=3, max_size=3), min_size=1, max_size=5
    )
)
def test_set_zeroes_leaves_zero_free_matrix_alone(matrix):
    original = copy.deepcopy(matrix)
    set_zeroes(matrix)
    assert matrix == original


@given(st.data())
def test_set_zeroes_single_zero_clears_its_row_and_column(data):
    rows = data.draw(st.integers(min_value=1, max_value=5))
    cols = data.draw(st.integers(min_value=1, max_value=5))
    matrix = [
        data.draw(st.lists(st.integers(1, 9), min_size=cols, max_size=cols))
        for _ in range(rows)
    ]
    zero_row = data.draw(st.integers(0, rows - 1))
    zero_col = data.draw(st.integers(0, cols - 1))
    matrix[zero_row][zero_col] = 0
    original = copy.deepcopy(matrix)
    set_zeroes(matrix)
    for r in range(rows):
        for c in range(cols):
            if r == zero_row or c == zero_col:
                assert matrix[r][c] == 0
            else:
                assert matrix[r][c] == original[r][c]


def test_word_exists_worked_examples():
    assert word_exists(BOARD, "ABCCED") is True
    assert word_exists(BOARD, "ABCB") is False


def test_word_exists_does_not_change_board():
    board = copy.deepcopy(BOARD)
    word_exists(board, "SEE")
    assert board == BOARD


def test_word_exists_every_letter_on_board():
    for letter in itertools.chain.from_iterable(BOARD):
        assert word_exists(BOARD, letter) is True


def test_word_exists_missing_letter():
    assert word_exists(BOARD, "Z") is False


def test_word_exists_reversed_path_also_exists():
    assert word_exists(BOARD, "ABCCED"[::-1]) is True


def test_word_exists_empty_word():
    assert word_exists(BOARD, "") is True


def test_word_exists_longer_than_board():
    assert word_exists([["A"]], "AA") is False