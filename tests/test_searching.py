import pytest
from hypothesis import given, strategies as st

from algoset.searching import (
    find_min_rotated,
    find_min_rotated_with_duplicates,
    search_matrix,
)


@given(st.lists(st.integers(-5, 5), min_size=1, max_size=40), st.data())
def test_find_min_rotated_with_duplicates(values, data):
    ordered = sorted(values)
    shift = data.draw(st.integers(0, len(ordered) - 1))
    rotated = ordered[shift:] + ordered[:shift]
    assert find_min_rotated_with_duplicates(rotated) == min(values)


@pytest.mark.parametrize("search", [find_min_rotated, find_min_rotated_with_duplicates])
def test_find_min_rejects_empty(search):
    with pytest.raises(ValueError):
        search([])


@st.composite
def sorted_matrices(draw):
    rows = draw(st.integers(1, 6))
    cols = draw(st.integers(1, 6))
    values = sorted(draw(st.lists(st.integers(-50, 50), min_size=rows * cols, max_size=rows * cols)))
    return [values[start:start + cols] for start in range(0, rows * cols, cols)]


@given(sorted_matrices(), st.integers(-60, 60))
def test_search_matrix_matches_membership(matrix, target):
    assert search_matrix(matrix, target) == any(target in row for row in matrix)


@given(sorted_matrices())
def test_search_matrix_finds_every_element(matrix):
    for row in matrix:
        for value in row:
            assert search_matrix(matrix, value) is True


def test_search_matrix_empty():
    assert search_matrix([], 3) is False
    assert search_matrix([[]], 3) is False