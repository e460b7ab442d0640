"""Puzzles on square and rectangular grids of numbers and letters."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import product

from algoset.numbers import MOD

_PRODUCT_MOD = 12345
_COLOURS = 3
_EMPTY_CELL = -1


def _require_square(matrix: Sequence[Sequence[int]]) -> None:
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("the matrix must be square")


def _rotated(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """A new matrix holding ``matrix`` turned a quarter clockwise."""
    return [list(row) for row in zip(*reversed(matrix))]


def rotate(matrix: list[list[int]]) -> None:
    """Turn a square matrix a quarter clockwise, in place."""
    _require_square(matrix)
    matrix[:] = _rotated(matrix)


def _spiral_positions(rows: int, cols: int, *, strict: bool) -> Iterator[tuple[int, int]]:
    """Cells of a ``rows`` x ``cols`` grid in clockwise spiral order.

    With ``strict`` the bottom row and left column are only walked while the
    bounds they depend on remain open; otherwise the checks are swapped, which
    agrees with the strict walk whenever every cell is visited once.
    """
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        top += 1
        for row in range(top, bottom + 1):
            yield row, right
        right -= 1
        if (top <= bottom) if strict else (left <= right):
            for col in range(right, left - 1, -1):
                yield bottom, col
            bottom -= 1
        if (left <= right) if strict else (top <= bottom):
            for row in range(bottom, top - 1, -1):
                yield row, left
            left += 1


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements of ``matrix`` read clockwise from the top-left corner inwards."""
    if not matrix:
        raise ValueError("the matrix must have at least one row")
    positions = _spiral_positions(len(matrix), len(matrix[0]), strict=True)
    return [matrix[row][col] for row, col in positions]


def generate_spiral(n: int) -> list[list[int]]:
    """An ``n`` x ``n`` matrix filled with 1..n*n in clockwise spiral order."""
    matrix = [[0] * n for _ in range(n)]
    for number, (row, col) in enumerate(_spiral_positions(n, n, strict=False), start=1):
        matrix[row][col] = number
    return matrix


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {r for r, row in enumerate(matrix) for value in row if value == 0}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    for r, row in enumerate(matrix):
        for c in range(len(row)):
            if r in zero_rows or c in zero_cols:
                row[c] = 0


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Whether ``word`` can be traced through orthogonally adjacent cells, each used once."""
    if not word or not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    visited: set[tuple[int, int]] = set()

    def trace(row: int, col: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= row < rows and 0 <= col < cols):
            return False
        if (row, col) in visited or board[row][col] != word[index]:
            return False
        visited.add((row, col))
        found = any(
            trace(row + dr, col + dc, index + 1)
            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
        )
        visited.discard((row, col))
        return found

    return any(
        trace(row, col, 0)
        for row in range(rows)
        for col in range(cols)
        if board[row][col] == word[0]
    )


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle; always at least one row."""
    triangle = [[1]]
    for _ in range(1, num_rows):
        previous = triangle[-1]
        triangle.append([1, *(a + b for a, b in zip(previous, previous[1:])), 1])
    return triangle


def find_rotation(
    mat: Sequence[Sequence[int]], target: Sequence[Sequence[int]]
) -> bool:
    """Whether some quarter-turn rotation of ``mat`` equals ``target``."""
    _require_square(mat)
    goal = [list(row) for row in target]
    current = [list(row) for row in mat]
    for _ in range(4):
        if current == goal:
            return True
        current = _rotated(current)
    return False


def color_the_grid(m: int, n: int) -> int:
    """Ways to colour an ``m`` x ``n`` grid in three colours with no equal neighbours."""
    states = [
        column
        for column in product(range(_COLOURS), repeat=m)
        if all(a != b for a, b in zip(column, column[1:]))
    ]
    transitions = [
        [j for j, other in enumerate(states) if all(a != b for a, b in zip(state, other))]
        for state in states
    ]
    ways = [1] * len(states)
    for _ in range(1, n):
        following = [0] * len(states)
        for count, successors in zip(ways, transitions):
            if count:
                for nxt in successors:
                    following[nxt] = (following[nxt] + count) % MOD
        ways = following
    return sum(ways) % MOD


def min_operations(grid: Iterable[Iterable[int]], x: int) -> int:
    """Fewest steps of size ``x`` making all cells equal, or -1 if impossible."""
    values = sorted(value for row in grid for value in row)
    if not values:
        raise ValueError("the grid must not be empty")
    smallest = values[0]
    if any((value - smallest) % x for value in values):
        return -1
    median = values[len(values) // 2]
    return sum(abs(value - median) // x for value in values)


def spiral_fill(m: int, n: int, values: Iterable[int]) -> list[list[int]]:
    """An ``m`` x ``n`` matrix filled in spiral order from ``values``; the rest is -1."""
    matrix = [[_EMPTY_CELL] * n for _ in range(m)]
    for (row, col), value in zip(_spiral_positions(m, n, strict=False), values):
        matrix[row][col] = value
    return matrix


def construct_product_matrix(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Each cell replaced by the product of all other cells, modulo 12345."""
    flat = [value for row in grid for value in row]
    prefix = []
    running = 1
    for value in flat:
        prefix.append(running)
        running = running * value % _PRODUCT_MOD

    products = [0] * len(flat)
    running = 1
    for index in reversed(range(len(flat))):
        products[index] = prefix[index] * running % _PRODUCT_MOD
        running = running * flat[index] % _PRODUCT_MOD

    cells = iter(products)
    return [[next(cells) for _ in row] for row in grid]