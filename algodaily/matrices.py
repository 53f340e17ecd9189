"""Problems over two-dimensional integer grids."""

from __future__ import annotations

from collections.abc import Sequence

_MAGIC_VALUES = frozenset(range(1, 10))


def restore_matrix(row_sum: Sequence[int], col_sum: Sequence[int]) -> list[list[int]]:
    """Build a non-negative matrix with the given row and column sums."""
    rows = list(row_sum)
    cols = list(col_sum)
    matrix = [[0] * len(cols) for _ in rows]
    for i, row in enumerate(matrix):
        for j in range(len(cols)):
            value = min(rows[i], cols[j])
            row[j] = value
            rows[i] -= value
            cols[j] -= value
    return matrix


def _is_magic(grid: Sequence[Sequence[int]], top: int, left: int) -> bool:
    square = [list(grid[top + i][left : left + 3]) for i in range(3)]
    values = [value for row in square for value in row]
    if set(values) != _MAGIC_VALUES:
        return False
    target = sum(square[0])
    lines = [
        *square,
        *(list(column) for column in zip(*square)),
        [square[i][i] for i in range(3)],
        [square[i][2 - i] for i in range(3)],
    ]
    return all(sum(line) == target for line in lines)


def num_magic_squares_inside(grid: Sequence[Sequence[int]]) -> int:
    """Count 3x3 subgrids holding 1..9 once each with equal rows, columns and diagonals."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return sum(
        1
        for top in range(rows - 2)
        for left in range(cols - 2)
        if _is_magic(grid, top, left)
    )


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the values in clockwise spiral order, starting at the top left."""
    result: list[int] = []
    if not matrix or not matrix[0]:
        return result
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while left <= right and top <= bottom:
        result.extend(matrix[top][left : right + 1])
        top += 1
        if top > bottom:
            break
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if left > right:
            break
        result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
        bottom -= 1
        if top > bottom:
            break
        result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
        left += 1
    return result