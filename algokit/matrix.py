"""Algorithms over two-dimensional integer matrices."""

from __future__ import annotations

from typing import MutableSequence, Sequence


def set_zeroes(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Zero, in place, every row and column that contains a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def rotate(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("only a square matrix can be rotated")
    matrix[:] = [list(column) for column in zip(*reversed(matrix))]


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows and columns are both sorted ascending."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            row += 1
        else:
            col -= 1
    return False


def celebrity(matrix: Sequence[Sequence[int]]) -> int | None:
    """Find the person known by everyone who knows no one.

    ``matrix[a][b] == 1`` means ``a`` knows ``b``. Returns ``None`` if there
    is no such person.
    """
    n = len(matrix)
    if n == 0:
        return None
    candidates = list(range(n))
    while len(candidates) > 1:
        a = candidates.pop()
        b = candidates.pop()
        candidates.append(b if matrix[a][b] == 1 else a)
    candidate = candidates[0]
    if any(value != 0 for value in matrix[candidate]):
        return None
    if sum(1 for row in matrix if row[candidate] == 1) != n - 1:
        return None
    return candidate