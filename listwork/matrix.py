"""Building and reshaping matrices: spiral fills and transposition."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional

from .node import ListNode

EMPTY_CELL = -1


def _spiral_positions(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    """Yield every cell of a ``rows`` x ``cols`` grid in clockwise spiral order."""
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        for row in range(top + 1, bottom + 1):
            yield row, right
        if top < bottom and left < right:
            for col in range(right - 1, left - 1, -1):
                yield bottom, col
            for row in range(bottom - 1, top, -1):
                yield row, left
        top += 1
        bottom -= 1
        left += 1
        right -= 1


def generate_matrix(n: int) -> list[list[int]]:
    """Return an ``n`` x ``n`` matrix filled with 1 to n*n in spiral order."""
    if n < 0:
        raise ValueError("matrix size must not be negative")
    grid = [[0] * n for _ in range(n)]
    for count, (row, col) in enumerate(_spiral_positions(n, n), start=1):
        grid[row][col] = count
    return grid


def spiral_matrix(m: int, n: int, head: Optional[ListNode]) -> list[list[int]]:
    """Lay the list's values into an ``m`` x ``n`` matrix in spiral order.

    Cells left over once the list runs out hold -1.
    """
    if m < 0 or n < 0:
        raise ValueError("matrix dimensions must not be negative")
    grid = [[EMPTY_CELL] * n for _ in range(m)]
    values = iter(head) if head is not None else iter(())
    for (row, col), value in zip(_spiral_positions(m, n), values):
        grid[row][col] = value
    return grid


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a non-empty rectangular matrix."""
    if not matrix:
        raise ValueError("cannot transpose an empty matrix")
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return [list(column) for column in zip(*matrix)]