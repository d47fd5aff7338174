"""N-Queens by backtracking."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain

QUEEN = "Q"
EMPTY = "."


def is_safe(board: Sequence[Sequence[str]], row: int, col: int) -> bool:
    """Whether no queen in the rows above attacks (row, col)."""
    size = len(board)
    above = range(row - 1, -1, -1)
    column = ((r, col) for r in range(row))
    upper_left = zip(above, range(col - 1, -1, -1))
    upper_right = zip(above, range(col + 1, size))
    return all(board[r][c] != QUEEN for r, c in chain(column, upper_left, upper_right))


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of n non-attacking queens on an n×n board."""
    if n < 0:
        raise ValueError("board size must be non-negative")
    board = [[EMPTY] * n for _ in range(n)]
    solutions: list[list[str]] = []

    def place(row: int) -> None:
        if row == n:
            solutions.append(["".join(line) for line in board])
            return
        for col in range(n):
            if is_safe(board, row, col):
                board[row][col] = QUEEN
                place(row + 1)
                board[row][col] = EMPTY

    place(0)
    return solutions