"""Backtracking searches: sudoku, permutations and the n-queens puzzle."""

from __future__ import annotations

from math import factorial
from typing import Sequence

_DIGITS = "123456789"
EMPTY = "."


def _fits(board: list[list[str]], row: int, col: int, digit: str) -> bool:
    if digit in board[row]:
        return False
    if any(line[col] == digit for line in board):
        return False
    top, left = 3 * (row // 3), 3 * (col // 3)
    return all(
        digit not in board[r][left:left + 3] for r in range(top, top + 3)
    )


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill the empty cells (".") of a 9x9 board in place.

    Returns True if the board was solved; otherwise the board is left as
    it was and False is returned. Raises ValueError for a board that is
    not 9 by 9.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("a sudoku board must be 9 by 9")
    empties = [
        (r, c) for r, row in enumerate(board) for c, cell in enumerate(row)
        if cell == EMPTY
    ]

    def fill(position: int) -> bool:
        if position == len(empties):
            return True
        row, col = empties[position]
        for digit in _DIGITS:
            if _fits(board, row, col, digit):
                board[row][col] = digit
                if fill(position + 1):
                    return True
                board[row][col] = EMPTY
        return False

    return fill(0)


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return every ordering of ``nums``, generated by successive swaps.

    The first ordering is ``nums`` itself. ``nums`` is not modified.
    """
    items = list(nums)
    orderings: list[list[int]] = []

    def place(start: int) -> None:
        if start == len(items):
            orderings.append(items.copy())
            return
        for i in range(start, len(items)):
            items[i], items[start] = items[start], items[i]
            place(start + 1)
            items[i], items[start] = items[start], items[i]

    place(0)
    return orderings


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an n-by-n board.

    Each board is a list of row strings, "Q" for a queen and "." for an
    empty square. Queens are placed column by column, trying rows from top
    to bottom. Raises ValueError for a negative ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    row_of_col: list[int] = []
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_anti_diagonals: set[int] = set()
    boards: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            boards.append(
                ["".join("Q" if r == row else "." for r in row_of_col) for row in range(n)]
            )
            return
        for row in range(n):
            if row in used_rows or row - col in used_diagonals or row + col in used_anti_diagonals:
                continue
            row_of_col.append(row)
            used_rows.add(row)
            used_diagonals.add(row - col)
            used_anti_diagonals.add(row + col)
            place(col + 1)
            row_of_col.pop()
            used_rows.discard(row)
            used_diagonals.discard(row - col)
            used_anti_diagonals.discard(row + col)

    place(0)
    return boards


def get_permutation(n: int, k: int) -> str:
    """Return the k-th permutation of 1..n in lexicographic order, as digits joined.

    Counting wraps around after n! permutations; a ``k`` below 1 gives the first.
    """
    remaining = list(range(1, n + 1))
    index = max(k - 1, 0) % factorial(n)
    chosen: list[int] = []
    for size in range(n, 0, -1):
        choice, index = divmod(index, factorial(size - 1))
        chosen.append(remaining.pop(choice))
    return "".join(map(str, chosen))