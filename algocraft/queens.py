"""Placing N queens on an N x N board so that no two attack each other."""

from __future__ import annotations

Board = list[list[int]]


def _empty_board(n: int) -> Board:
    if n < 0:
        raise ValueError("board size must not be negative")
    return [[0] * n for _ in range(n)]


def is_safe(board: Board, row: int, col: int) -> bool:
    """Return True if a queen at (row, col) is not attacked from the columns to its left."""
    size = len(board)
    if any(board[row][:col]):
        return False
    upper_left = zip(range(row, -1, -1), range(col, -1, -1))
    if any(board[r][c] for r, c in upper_left):
        return False
    lower_left = zip(range(row, size), range(col, -1, -1))
    return not any(board[r][c] for r, c in lower_left)


def solve_queens(n: int) -> Board | None:
    """Place n queens column by column; return the board, or None if impossible."""
    board = _empty_board(n)

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if is_safe(board, row, col):
                board[row][col] = 1
                if place(col + 1):
                    return True
                board[row][col] = 0
        return False

    return board if place(0) else None


def solve_queens_fast(n: int) -> Board | None:
    """Same search as solve_queens, tracking taken rows and diagonals in sets."""
    board = _empty_board(n)
    rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if row in rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            board[row][col] = 1
            rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            if place(col + 1):
                return True
            board[row][col] = 0
            rows.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return False

    return board if place(0) else None


def format_board(board: Board) -> str:
    """Render a board with each cell as ' d ' and one line per row."""
    return "".join("".join(f" {cell} " for cell in row) + "\n" for row in board)