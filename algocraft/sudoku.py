"""Solving 9 x 9 sudoku puzzles by backtracking."""

from __future__ import annotations

Grid = list[list[int]]

_SIZE = 9


def is_valid(grid: Grid, row: int, col: int) -> bool:
    """Return True if the value at (row, col) repeats nowhere in its row, column or box."""
    value = grid[row][col]
    box_row, box_col = row // 3 * 3, col // 3 * 3
    for r in range(box_row, box_row + 3):
        for c in range(box_col, box_col + 3):
            if r != row and c != col and grid[r][c] == value:
                return False
    if any(grid[r][col] == value for r in range(_SIZE) if r != row):
        return False
    return not any(grid[row][c] == value for c in range(_SIZE) if c != col)


def is_solved(grid: Grid) -> bool:
    """Return True if every cell of the grid is valid."""
    return all(is_valid(grid, r, c) for r in range(_SIZE) for c in range(_SIZE))


def _checked_copy(grid: Grid) -> Grid:
    if len(grid) != _SIZE or any(len(row) != _SIZE for row in grid):
        raise ValueError("sudoku grid must be 9 x 9")
    if any(not 0 <= cell <= 9 for row in grid for cell in row):
        raise ValueError("sudoku cells must be between 0 and 9")
    return [list(row) for row in grid]


def _fill(cells: Grid, index: int) -> bool:
    if index == _SIZE * _SIZE:
        return is_solved(cells)
    row, col = divmod(index, _SIZE)
    if cells[row][col]:
        return is_valid(cells, row, col) and _fill(cells, index + 1)
    for value in range(1, 10):
        cells[row][col] = value
        if is_valid(cells, row, col) and _fill(cells, index + 1):
            return True
    cells[row][col] = 0
    return False


def solve_sudoku(grid: Grid) -> Grid | None:
    """Return a solved copy of the grid (0 marks an empty cell), or None if none exists."""
    cells = _checked_copy(grid)
    return cells if _fill(cells, 0) else None


def format_sudoku(grid: Grid) -> str:
    """Render a grid with each value followed by a space and one line per row."""
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in grid)