"""Enumerating every route a rat can take through a square maze."""

from __future__ import annotations

from collections.abc import Iterator

Grid = list[list[int]]

_MOVES = ((1, 0), (0, 1), (-1, 0), (0, -1))


def maze_paths(maze: Grid) -> Iterator[Grid]:
    """Yield each route from the top-left to the bottom-right cell as a 0/1 grid.

    Open cells hold 1. Moves are tried down, right, up, left; a route never
    revisits a cell.
    """
    size = len(maze)
    if any(len(row) != size for row in maze):
        raise ValueError("maze must be square")
    route = [[0] * size for _ in range(size)]

    def walk(x: int, y: int) -> Iterator[Grid]:
        if x == size - 1 and y == size - 1:
            route[x][y] = 1
            yield [row[:] for row in route]
        if not (0 <= x < size and 0 <= y < size) or not maze[x][y] or route[x][y]:
            return
        route[x][y] = 1
        for dx, dy in _MOVES:
            yield from walk(x + dx, y + dy)
        route[x][y] = 0

    yield from walk(0, 0)


def format_grid(grid: Grid) -> str:
    """Render a grid with each cell followed by a space and one line per row."""
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in grid)