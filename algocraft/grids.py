"""Grid and array counting problems solved by dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 1_000_000_007

_OPEN = "."


def count_grid_paths(grid: Sequence[str]) -> int:
    """Count right/down paths over '.' cells from top-left to bottom-right, modulo MOD."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must have equal length")
    above = [0] * width
    for r, row in enumerate(grid):
        current: list[int] = []
        for c, cell in enumerate(row):
            if cell != _OPEN:
                current.append(0)
            elif r == 0 and c == 0:
                current.append(1)
            else:
                left = current[c - 1] if c else 0
                current.append((left + above[c]) % MOD)
        above = current
    return above[-1]


def count_arrays(values: Sequence[int], upper: int) -> int:
    """Count arrays filling the zeros in values with 1..upper so neighbours differ by at most one."""
    if not values:
        return 0
    ways = [0] * (upper + 2)
    for position, value in enumerate(values):
        row = [0] * (upper + 2)
        for j in range(1, upper + 1):
            if value not in (0, j):
                continue
            if position == 0:
                row[j] = 1
            else:
                row[j] = (ways[j - 1] + ways[j] + ways[j + 1]) % MOD
        ways = row
    return sum(ways) % MOD


def min_rectangle_cuts(width: int, height: int) -> int:
    """Return the fewest straight cuts that split a rectangle into squares."""
    if width < 1 or height < 1:
        raise ValueError("rectangle sides must be positive")
    cuts = [[0] * (height + 1) for _ in range(width + 1)]
    for i in range(1, width + 1):
        for j in range(1, height + 1):
            if i == j:
                continue
            across = (cuts[i - k][j] + cuts[k][j] + 1 for k in range(1, i))
            along = (cuts[i][k] + cuts[i][j - k] + 1 for k in range(1, j))
            cuts[i][j] = min(*across, *along, float("inf"))
    return int(cuts[width][height])


def min_jumps(steps: Sequence[int]) -> int | None:
    """Return the fewest jumps from the first to the last position, or None if unreachable.

    steps[i] is the longest jump allowed from position i.
    """
    if not steps or steps[0] == 0:
        return None
    jumps: list[int | None] = [0]
    for i in range(1, len(steps)):
        jumps.append(
            next(
                (
                    count + 1
                    for j, (count, reach) in enumerate(zip(jumps, steps))
                    if count is not None and i <= j + reach
                ),
                None,
            )
        )
    return jumps[-1]