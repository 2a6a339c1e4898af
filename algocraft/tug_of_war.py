"""Splitting numbers into two halves whose sums are as close as possible."""

from __future__ import annotations


def _half_toward_zero(total: int) -> int:
    half = abs(total) // 2
    return half if total >= 0 else -half


def tug_of_war(values: list[int]) -> tuple[list[int], list[int]]:
    """Return (first, second): first holds len(values)//2 items whose sum is nearest half the total.

    Both parts keep the original order. Among equally good splits the first
    one found by the search is kept.
    """
    items = list(values)
    count = len(items)
    half_count = count // 2
    target = _half_toward_zero(sum(items))
    chosen = [False] * count
    best: int | None = None
    best_choice = [False] * count

    def search(position: int, selected: int, current: int) -> None:
        nonlocal best, best_choice
        if position == count or half_count - selected > count - position:
            return
        search(position + 1, selected, current)
        selected += 1
        current += items[position]
        chosen[position] = True
        if selected == half_count:
            difference = abs(target - current)
            if best is None or difference < best:
                best = difference
                best_choice = chosen[:]
        else:
            search(position + 1, selected, current)
        chosen[position] = False

    search(0, 0, 0)
    first = [v for v, taken in zip(items, best_choice) if taken]
    second = [v for v, taken in zip(items, best_choice) if not taken]
    return first, second