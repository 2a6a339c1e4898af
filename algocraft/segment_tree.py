"""Range sums with range additions, answered by a lazily propagated segment tree."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


class LazySegmentTree:
    """Sums over index ranges of a fixed-length sequence, with additions over ranges."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._size = len(items)
        slots = 4 * max(self._size, 1)
        self._tree = [0] * slots
        self._lazy = [0] * slots
        if items:
            self._build(items, 1, 0, self._size - 1)

    def __len__(self) -> int:
        return self._size

    def _build(self, items: list[int], node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[node] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(items, 2 * node, lo, mid)
        self._build(items, 2 * node + 1, mid + 1, hi)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _push(self, node: int, lo: int, hi: int) -> None:
        pending = self._lazy[node]
        if not pending:
            return
        self._tree[node] += (hi - lo + 1) * pending
        if lo != hi:
            self._lazy[2 * node] += pending
            self._lazy[2 * node + 1] += pending
        self._lazy[node] = 0

    def _check_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end < self._size:
            raise ValueError(f"range [{start}, {end}] is outside 0..{self._size - 1}")

    def range_add(self, start: int, end: int, delta: int) -> None:
        """Add delta to every element with index in start..end (inclusive)."""
        self._check_range(start, end)
        self._add(1, 0, self._size - 1, start, end, delta)

    def _add(self, node: int, lo: int, hi: int, start: int, end: int, delta: int) -> None:
        self._push(node, lo, hi)
        if lo > end or hi < start:
            return
        if start <= lo and hi <= end:
            self._tree[node] += (hi - lo + 1) * delta
            if lo != hi:
                self._lazy[2 * node] += delta
                self._lazy[2 * node + 1] += delta
            return
        mid = (lo + hi) // 2
        self._add(2 * node, lo, mid, start, end, delta)
        self._add(2 * node + 1, mid + 1, hi, start, end, delta)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def query(self, start: int, end: int) -> int:
        """Return the sum of the elements with index in start..end (inclusive)."""
        self._check_range(start, end)
        return self._sum(1, 0, self._size - 1, start, end)

    def _sum(self, node: int, lo: int, hi: int, start: int, end: int) -> int:
        self._push(node, lo, hi)
        if lo > end or hi < start:
            return 0
        if start <= lo and hi <= end:
            return self._tree[node]
        mid = (lo + hi) // 2
        return self._sum(2 * node, lo, mid, start, end) + self._sum(
            2 * node + 1, mid + 1, hi, start, end
        )


def prefix_sum_queries(
    values: Sequence[int], queries: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Answer queries over the prefix sums of values; positions are 1-based.

    A query (1, i, u) sets value i to u. A query (2, a, b) asks for the sum of
    prefix sums a through b. The answers to the second kind are returned in order.
    """
    current = list(values)
    tree = LazySegmentTree(accumulate(current))
    last = len(current) - 1
    answers: list[int] = []
    for kind, first, second in queries:
        if kind == 1:
            position = first - 1
            if not 0 <= position <= last:
                raise ValueError(f"position {first} is outside 1..{len(current)}")
            delta = second - current[position]
            current[position] = second
            tree.range_add(position, last, delta)
        elif kind == 2:
            answers.append(tree.query(first - 1, second - 1))
        else:
            raise ValueError(f"unknown query kind {kind}")
    return answers