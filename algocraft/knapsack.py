"""Knapsack-style selection: items under a budget and non-overlapping projects."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


def _best_total(costs: Sequence[int], gains: Sequence[int], limit: int) -> int:
    if len(costs) != len(gains):
        raise ValueError("costs and gains must have the same length")
    if limit < 0:
        raise ValueError("limit must not be negative")
    if any(cost < 0 for cost in costs):
        raise ValueError("costs must not be negative")
    best = [0] * (limit + 1)
    for cost, gain in zip(costs, gains):
        row = best[:]
        for budget in range(max(cost, 1), limit + 1):
            row[budget] = max(best[budget], gain + best[budget - cost])
        best = row
    return best[limit]


def knapsack(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the largest total value of items, each used at most once, within capacity."""
    return _best_total(weights, values, capacity)


def book_shop(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Return the most pages buyable with the budget, each book bought at most once."""
    return _best_total(prices, pages, budget)


@dataclass(frozen=True)
class Project:
    """A project running from start to end (inclusive) that pays reward."""

    start: int
    end: int
    reward: int


def max_project_reward(projects: Iterable[Project]) -> int:
    """Return the largest total reward of projects whose days do not overlap."""
    ordered = sorted(projects, key=lambda project: project.end)
    if any(project.start > project.end for project in ordered):
        raise ValueError("a project cannot end before it starts")
    ends = [project.end for project in ordered]
    best = [0]
    for project in ordered:
        before = bisect_left(ends, project.start)
        best.append(max(best[-1], project.reward + best[before]))
    return best[-1]