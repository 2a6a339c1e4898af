"""Counting and optimising ways to reach sums with coins and dice."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

MOD = 1_000_000_007
MAX_DICE_SUM = 1_000_000
MAX_MONEY_SUM = 100_000

_INVERSE_OF_TWO = (MOD + 1) // 2


def _check_coins(coins: Sequence[int]) -> None:
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")


def _check_target(target: int) -> None:
    if target < 0:
        raise ValueError("target must not be negative")


def count_ordered_ways(coins: Sequence[int], target: int) -> int:
    """Count ordered sequences of coins summing to target, modulo MOD."""
    _check_coins(coins)
    _check_target(target)
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - coin] for coin in coins if coin <= amount) % MOD
    return ways[target]


def count_coin_combinations(coins: Sequence[int], target: int) -> int:
    """Count unordered multisets of coins summing to target, modulo MOD."""
    _check_coins(coins)
    _check_target(target)
    ways = [1] + [0] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def min_coins(coins: Sequence[int], target: int) -> int | None:
    """Return the fewest coins summing to target, or None if no combination does."""
    _check_coins(coins)
    _check_target(target)
    unreachable = float("inf")
    best: list[float] = [0] + [unreachable] * target
    for amount in range(1, target + 1):
        best[amount] = min(
            (best[amount - coin] + 1 for coin in coins if coin <= amount),
            default=unreachable,
        )
    return None if best[target] == unreachable else int(best[target])


def money_sums(coins: Sequence[int]) -> list[int]:
    """Return, in increasing order, every positive sum up to MAX_MONEY_SUM some subset of coins makes."""
    if any(coin < 0 for coin in coins):
        raise ValueError("coin values must not be negative")
    reachable = {0}
    for coin in coins:
        reachable |= {s + coin for s in reachable if s + coin <= MAX_MONEY_SUM}
    return sorted(s for s in reachable if s > 0)


def is_subset_sum(values: Sequence[int], total: int) -> bool:
    """Return True if some subset of values sums exactly to total."""
    if total < 0:
        raise ValueError("total must not be negative")
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    limit = (1 << (total + 1)) - 1
    reachable = 1
    for value in values:
        reachable = (reachable | (reachable << value)) & limit
    return bool(reachable >> total & 1)


def count_equal_partitions(n: int) -> int:
    """Count splits of 1..n into two sets of equal sum, modulo MOD."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    half = total // 2
    ways = [1] + [0] * half
    for number in range(1, n + 1):
        for amount in range(half, number - 1, -1):
            ways[amount] = (ways[amount] + ways[amount - number]) % MOD
    return ways[half] * _INVERSE_OF_TWO % MOD


def dice_combinations(n: int) -> int:
    """Count ordered dice throws (faces 1 to 6) summing to n, modulo MOD."""
    if not 0 <= n <= MAX_DICE_SUM:
        raise ValueError(f"n must be between 0 and {MAX_DICE_SUM}")
    if n == 0:
        return 0
    if n <= 6:
        return 2 ** (n - 1)
    window = deque((1, 2, 4, 8, 16, 32), maxlen=6)
    for _ in range(7, n + 1):
        window.append(sum(window) % MOD)
    return window[-1]