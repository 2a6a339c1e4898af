"""Short counting, string and game puzzles."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from functools import lru_cache

MAX_REMOVAL_NUMBER = 1_000_000


def count_compressions(length: int, operations: Iterable[tuple[str, str]]) -> int:
    """Count strings of the given length that compress to 'a'.

    Each operation (pair, letter) replaces the two leading characters pair by
    letter; only the first character of pair matters for the next step back.
    """
    if length < 1:
        raise ValueError("length must be at least 1")
    sources: defaultdict[str, list[str]] = defaultdict(list)
    for pair, letter in operations:
        if not pair:
            raise ValueError("an operation needs a non-empty pair")
        sources[letter].append(pair[0])

    @lru_cache(maxsize=None)
    def ways(letter: str, size: int) -> int:
        if size == length:
            return 1
        return sum(ways(first, size + 1) for first in sources.get(letter, ()))

    return ways("a", 1)


def max_xor(low: int, high: int) -> int:
    """Return the largest a ^ b with low <= a <= b <= high."""
    if low < 0 or high < 0:
        raise ValueError("bounds must not be negative")
    return (1 << (low ^ high).bit_length()) - 1


def _next_letter(letter: str) -> str:
    return "a" if letter == "z" else chr(ord(letter) + 1)


def make_simple(text: str) -> str:
    """Change letters so that no two neighbours are equal, scanning left to right."""
    letters = list(text)
    for i in range(1, len(letters)):
        if letters[i] != letters[i - 1]:
            continue
        letters[i] = _next_letter(letters[i])
        if i + 1 < len(letters) and letters[i + 1] == letters[i]:
            letters[i] = _next_letter(letters[i])
    return "".join(letters)


def has_disjoint_ab_ba(text: str) -> bool:
    """Return True if text holds non-overlapping substrings "AB" and "BA"."""
    seen_ab = seen_ba = False
    overlap = False
    i = 0
    while i < len(text):
        triple = text[i : i + 3]
        pair = text[i : i + 2]
        if triple in ("ABA", "BAB"):
            if overlap:
                return True
            overlap = True
            i += 2
        elif pair == "AB" and not seen_ab:
            seen_ab = True
            i += 1
        elif pair == "BA" and not seen_ba:
            seen_ba = True
            i += 1
        if seen_ab and seen_ba:
            return True
        if overlap and (seen_ab or seen_ba):
            return True
        i += 1
    return False


def optimal_sequence(n: int) -> list[int]:
    """Return the numbers from 1 to n reached by the greedy use of *3, *2 and +1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    sequence = []
    while n >= 1:
        sequence.append(n)
        if n % 3 == 0:
            n //= 3
        elif n % 2 == 0:
            n //= 2
        else:
            n -= 1
    sequence.reverse()
    return sequence


def removal_game(values: Sequence[int]) -> int:
    """Return the first player's best score when both take from either end optimally."""
    count = len(values)
    score = [[0] * count for _ in range(count)]

    def get(i: int, j: int) -> int:
        return score[i][j] if i <= j else 0

    for span in range(1, count + 1):
        for i in range(count - span + 1):
            j = i + span - 1
            take_left = values[i] + min(get(i + 1, j - 1), get(i + 2, j))
            take_right = values[j] + min(get(i, j - 2), get(i + 1, j - 1))
            score[i][j] = max(take_left, take_right)
    return get(0, count - 1)


def min_digit_removals(n: int) -> int:
    """Return the fewest steps to reach 0, each step subtracting a digit of the number."""
    if not 0 <= n <= MAX_REMOVAL_NUMBER:
        raise ValueError(f"n must be between 0 and {MAX_REMOVAL_NUMBER}")
    steps = [0] * (n + 1)
    for number in range(1, n + 1):
        digits = {int(d) for d in str(number)} - {0}
        steps[number] = 1 + min(steps[number - d] for d in digits)
    return steps[n]


def count_bsts(n: int) -> int:
    """Return how many structurally different binary search trees hold keys 1..n."""
    if n < 0:
        raise ValueError("n must not be negative")
    trees = [1] * (n + 1)
    for size in range(2, n + 1):
        trees[size] = sum(trees[root - 1] * trees[size - root] for root in range(1, size + 1))
    return trees[n]