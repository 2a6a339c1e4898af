"""Moves that solve the Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """Moving one disk from one rod to another."""

    disk: int
    source: int
    target: int

    def __str__(self) -> str:
        return f"move disk {self.disk} from rod {self.source} to rod {self.target}"


def hanoi_moves(disks: int, source: int = 1, target: int = 3, spare: int = 2) -> Iterator[Move]:
    """Yield the moves carrying disks 1..disks from source to target."""
    if disks < 0:
        raise ValueError("the number of disks must not be negative")
    if disks == 0:
        return
    yield from hanoi_moves(disks - 1, source, spare, target)
    yield Move(disks, source, target)
    yield from hanoi_moves(disks - 1, spare, target, source)


def tower_of_hanoi(disks: int, source: int = 1, target: int = 3, spare: int = 2) -> int:
    """Print every move, one per line, and return how many moves were needed."""
    count = 0
    for move in hanoi_moves(disks, source, target, spare):
        print(move)
        count += 1
    return count