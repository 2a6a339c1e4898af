"""Backtracking, dynamic programming, number theory and bit manipulation algorithms."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "coins",
    "dialpad",
    "grids",
    "hanoi",
    "knapsack",
    "maze",
    "number_theory",
    "puzzles",
    "queens",
    "segment_tree",
    "sequences",
    "sudoku",
    "tug_of_war",
    "wildcard",
    "word_search",
]