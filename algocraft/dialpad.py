"""Letter combinations that a phone keypad digit string can spell."""

from __future__ import annotations

from itertools import product

KEYPAD = {
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
    "0": " ",
    "*": "*",
    "#": "#",
}


def letter_combinations(digits: str) -> list[str]:
    """Return every string the keys can spell; keys with no letters spell nothing."""
    if not digits:
        return []
    return ["".join(letters) for letters in product(*(KEYPAD.get(d, "") for d in digits))]