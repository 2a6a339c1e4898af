"""Wildcard matching where '?' matches one character and '*' any run of characters."""

from __future__ import annotations


def is_match(text: str, pattern: str) -> bool:
    """Return True if the whole text matches the whole pattern."""
    i = j = 0
    star = -1
    resume = -1
    while i < len(text):
        if j < len(pattern) and pattern[j] in (text[i], "?"):
            i += 1
            j += 1
        elif j < len(pattern) and pattern[j] == "*":
            star = j
            resume = i
            j += 1
        elif star != -1:
            j = star + 1
            resume += 1
            i = resume
        else:
            return False
    while j < len(pattern) and pattern[j] == "*":
        j += 1
    return j == len(pattern)