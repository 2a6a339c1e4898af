"""Finding dictionary words spelled by adjacent cells of a letter board."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TrieNode:
    """A prefix-tree node; word is set on the node that ends a dictionary word."""

    word: str = ""
    children: dict[str, TrieNode] = field(default_factory=dict)

    def insert(self, word: str) -> None:
        """Add a word below this node."""
        node = self
        for letter in word:
            node = node.children.setdefault(letter, TrieNode())
        node.word = word


def build_trie(words: list[str]) -> TrieNode:
    """Return the root of a trie holding every word."""
    root = TrieNode()
    for word in words:
        root.insert(word)
    return root


def _search(board, node, row, col, visited, found):
    if (row, col) in visited:
        return
    child = node.children.get(board[row][col])
    if child is None:
        return
    if child.word:
        found.append(child.word)
        child.word = ""
    visited.add((row, col))
    if row > 0:
        _search(board, child, row - 1, col, visited, found)
    if col > 0:
        _search(board, child, row, col - 1, visited, found)
    if row < len(board) - 1:
        _search(board, child, row + 1, col, visited, found)
    if col < len(board[0]) - 1:
        _search(board, child, row, col + 1, visited, found)
    visited.discard((row, col))


def find_words(board: list[list[str]], words: list[str]) -> list[str]:
    """Return words traced from each starting cell in row-major order.

    A word is reported at most once per starting cell, but may be reported
    again from another starting cell.
    """
    found: list[str] = []
    for row in range(len(board)):
        for col in range(len(board[0])):
            _search(board, build_trie(words), row, col, set(), found)
    return found