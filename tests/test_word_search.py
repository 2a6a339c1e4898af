from algocraft.word_search import TrieNode, build_trie, find_words

BOARD = [
    ["o", "a", "a", "n"],
    ["e", "t", "a", "e"],
    ["i", "h", "k", "r"],
    ["i", "f", "l", "v"],
]
DICTIONARY = ["oath", "pea", "eat", "rain"]


def _lookup(root, word):
    node = root
    for letter in word:
        node = node.children.get(letter)
        if node is None:
            return None
    return node


def test_source_example():
    assert sorted(find_words(BOARD, DICTIONARY)) == ["eat", "oath"]


def test_board_unchanged():
    board = [row[:] for row in BOARD]
    find_words(board, DICTIONARY)
    assert board == BOARD


def test_results_are_dictionary_words():
    assert set(find_words(BOARD, DICTIONARY)) <= set(DICTIONARY)


def test_no_words():
    assert find_words(BOARD, []) == []


def test_word_found_from_each_start_cell():
    assert find_words([["a", "a"]], ["a"]) == ["a", "a"]


def test_cells_not_reused():
    assert find_words([["a", "b"]], ["aba"]) == []


def test_build_trie_marks_word_ends():
    root = build_trie(DICTIONARY)
    for word in DICTIONARY:
        assert _lookup(root, word).word == word
    assert _lookup(root, "oat").word == ""
    assert _lookup(root, "xyz") is None


def test_insert_shares_prefixes():
    root = TrieNode()
    root.insert("tea")
    root.insert("ten")
    assert list(root.children) == ["t"]
    assert sorted(root.children["t"].children["e"].children) == ["a", "n"]