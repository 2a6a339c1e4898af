import pytest

from algocraft.queens import format_board, is_safe, solve_queens, solve_queens_fast


def _positions(board):
    return [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell]


def _assert_valid_solution(board, n):
    assert len(board) == n
    assert all(len(row) == n for row in board)
    queens = _positions(board)
    assert len(queens) == n
    assert len({r for r, _ in queens}) == n
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


@pytest.mark.parametrize("n", [1, 4, 5, 6, 7, 8])
def test_solve_queens_gives_valid_board(n):
    _assert_valid_solution(solve_queens(n), n)


@pytest.mark.parametrize("n", [1, 4, 5, 6, 7, 8])
def test_fast_solver_gives_valid_board(n):
    _assert_valid_solution(solve_queens_fast(n), n)


@pytest.mark.parametrize("n", range(0, 9))
def test_both_solvers_agree(n):
    assert solve_queens(n) == solve_queens_fast(n)


@pytest.mark.parametrize("n", [2, 3])
def test_no_solution(n):
    assert solve_queens(n) is None
    assert solve_queens_fast(n) is None


def test_four_queens_board():
    assert solve_queens(4) == [
        [0, 0, 1, 0],
        [1, 0, 0, 0],
        [0, 0, 0, 1],
        [0, 1, 0, 0],
    ]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        solve_queens(-1)
    with pytest.raises(ValueError):
        solve_queens_fast(-2)


def test_is_safe_checks_row_and_diagonals():
    board = [[1, 0, 0], [0, 0, 0], [0, 0, 0]]
    assert is_safe(board, 0, 1) is False
    assert is_safe(board, 1, 1) is False
    assert is_safe(board, 2, 1) is True


def test_is_safe_checks_lower_diagonal():
    board = [[0, 0, 0], [0, 0, 0], [1, 0, 0]]
    assert is_safe(board, 1, 1) is False
    assert is_safe(board, 0, 1) is True


def test_format_board():
    assert format_board([[1, 0], [0, 1]]) == " 1  0 \n 0  1 \n"


def test_format_board_line_count_matches_solution():
    text = format_board(solve_queens(6))
    lines = text.splitlines()
    assert len(lines) == 6
    assert all(line.split() .count("1") == 1 for line in lines)