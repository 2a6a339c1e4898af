import pytest

from algocraft.grids import count_arrays, count_grid_paths, min_jumps, min_rectangle_cuts

EXAMPLE_GRID = ["....", ".*..", "...*", "*..."]


def test_grid_paths_example():
    assert count_grid_paths(EXAMPLE_GRID) == 3


def test_grid_paths_blocked_start():
    assert count_grid_paths(["*.", ".."]) == 0


def test_grid_paths_single_open_cell():
    assert count_grid_paths(["."]) == 1


def test_grid_paths_transpose_invariant():
    transposed = ["".join(column) for column in zip(*EXAMPLE_GRID)]
    assert count_grid_paths(transposed) == count_grid_paths(EXAMPLE_GRID)


def test_grid_paths_empty():
    with pytest.raises(ValueError):
        count_grid_paths([])


def test_count_arrays_example():
    assert count_arrays([2, 0, 2], 5) == 3


def test_count_arrays_single_unknown():
    assert count_arrays([0], 7) == 7


def test_count_arrays_fixed_valid():
    assert count_arrays([1, 2, 3], 3) == 1


def test_count_arrays_fixed_invalid():
    assert count_arrays([1, 3], 3) == 0


def test_count_arrays_empty():
    assert count_arrays([], 4) == 0


def test_count_arrays_reverse_invariant():
    values = [0, 3, 0, 0, 2, 0]
    assert count_arrays(values, 4) == count_arrays(values[::-1], 4)


def test_rectangle_cuts_example():
    assert min_rectangle_cuts(3, 5) == 3


def test_rectangle_square_needs_no_cut():
    assert min_rectangle_cuts(6, 6) == 0


def test_rectangle_cuts_symmetric():
    for w in range(1, 8):
        for h in range(1, 8):
            assert min_rectangle_cuts(w, h) == min_rectangle_cuts(h, w)


def test_rectangle_strip():
    for n in range(1, 10):
        assert min_rectangle_cuts(1, n) == n - 1


def test_rectangle_non_positive():
    with pytest.raises(ValueError):
        min_rectangle_cuts(0, 3)


def test_min_jumps_unit_steps():
    steps = [1, 1, 1, 1, 1]
    assert min_jumps(steps) == len(steps) - 1


def test_min_jumps_one_long_jump():
    assert min_jumps([4, 1, 1, 1, 1]) == 1


def test_min_jumps_unreachable():
    assert min_jumps([1, 0, 1]) is None


def test_min_jumps_stuck_at_start():
    assert min_jumps([0, 1]) is None
    assert min_jumps([]) is None