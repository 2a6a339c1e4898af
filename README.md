# algocraft

Classic algorithms as plain, importable Python functions: backtracking
puzzles, dynamic programming, number theory, the Tower of Hanoi and
fixed-width bit manipulation. The package has no runtime dependencies.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algocraft.queens` | `is_safe`, `solve_queens`, `solve_queens_fast`, `format_board` |
| `algocraft.maze` | `maze_paths`, `format_grid` |
| `algocraft.sudoku` | `is_valid`, `is_solved`, `solve_sudoku`, `format_sudoku` |
| `algocraft.dialpad` | `KEYPAD`, `letter_combinations` |
| `algocraft.tug_of_war` | `tug_of_war` |
| `algocraft.wildcard` | `is_match` |
| `algocraft.word_search` | `TrieNode`, `build_trie`, `find_words` |
| `algocraft.coins` | `count_ordered_ways`, `count_coin_combinations`, `min_coins`, `money_sums`, `is_subset_sum`, `count_equal_partitions`, `dice_combinations` |
| `algocraft.knapsack` | `Project`, `knapsack`, `book_shop`, `max_project_reward` |
| `algocraft.sequences` | `longest_common_subsequence`, `lcs_length`, `edit_distance` |
| `algocraft.grids` | `count_grid_paths`, `count_arrays`, `min_rectangle_cuts`, `min_jumps` |
| `algocraft.segment_tree` | `LazySegmentTree`, `prefix_sum_queries` |
| `algocraft.puzzles` | `count_compressions`, `max_xor`, `make_simple`, `has_disjoint_ab_ba`, `optimal_sequence`, `removal_game`, `min_digit_removals`, `count_bsts` |
| `algocraft.number_theory` | `is_prime`, `sieve`, `square_root`, `newton_raphson`, `gcd`, `extended_gcd`, `lcm` |
| `algocraft.hanoi` | `Move`, `hanoi_moves`, `tower_of_hanoi` |
| `algocraft.bits` | `to_signed`, `bitwise_and`, `bitwise_or`, `bitwise_xor`, `complement`, `shift_left`, `shift_right`, `xor_upto`, `largest_power`, `count_set_bits` |

Counting functions in `algocraft.coins` and `algocraft.grids` return their
results modulo `MOD` (1 000 000 007).

## Examples

```python
from algocraft.dialpad import letter_combinations
from algocraft.wildcard import is_match
from algocraft.queens import solve_queens, format_board
from algocraft.sequences import edit_distance
from algocraft.number_theory import extended_gcd

letter_combinations("34")
# ['dg', 'dh', 'di', 'eg', 'eh', 'ei', 'fg', 'fh', 'fi']

is_match("cabcab", "*ab")        # True

print(format_board(solve_queens(4)))

edit_distance("LOVE", "MOVIE")   # 2

extended_gcd(35, 15)             # (5, 1, -2): 35*1 + 15*(-2) == 5
```

Word search over a letter board, reporting words from each starting cell in
row-major order:

```python
from algocraft.word_search import find_words

board = [list("oaan"), list("etae"), list("ihkr"), list("iflv")]
find_words(board, ["oath", "pea", "eat", "rain"])   # ['oath', 'eat']
```

Every route through a maze, as 0/1 grids:

```python
from algocraft.maze import maze_paths, format_grid

maze = [[1, 0, 0, 0], [1, 1, 0, 1], [1, 1, 0, 0], [0, 1, 1, 1]]
for route in maze_paths(maze):
    print(format_grid(route))
```

Tower of Hanoi moves come as `Move` records; `tower_of_hanoi` prints them
and returns the number of moves:

```python
from algocraft.hanoi import hanoi_moves, tower_of_hanoi

for move in hanoi_moves(3, 1, 3, 2):
    print(move)            # move disk 1 from rod 1 to rod 3 ...

tower_of_hanoi(3)          # prints 7 lines, returns 7
```

## When there is no answer

Searches that can fail return `None` rather than raising: `solve_queens`,
`solve_queens_fast` and `solve_sudoku` when no placement exists, `min_coins`
when the target cannot be reached, and `min_jumps` when the last position is
out of reach. Inputs outside a function's domain (negative sizes, non-positive
coins, a non-square maze, a sudoku grid that is not 9 x 9, an out-of-range
segment tree index, and so on) raise `ValueError`.

## What the package does not do

There is no command-line program: nothing reads puzzles or numbers from
standard input. Each function takes its input as arguments and returns its
result; only `tower_of_hanoi` prints.