# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "sudoku_search" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


CLASSIC = """
5 3 x | x 7 x | x x x
6 x x | 1 9 5 | x x x
x 9 8 | x x x | x 6 x
------+-------+------
8 x x | x 6 x | x x 3
4 x x | 8 x 3 | x x 1
7 x x | x 2 x | x x 6
------+-------+------
x 6 x | x x x | 2 8 x
x x x | 4 1 9 | x x 5
x x x | x 8 x | x 7 9
"""

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# Needs real branching, not just forced cells.
HARD = """
8xxxxxxxx
xx36xxxxx
x7xx9x2xx
x5xxx7xxx
xxxx457xx
xxx1xxx3x
xx1xxxx68
xx85xxx1x
x9xxxx4xx
"""


@pytest.fixture
def classic():
    return CLASSIC


@pytest.fixture
def classic_solution():
    return [row[:] for row in CLASSIC_SOLUTION]


@pytest.fixture
def hard():
    return HARD


def _houses(grid):
    for i in range(9):
        yield grid[i]
        yield [grid[r][i] for r in range(9)]
    for b in range(9):
        r0, c0 = 3 * (b // 3), 3 * (b % 3)
        yield [grid[r0 + i][c0 + j] for i in range(3) for j in range(3)]


@pytest.fixture
def assert_complete():
    """Every row, column and block holds 1..9 exactly once."""

    def check(grid):
        assert len(grid) == 9
        for house in _houses(grid):
            assert sorted(house) == list(range(1, 10))

    return check
