# types_sudoku.py
from __future__ import annotations

from typing import Any, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty / undecided)."""

CellKey = str
"""1-based cell key as used in reports, e.g. 'r4c7'."""


class Issue(TypedDict, total=False):
    """One structural violation found on a board."""

    type: str  # 'duplicate' or 'contradiction'
    unit: str  # house name: 'r1'..'r9', 'c1'..'c9', 'b1'..'b9'
    digit: int  # duplicated digit (duplicates only)
    cells: list[CellKey]  # offending cells inside the unit


class SolveReport(TypedDict, total=False):
    """JSON payload written by the CLI (--json) and returned by the API."""

    puzzle: str  # source path or '<inline>'
    initial: Grid
    solved: bool
    grid: Grid | None
    issues: list[Issue]
    stats: dict[str, Any]
