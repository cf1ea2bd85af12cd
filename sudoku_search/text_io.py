"""Thin text collaborators around the board: puzzle file reading, clue parsing, and plain-text rendering."""

# text_io.py
# Puzzle notation: '1'..'9' = clue, 'x'/'X' = empty, everything else is ignored,
# so "5 3 x | x 7 x" and "53xx7x" parse the same. Missing trailing cells are empty.

from __future__ import annotations

from pathlib import Path

from .errors import PuzzleFileError
from .grid_index import BOARD_CELLS, BoardIdx, all_cells

EMPTY_MARK = "x"


def tokens(text: str):
    for ch in text:
        ch = ch.lower()
        if ch in "123456789":
            yield int(ch)
        elif ch == EMPTY_MARK:
            yield None


def parse_clues(text: str) -> list[tuple[BoardIdx, int | None]]:
    """81 (address, digit-or-None) pairs in row-major order."""
    values = list(tokens(text))[:BOARD_CELLS]
    values += [None] * (BOARD_CELLS - len(values))
    return list(zip(all_cells(), values))


def read_puzzle(path: str | Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise PuzzleFileError(path, reason=str(e)) from e


def _render(board, fmt) -> str:
    lines = []
    for row in range(9):
        lines.append("".join(f"{fmt(board.get(BoardIdx(col, row)))} " for col in range(9)))
    return "\n".join(lines) + "\n"


def render_board(board) -> str:
    """One row per line; digit if decided, '?' if open, 'F' if contradicted."""
    return _render(board, str)


def render_board_debug(board) -> str:
    return _render(board, repr)
