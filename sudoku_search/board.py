"""Board state: 81 possibility sets plus the set of played cells. Owns the elimination rule (play_cell) and the structural check (verify)."""

# board.py
# Invariant: once a cell is played with digit d, no peer of it still has d as a candidate.
# A Board is owned by exactly one search branch; branches clone before mutating.

from __future__ import annotations

from collections.abc import Iterable

from types_sudoku import Grid, Issue

from .grid_index import BOARD_CELLS, BoardIdx, all_cells, all_groups, peers
from .possibilities import PossibilitySet
from .text_io import parse_clues, render_board, render_board_debug


class Board:
    __slots__ = ("cells", "played", "clues")

    def __init__(self):
        self.cells = [PossibilitySet.all_possible() for _ in range(BOARD_CELLS)]
        self.played: set[int] = set()
        # address -> given digit, as typed; read-only after construction
        self.clues: dict[int, int] = {}

    # ---------- construction ----------
    @classmethod
    def from_clues(cls, clues: Iterable[tuple[BoardIdx, int | None]]) -> Board:
        board = cls()
        for idx, digit in clues:
            if digit is not None:
                board.clues[idx.idx] = digit
                board.play_cell(idx, digit)
        return board

    @classmethod
    def from_str(cls, text: str) -> Board:
        return cls.from_clues(parse_clues(text))

    @classmethod
    def from_grid(cls, grid: Grid) -> Board:
        """9x9 rows of ints, 0 = empty."""
        clues = []
        for r, row in enumerate(grid):
            for c, value in enumerate(row):
                clues.append((BoardIdx(c, r), value or None))
        return cls.from_clues(clues)

    def clone(self) -> Board:
        other = Board.__new__(Board)
        other.cells = [cell.copy() for cell in self.cells]
        other.played = set(self.played)
        other.clues = self.clues
        return other

    __copy__ = clone

    # ---------- access ----------
    def get(self, idx: BoardIdx) -> PossibilitySet:
        return self.cells[idx.idx]

    def set_raw(self, idx: BoardIdx, cell: PossibilitySet) -> None:
        self.cells[idx.idx] = cell

    def is_played(self, idx: BoardIdx) -> bool:
        return idx.idx in self.played

    def is_solved(self) -> bool:
        return len(self.played) == BOARD_CELLS and self.verify()

    # ---------- rules ----------
    def play_cell(self, idx: BoardIdx, digit: int) -> None:
        """Commit ``digit`` at ``idx`` and strike it from every peer. Mutates self."""
        self.set_raw(idx, PossibilitySet.fixed(digit))
        self.played.add(idx.idx)
        for peer in peers(idx):
            self.cells[peer.idx].set_possible(digit, False)

    def verify(self) -> bool:
        """False if any group holds an empty cell or the same decided digit twice."""
        cells = self.cells
        for _, group in all_groups():
            seen = 0
            for idx in group:
                bits = cells[idx.idx].important_bits()
                if not bits:
                    return False
                if bits & (bits - 1) == 0:  # singleton
                    if bits & seen:
                        return False
                    seen |= bits
        return True

    def issues(self) -> list[Issue]:
        """Every violation per house, read off the given clues first.

        A repeated clue wipes the earlier copy during propagation, so clue
        cells report the digit as typed and only non-clue cells can report
        a contradiction.
        """
        out: list[Issue] = []
        for name, group in all_groups():
            empty = []
            by_digit: dict[int, list[str]] = {}
            for idx in group:
                given = self.clues.get(idx.idx)
                if given is not None:
                    by_digit.setdefault(given, []).append(idx.key)
                    continue
                opts = self.get(idx).possibilities()
                if not opts:
                    empty.append(idx.key)
                elif len(opts) == 1:
                    by_digit.setdefault(opts[0], []).append(idx.key)
            if empty:
                out.append({"type": "contradiction", "unit": name, "cells": empty})
            for digit, keys in sorted(by_digit.items()):
                if len(keys) > 1:
                    out.append({"type": "duplicate", "unit": name, "digit": digit, "cells": keys})
        return out

    # ---------- export ----------
    def to_grid(self) -> Grid:
        grid = [[0] * 9 for _ in range(9)]
        for idx in all_cells():
            opts = self.get(idx).possibilities()
            if len(opts) == 1:
                grid[idx.row][idx.col] = opts[0]
        return grid

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells and self.played == other.played

    __hash__ = None

    def __str__(self):
        return render_board(self)

    def __repr__(self):
        return render_board_debug(self)
