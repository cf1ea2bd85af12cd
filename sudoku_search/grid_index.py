"""Index math for the 9x9 board: (col, row) addresses, the nine 3x3 blocks, and the 27 groups (houses) the uniqueness rule runs over."""

# grid_index.py
# Coordinates are 0-based here; report keys ("r1c1", "b5") are 1-based like the UI layer.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache

from .errors import InvalidIndexError

BOARD_CELLS = 9 * 9


class BlockIdx(Enum):
    TL = 0
    TM = 1
    TR = 2
    ML = 3
    MM = 4
    MR = 5
    BL = 6
    BM = 7
    BR = 8

    def to_idx(self) -> int:
        return self.value

    @classmethod
    def from_idx(cls, idx: int) -> BlockIdx:
        return cls(idx)

    def top_left(self) -> BoardIdx:
        block_row, block_col = divmod(self.value, 3)
        return BoardIdx(block_col * 3, block_row * 3)


@dataclass(frozen=True)
class BoardIdx:
    col: int
    row: int
    idx: int = field(init=False, compare=False)

    def __post_init__(self):
        if not (0 <= self.col <= 8 and 0 <= self.row <= 8):
            raise InvalidIndexError(self.col, self.row)
        object.__setattr__(self, "idx", self.col + self.row * 9)

    @classmethod
    def from_idx(cls, idx: int) -> BoardIdx:
        if not 0 <= idx < BOARD_CELLS:
            raise InvalidIndexError(idx % 9, idx // 9)
        return cls(idx % 9, idx // 9)

    def block(self) -> BlockIdx:
        return BlockIdx.from_idx((self.row // 3) * 3 + self.col // 3)

    @property
    def key(self) -> str:
        return f"r{self.row + 1}c{self.col + 1}"


def row_cells(row: int) -> list[BoardIdx]:
    """Left to right."""
    return [BoardIdx(col, row) for col in range(9)]


def col_cells(col: int) -> list[BoardIdx]:
    """Top to bottom."""
    return [BoardIdx(col, row) for row in range(9)]


def block_cells(block: BlockIdx) -> list[BoardIdx]:
    origin = block.top_left()
    return [BoardIdx(origin.col + j, origin.row + i) for i in range(3) for j in range(3)]


def all_cells() -> list[BoardIdx]:
    """Row-major: (0,0), (1,0), ... (8,8)."""
    return [BoardIdx(col, row) for row in range(9) for col in range(9)]


def group_name(kind: str, n: int) -> str:
    return f"{kind}{n + 1}"


@lru_cache(maxsize=None)
def all_groups() -> tuple[tuple[str, tuple[BoardIdx, ...]], ...]:
    """The 27 houses as (name, cells): columns, then rows, then blocks."""
    groups = [(group_name("c", c), tuple(col_cells(c))) for c in range(9)]
    groups += [(group_name("r", r), tuple(row_cells(r))) for r in range(9)]
    groups += [(group_name("b", b.to_idx()), tuple(block_cells(b))) for b in BlockIdx]
    return tuple(groups)


@lru_cache(maxsize=None)
def peers(idx: BoardIdx) -> tuple[BoardIdx, ...]:
    """The 20 other cells sharing a row, column or block with ``idx``."""
    seen = {}
    for cell in block_cells(idx.block()) + col_cells(idx.col) + row_cells(idx.row):
        if cell != idx:
            seen.setdefault(cell, None)
    return tuple(seen)
