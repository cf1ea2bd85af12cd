"""Backtracking search over Board clones: single-pass forced-cell propagation, minimum-remaining-candidates branching, and an optional thread-pool race across sibling branches."""

# search.py
# Each node:
#   1) verify() or prune
#   2) one row-major pass: 0 candidates -> prune, 1 candidate -> play it now,
#      otherwise remember the first cell with the fewest candidates
#   3) nothing left unplayed -> solved
#   4) branch on the remembered cell, digits ascending, one clone per digit
# The pass does not loop to a fixed point; cells forced by this pass are caught by the child's pass.

from __future__ import annotations

import os
import threading
import time
from concurrent.futures import Executor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field, fields

from .board import Board
from .config import SolverConfig
from .grid_index import BOARD_CELLS, BoardIdx, all_cells
from .logs import format_stats, log

_SCAN_ORDER = tuple(all_cells())


@dataclass
class SolveStats:
    nodes: int = 0
    forced: int = 0
    branches: int = 0
    dead_ends: int = 0
    elapsed: float = 0.0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def add(self, **counts: int) -> None:
        with self._lock:
            for name, n in counts.items():
                setattr(self, name, getattr(self, name) + n)

    def counts(self) -> dict[str, int]:
        with self._lock:
            return {name: getattr(self, name) for name in ("nodes", "forced", "branches", "dead_ends")}

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self) if not f.name.startswith("_")}


@dataclass
class _Context:
    executor: Executor | None
    stats: SolveStats
    stop: threading.Event
    width: int = 1


def _select(board: Board, stats: SolveStats) -> tuple[bool, BoardIdx | None]:
    """Propagation pass. Returns (alive, branch cell); branch cell None means nothing left to decide."""
    best = None
    best_count = 10
    played = board.played
    for idx in _SCAN_ORDER:
        if idx.idx in played:
            continue
        cell = board.get(idx)
        n = cell.count()
        if n == 0:
            return False, None
        if n == 1:
            board.play_cell(idx, cell.possibilities()[0])
            stats.add(forced=1)
            continue
        if n < best_count:
            best_count = n
            best = idx
    return True, best


def _expand(board: Board, ctx: _Context) -> tuple[Board | None, list[Board]]:
    """One node. (board, []) when solved, (None, children) otherwise; no children is a dead end."""
    ctx.stats.add(nodes=1)
    if not board.verify():
        ctx.stats.add(dead_ends=1)
        return None, []

    alive, nxt = _select(board, ctx.stats)
    if not alive:
        ctx.stats.add(dead_ends=1)
        return None, []
    if nxt is None:
        return board, []

    choices = board.get(nxt).possibilities()
    ctx.stats.add(branches=len(choices))
    children = []
    for digit in choices:
        child = board.clone()
        child.play_cell(nxt, digit)
        children.append(child)
    return None, children


def _solve_node(board: Board, ctx: _Context) -> Board | None:
    if ctx.stop.is_set():
        return None
    solution, children = _expand(board, ctx)
    if solution is not None:
        return solution
    for child in children:
        result = _solve_node(child, ctx)
        if result is not None:
            return result
    return None


def _race(board: Board, ctx: _Context) -> Board | None:
    """Widen the tree on this thread until the pool can be kept busy, then race the frontier.

    Frontier boards run on the pool, each searched sequentially, so workers
    never wait on the pool they run in. The first branch to come back solved wins.
    """
    frontier = [board]
    while frontier and len(frontier) < ctx.width:
        solution, children = _expand(frontier.pop(0), ctx)
        if solution is not None:
            return solution
        frontier.extend(children)
    if not frontier:
        return None

    futures = [ctx.executor.submit(_solve_node, node, ctx) for node in frontier]
    for fut in as_completed(futures):
        result = fut.result()
        if result is not None:
            ctx.stop.set()
            return result
    return None


def solve(
    board: Board,
    *,
    workers: int | None = None,
    parallel: bool = True,
    stats: SolveStats | None = None,
) -> Board | None:
    """Solved copy of ``board``, or None when no completion exists.

    The input board is left untouched. With ``parallel`` the tree is
    expanded breadth-first until there is one open branch per worker,
    those branches race on a ThreadPoolExecutor and whichever solution
    arrives first is returned; stragglers see the stop flag at their next
    node and are not waited for. ``stats`` receives a snapshot taken at
    return, so late stragglers do not move it.
    """
    stats = stats if stats is not None else SolveStats()
    live = SolveStats()
    stop = threading.Event()
    root = board.clone()
    t0 = time.perf_counter()

    if not parallel or workers == 1:
        result = _solve_node(root, _Context(None, live, stop))
    else:
        width = workers or min(32, (os.cpu_count() or 1) + 4)
        executor = ThreadPoolExecutor(max_workers=width, thread_name_prefix="sudoku-branch")
        try:
            result = _race(root, _Context(executor, live, stop, width))
        finally:
            stop.set()
            executor.shutdown(wait=False, cancel_futures=True)

    stats.add(**live.counts())
    stats.elapsed = time.perf_counter() - t0
    return result


@dataclass
class SolveResult:
    board: Board | None
    stats: SolveStats

    @property
    def solved(self) -> bool:
        return self.board is not None


class Solver:
    def __init__(self, config: SolverConfig | None = None):
        self.config = config or SolverConfig()

    def solve(self, board: Board) -> SolveResult:
        cfg = self.config
        stats = SolveStats()
        log(f"solve: {BOARD_CELLS - len(board.played)} open cells, "
            f"parallel={cfg.parallel}, workers={cfg.workers or 'auto'}", quiet=cfg.quiet)
        result = solve(board, workers=cfg.workers, parallel=cfg.parallel, stats=stats)
        outcome = "solved" if result is not None else "no solution"
        log(f"solve: {outcome}, {format_stats(stats)}", quiet=cfg.quiet)
        return SolveResult(result, stats)
