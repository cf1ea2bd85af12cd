"""CLI entry point: read a puzzle file, print the starting board, run the search, print the solved board (or 'Failed')."""


# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli                      # bundled example puzzle
#   python -m apps.cli.solve_cli puzzles/hard.txt --workers 4
#   python -m apps.cli.solve_cli puzzles/hard.txt --sequential --json report.json
import argparse, json, sys
from pathlib import Path

from sudoku_search.board import Board
from sudoku_search.config import load_config
from sudoku_search.errors import PuzzleFileError
from sudoku_search.logs import format_stats
from sudoku_search.search import Solver
from sudoku_search.text_io import read_puzzle


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a 9x9 Sudoku puzzle.")
    ap.add_argument("path", nargs="?", default=None,
                    help="puzzle file: digits 1-9 are clues, 'x' is empty, anything else is ignored")
    ap.add_argument("--config", type=str, default=None, help="YAML file with solver settings")
    ap.add_argument("--workers", type=int, default=None, help="thread pool size for branch racing")
    ap.add_argument("--sequential", action="store_true", help="disable the thread pool")
    ap.add_argument("--quiet", action="store_true", help="no timestamped progress lines")
    ap.add_argument("--stats", action="store_true", help="print search counters after solving")
    ap.add_argument("--json", type=str, default=None, help="also write a JSON report here")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(
        args.config,
        workers=args.workers,
        parallel=False if args.sequential else None,
        quiet=True if args.quiet else None,
    )
    filename = args.path or str(cfg.puzzle_path)

    try:
        board_str = read_puzzle(filename)
    except PuzzleFileError as e:
        print(e)
        return 1

    board = Board.from_str(board_str)
    print(board)
    result = Solver(cfg).solve(board)

    print("FINISHED!\n======\n")
    if result.solved:
        print(result.board)
    else:
        print("Failed")

    if args.stats:
        print(format_stats(result.stats))

    if args.json:
        payload = {
            "puzzle": filename,
            "initial": board.to_grid(),
            "solved": result.solved,
            "grid": result.board.to_grid() if result.solved else None,
            "issues": board.issues(),
            "stats": result.stats.as_dict(),
        }
        Path(args.json).write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
