# sudoku_solve_api.py
# Optional FastAPI wrapper for the solver.
# Run with: uvicorn apps.api.sudoku_solve_api:app --reload

from fastapi import FastAPI
from pydantic import BaseModel, field_validator, model_validator

from sudoku_search.board import Board
from sudoku_search.config import SolverConfig
from sudoku_search.search import Solver
from sudoku_search.text_io import render_board

app = FastAPI(title="Sudoku Search API")

# Server-side logs stay off; the response carries the stats instead.
solver = Solver(SolverConfig(quiet=True))


def _check_grid(grid: list[list[int]] | None) -> list[list[int]] | None:
    if grid is None:
        return grid
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("grid must be 9 rows of 9 integers")
    if any(not 0 <= v <= 9 for row in grid for v in row):
        raise ValueError("grid values must be 0 (empty) or 1..9")
    return grid


class PuzzleModel(BaseModel):
    puzzle: str | None = None
    grid: list[list[int]] | None = None

    @field_validator("grid")
    @classmethod
    def grid_shape(cls, grid):
        return _check_grid(grid)

    @model_validator(mode="after")
    def one_source(self):
        if (self.puzzle is None) == (self.grid is None):
            raise ValueError("send exactly one of 'puzzle' or 'grid'")
        return self

    def to_board(self) -> Board:
        if self.grid is not None:
            return Board.from_grid(self.grid)
        return Board.from_str(self.puzzle)


class TextModel(BaseModel):
    puzzle: str


@app.post("/parse")
def api_parse(payload: TextModel):
    return {"grid": Board.from_str(payload.puzzle).to_grid()}


@app.post("/verify")
def api_verify(payload: PuzzleModel):
    board = payload.to_board()
    return {"ok": board.verify(), "issues": board.issues()}


@app.post("/solve")
def api_solve(payload: PuzzleModel):
    board = payload.to_board()
    result = solver.solve(board)
    return {
        "solved": result.solved,
        "grid": result.board.to_grid() if result.solved else None,
        "text": render_board(result.board) if result.solved else None,
        "issues": board.issues(),
        "stats": result.stats.as_dict(),
    }
