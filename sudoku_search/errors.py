"""Exception types raised at the edges of the solver (bad input, unreadable puzzle files)."""

# errors.py
# A puzzle with no solution is NOT an error: solve() returns None for it.


class SudokuError(Exception):
    """Base class for everything this package raises on purpose."""


class InvalidDigitError(SudokuError, ValueError):
    def __init__(self, digit):
        super().__init__(f"Digit must be in 1..9, got {digit!r}")
        self.digit = digit


class InvalidIndexError(SudokuError, ValueError):
    def __init__(self, col, row):
        super().__init__(f"Cell (col={col!r}, row={row!r}) is outside the 9x9 board")
        self.col = col
        self.row = row


class PuzzleFileError(SudokuError):
    def __init__(self, path, reason: str = ""):
        msg = (
            f"Error finding file '{path}'!\n"
            "Make sure the path is entered correctly and the file exists."
        )
        super().__init__(msg)
        self.path = path
        self.reason = reason
