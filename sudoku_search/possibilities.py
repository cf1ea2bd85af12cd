"""Per-cell candidate bitset: digit d (1..9) lives in bit d, bit 0 and bits above 9 carry no meaning."""

# possibilities.py
# PossibilitySet is the only cell representation the board and search use.
# - fixed / all_possible / none_possible constructors
# - point query + mutation
# - ascending candidate list and count

from __future__ import annotations

from .errors import InvalidDigitError

DIGITS = range(1, 10)

# Only bits 1..9 carry information.
IMPORTANT_BITS = 0b1111111110
ALL_BITS = 0xFFFF


def check_digit(digit: int) -> int:
    if isinstance(digit, bool) or not isinstance(digit, int) or not 1 <= digit <= 9:
        raise InvalidDigitError(digit)
    return digit


class PossibilitySet:
    """Which digits are still possible for one cell.

    A single bit set means the cell is decided, no bits set means the
    branch holding this cell is dead. Equality ignores bit 0 and the
    high bits that ``all_possible`` leaves switched on.
    """

    __slots__ = ("bits",)

    def __init__(self, bits: int = 0):
        self.bits = bits

    @classmethod
    def fixed(cls, digit: int) -> PossibilitySet:
        return cls(1 << check_digit(digit))

    @classmethod
    def all_possible(cls) -> PossibilitySet:
        return cls(ALL_BITS)

    @classmethod
    def none_possible(cls) -> PossibilitySet:
        return cls(0)

    def important_bits(self) -> int:
        return self.bits & IMPORTANT_BITS

    def is_possible(self, digit: int) -> bool:
        return (self.bits >> check_digit(digit)) & 1 == 1

    def set_possible(self, digit: int, possible: bool) -> None:
        if possible:
            self.bits |= 1 << check_digit(digit)
        else:
            self.bits &= ~(1 << check_digit(digit))

    def possibilities(self) -> list[int]:
        """Candidate digits in ascending order."""
        bits = self.bits
        return [d for d in DIGITS if (bits >> d) & 1]

    def count(self) -> int:
        return bin(self.important_bits()).count("1")

    def copy(self) -> PossibilitySet:
        return PossibilitySet(self.bits)

    def __eq__(self, other):
        if not isinstance(other, PossibilitySet):
            return NotImplemented
        return self.important_bits() == other.important_bits()

    # mutable through set_possible
    __hash__ = None

    def __str__(self):
        opts = self.possibilities()
        if not opts:
            return "F"
        if len(opts) == 1:
            return str(opts[0])
        return "?"

    def __repr__(self):
        return ",".join(str(d) for d in self.possibilities())
