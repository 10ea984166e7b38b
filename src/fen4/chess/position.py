"""
A square on the 14x14 four player board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from fen4.core.exceptions import (
    ColumnInvalidError,
    PositionLengthError,
    PositionOutOfRangeError,
    RowInvalidError,
    RowNotANumberError,
)

# Four player boards are 14x14 (with the 3x3 corners walled off)
BOARD_SIZE = 14
COLUMN_NAMES = ascii_lowercase[:BOARD_SIZE]


@dataclass(frozen=True)
class Position:
    """Zero-based coordinates: row 0 is rank 1, col 0 is the a-file."""

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Position:
        """Algebraic notation: 'a1' - 'n14' get converted to (0,0) - (13,13)"""
        if not 2 <= len(sq) <= 3:
            raise PositionLengthError(sq)

        column_letter, row_text = sq[0], sq[1:]
        if column_letter not in COLUMN_NAMES:
            raise ColumnInvalidError(column_letter)

        # str.isdigit() alone would let through things like '²'
        if not (row_text.isascii() and row_text.isdigit()):
            raise RowNotANumberError(row_text)
        row = int(row_text)
        if not 1 <= row <= BOARD_SIZE:
            raise RowInvalidError(row)

        return cls(row - 1, COLUMN_NAMES.index(column_letter))

    def to_algebraic(self) -> str:
        if not self.is_within_bounds():
            raise PositionOutOfRangeError(self.row, self.col)
        return f"{COLUMN_NAMES[self.col]}{self.row + 1}"

    @classmethod
    def from_tuple(cls, row_col: tuple[int, int]) -> Position:
        row, col = row_col
        return cls(row, col)

    def to_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)
