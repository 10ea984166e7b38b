"""
A complete FEN4 document: header, then the board.
----

FEN4 is the four player extension of FEN used by 4 player chess (as played on chess.com).
A document looks like

    <turn>-<dead>-<castling king side>-<castling queen side>-<points>-<draw ply>-[<tag block>-]
    <14 ranks separated by '/'>

* The header is described in `metadata.py`, the optional tag block in `extra.py`.
* The board never contains a '-', so the last dash of the document is where the header ends.
* Every four-valued field is in player order Red, Blue, Yellow, Green, no matter whose turn it is.

ex) The starting position is DEFAULT_FEN4 below: red to move, all castling rights available, no points.
"""

from dataclasses import dataclass, replace
from typing import Self

from fen4.chess.colors import TurnColor
from fen4.chess.extra import Extra
from fen4.chess.grid import EMPTY_GRID, Grid, grid_to_fen, parse_grid
from fen4.chess.metadata import SECTION_SEPARATOR, metadata_to_fen, parse_metadata
from fen4.chess.pieces import Piece
from fen4.chess.position import Position
from fen4.core.exceptions import (
    BadMetadataError,
    BoardParseError,
    ExtraParseError,
    MetadataParseError,
    NoDashError,
)
from fen4.core.logging import logger

DEFAULT_FEN4 = """R-0,0,0,0-1,1,1,1-1,1,1,1-0,0,0,0-0-
3,yR,yN,yB,yK,yQ,yB,yN,yR,3/
3,yP,yP,yP,yP,yP,yP,yP,yP,3/
14/
bR,bP,10,gP,gR/
bN,bP,10,gP,gN/
bB,bP,10,gP,gB/
bK,bP,10,gP,gQ/
bQ,bP,10,gP,gK/
bB,bP,10,gP,gB/
bN,bP,10,gP,gN/
bR,bP,10,gP,gR/
14/
3,rP,rP,rP,rP,rP,rP,rP,rP,3/
3,rR,rN,rB,rQ,rK,rB,rN,rR,3"""


@dataclass(frozen=True)
class Board:
    turn: TurnColor
    dead: tuple[bool, ...]
    castling_king: tuple[bool, ...]
    castling_queen: tuple[bool, ...]
    points: tuple[int, ...]
    draw_ply: int
    extra_options: Extra = Extra()
    # grid[row][col], row 0 is rank 1
    grid: Grid = EMPTY_GRID

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Parse a whole FEN4 document"""
        last_dash = fen.rfind(SECTION_SEPARATOR)
        if last_dash == -1:
            raise NoDashError()

        meta_data, board = fen[:last_dash], fen[last_dash + 1 :]
        try:
            board_base = parse_metadata(meta_data)
        except (MetadataParseError, ExtraParseError) as err:
            raise BadMetadataError(err) from err

        return replace(board_base, grid=parse_grid(board))

    def to_fen(self) -> str:
        """reverse operation: header, a line break, then the ranks"""
        return metadata_to_fen(self) + "\n" + grid_to_fen(self.grid)

    def piece(self, position: Position) -> Piece:
        return self.grid[position.row][position.col]


def decode(text: str) -> Board:
    try:
        return Board.from_fen(text)
    except BoardParseError as err:
        logger.debug("Could not decode FEN4 document: {}", err)
        raise


def encode(board: Board) -> str:
    return board.to_fen()


def default_board() -> Board:
    """The standard starting position, parsed from DEFAULT_FEN4 on every call."""
    return Board.from_fen(DEFAULT_FEN4)
