"""
Chess960 (Fischer random) starting positions for four players.

The 960 back ranks are numbered with the usual scheme (https://en.wikipedia.org/wiki/Fischer_random_chess_numbering_scheme),
except that numbering starts at 1: position 519 is the standard RNBQKBNR set-up.
Every player gets the same arrangement, as seen from their own side of the board.
"""

from dataclasses import replace

from fen4.chess.board import Board, default_board
from fen4.chess.colors import Alive, TurnColor
from fen4.chess.pieces import Normal, Piece
from fen4.chess.position import Position
from fen4.core.logging import logger

POSITION_COUNT = 960
BACK_RANK_LENGTH = 8
# the back ranks start after the 3 walled-off squares of a corner
FIRST_FILE = 3

# where the two knights go among the five squares left after placing the bishops and queen
KNIGHT_PLACEMENTS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (0, 2),
    (0, 3),
    (0, 4),
    (1, 2),
    (1, 3),
    (1, 4),
    (2, 3),
    (2, 4),
    (3, 4),
)


def back_rank(index: int) -> str:
    """
    Shapes of the back rank from the queen-side corner (a-file for red) to the king-side corner.
    Indices outside 1-960 wrap around instead of raising.
    """
    n = (index - 1) % POSITION_COUNT
    rank: list[str] = [""] * BACK_RANK_LENGTH

    # light squared bishop on b, d, f or h, dark squared bishop on a, c, e or g
    n, light_bishop = divmod(n, 4)
    rank[2 * light_bishop + 1] = "B"
    n, dark_bishop = divmod(n, 4)
    rank[2 * dark_bishop] = "B"

    n, queen = divmod(n, 6)
    free = [file for file, shape in enumerate(rank) if not shape]
    rank[free[queen]] = "Q"

    free = [file for file, shape in enumerate(rank) if not shape]
    for knight in KNIGHT_PLACEMENTS[n]:
        rank[free[knight]] = "N"

    # the king always ends up in between the rooks
    free = [file for file, shape in enumerate(rank) if not shape]
    for file, shape in zip(free, "RKR"):
        rank[file] = shape
    return "".join(rank)


def back_rank_squares(player: TurnColor) -> list[Position]:
    """The eight back rank squares of a player, ordered from their queen-side corner to their king-side corner."""
    files = range(FIRST_FILE, FIRST_FILE + BACK_RANK_LENGTH)
    match player:
        case TurnColor.RED:
            return [Position(0, col) for col in files]
        case TurnColor.BLUE:
            return [Position(row, 0) for row in files]
        case TurnColor.YELLOW:
            return [Position(13, col) for col in reversed(files)]
        case TurnColor.GREEN:
            return [Position(row, 13) for row in reversed(files)]


def chess960(index: int) -> Board:
    """Start from the standard position and swap out all four back ranks"""
    shapes = back_rank(index)
    logger.debug("Chess960 position {} has back rank {}", index, shapes)

    board = default_board()
    rows: list[list[Piece]] = [list(pieces) for pieces in board.grid]
    for player in TurnColor:
        for square, shape in zip(back_rank_squares(player), shapes):
            rows[square.row][square.col] = Normal(Alive(player), shape)
    return replace(board, grid=tuple(tuple(pieces) for pieces in rows))
