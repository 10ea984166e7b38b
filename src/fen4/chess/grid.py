"""
The piece placement part of a FEN4 document.
----

The 14 ranks are written from rank 14 down to rank 1, separated by '/'. Within a rank the squares are
written from the a-file to the n-file as comma separated segments:
* a number is a run of that many empty squares
* anything else is a single piece (see `piece_from_fen`), 'X' being the walled-off corners

ex) the rank of red's pieces in the starting position
3,rR,rN,rB,rQ,rK,rB,rN,rR,3
"""

from fen4.chess.pieces import EMPTY, Empty, Piece, piece_from_fen, piece_to_fen
from fen4.chess.position import BOARD_SIZE
from fen4.core.exceptions import (
    BadBoardSizeError,
    BadSegmentNumberError,
    BadSegmentPieceError,
    BoardSize,
    EmptySegmentError,
    PieceParseError,
)

Grid = tuple[tuple[Piece, ...], ...]

RANK_SEPARATOR = "/"
SEGMENT_SEPARATOR = ","
# documents put every rank on its own line, whitespace around segments is ignored when reading
RANK_JOINER = RANK_SEPARATOR + "\n"

EMPTY_GRID: Grid = tuple((EMPTY,) * BOARD_SIZE for _ in range(BOARD_SIZE))


def _run_length(segment: str, row: int, col: int) -> int:
    # int() would also accept '1_0' or non-ascii digits
    if not (segment.isascii() and segment.isdigit()):
        raise BadSegmentNumberError(
            row, col, ValueError(f"invalid literal for a run of empty squares: {segment!r}")
        )
    return int(segment)


def parse_grid(board: str) -> Grid:
    """
    We keep track of where we are, starting at the top rank on the a-file, and move to the right as we fill in squares.
    Finishing a line moves us one rank down and back to the a-file.
    """
    rows: list[list[Piece]] = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    row = BOARD_SIZE
    for line in board.split(RANK_SEPARATOR):
        if row == 0:
            raise BadBoardSizeError(BoardSize.TOO_MANY_ROWS, row)
        row -= 1

        col = 0
        for segment in line.split(SEGMENT_SEPARATOR):
            if col >= BOARD_SIZE:
                raise BadBoardSizeError(BoardSize.TOO_MANY_COLUMNS, row)

            segment = segment.strip()
            if not segment:
                raise EmptySegmentError(row, col)

            if segment[0].isdigit():
                col += _run_length(segment, row, col)
                if col > BOARD_SIZE:
                    raise BadBoardSizeError(BoardSize.TOO_MANY_COLUMNS, row)
            else:
                try:
                    rows[row][col] = piece_from_fen(segment)
                except PieceParseError as err:
                    raise BadSegmentPieceError(row, col, err) from err
                col += 1

        if col != BOARD_SIZE:
            raise BadBoardSizeError(BoardSize.TOO_FEW_COLUMNS, row)

    # row now counts the ranks that were never written
    if row != 0:
        raise BadBoardSizeError(BoardSize.TOO_FEW_ROWS, row)
    return tuple(tuple(pieces) for pieces in rows)


def grid_to_fen(grid: Grid) -> str:
    """Ranks are separated by slashes, top rank first."""
    return RANK_JOINER.join(
        _row_to_fen(grid[row]) for row in range(BOARD_SIZE - 1, -1, -1)
    )


def _row_to_fen(pieces: tuple[Piece, ...]) -> str:
    """FEN4 text of a single rank"""
    segments: list[str] = []
    empty_count = 0
    for piece in pieces:
        if isinstance(piece, Empty):
            empty_count += 1
            continue
        if empty_count > 0:
            segments.append(str(empty_count))
            empty_count = 0
        segments.append(piece_to_fen(piece))

    # trailing empty squares (or an entirely empty rank) still get their number
    if empty_count > 0:
        segments.append(str(empty_count))
    return SEGMENT_SEPARATOR.join(segments)
