"""
The header of a FEN4 document: everything in front of the board.

    <turn>-<dead>-<castling king side>-<castling queen side>-<points>-<draw ply>[-<tag block>]

ex) R-0,0,0,0-1,1,1,1-1,1,1,1-0,0,0,0-0
i.e. red to move, nobody eliminated, all castling rights available, no points and no plies towards the draw rule.
"""

from typing import TYPE_CHECKING

from fen4.chess.colors import FEN_TO_TURN, PLAYER_COUNT, TURN_TO_FEN, TurnColor
from fen4.chess.extra import Extra
from fen4.core.exceptions import (
    BadNumberError,
    BadQuadrupleError,
    BadTurnColorError,
    MissingSectionError,
    TrailingSectionError,
)

if TYPE_CHECKING:
    from fen4.chess.board import Board

SECTION_SEPARATOR = "-"
VALUE_SEPARATOR = ","

SECTIONS = ("turn", "dead", "castling_king", "castling_queen", "points", "draw_ply")


def _is_unsigned(text: str) -> bool:
    return text.isascii() and text.isdigit()


def flags_from_fen(section: str, text: str) -> tuple[bool, ...]:
    """'0,1,1,0' -> (False, True, True, False)"""
    values = text.split(VALUE_SEPARATOR)
    if len(values) != PLAYER_COUNT or any(value not in ("0", "1") for value in values):
        raise BadQuadrupleError(section, text)
    return tuple(value == "1" for value in values)


def flags_to_fen(flags: tuple[bool, ...]) -> str:
    return VALUE_SEPARATOR.join("1" if flag else "0" for flag in flags)


def points_from_fen(text: str) -> tuple[int, ...]:
    """'0,12,3,0' -> (0, 12, 3, 0)"""
    values = text.split(VALUE_SEPARATOR)
    if len(values) != PLAYER_COUNT or not all(_is_unsigned(value) for value in values):
        raise BadQuadrupleError("points", text)
    return tuple(int(value) for value in values)


def points_to_fen(points: tuple[int, ...]) -> str:
    return VALUE_SEPARATOR.join(str(value) for value in points)


def turn_from_fen(text: str) -> TurnColor:
    if text not in FEN_TO_TURN:
        raise BadTurnColorError(text)
    return FEN_TO_TURN[text]


def parse_metadata(meta_data: str) -> "Board":
    """Parse the header (without the dash that separates it from the board) into a Board with an empty grid."""
    from fen4.chess.board import Board

    sections = meta_data.split(SECTION_SEPARATOR)
    if len(sections) < len(SECTIONS):
        raise MissingSectionError(SECTIONS[len(sections)])

    turn_str, dead_str, king_str, queen_str, points_str, ply_str, *rest = sections

    turn = turn_from_fen(turn_str)
    dead = flags_from_fen("dead", dead_str)
    castling_king = flags_from_fen("castling_king", king_str)
    castling_queen = flags_from_fen("castling_queen", queen_str)
    points = points_from_fen(points_str)

    if not _is_unsigned(ply_str):
        raise BadNumberError("draw_ply", ply_str)
    draw_ply = int(ply_str)

    # the tag block is optional, anything after it is not
    extra_options = Extra.from_fen(rest[0]) if rest else Extra()
    if len(rest) > 1:
        raise TrailingSectionError(SECTION_SEPARATOR.join(rest[1:]))

    return Board(
        turn=turn,
        dead=dead,
        castling_king=castling_king,
        castling_queen=castling_queen,
        points=points,
        draw_ply=draw_ply,
        extra_options=extra_options,
    )


def metadata_to_fen(board: "Board") -> str:
    """reverse operation. Always ends with the dash that separates the header from the board."""
    sections = [
        TURN_TO_FEN[board.turn],
        flags_to_fen(board.dead),
        flags_to_fen(board.castling_king),
        flags_to_fen(board.castling_queen),
        points_to_fen(board.points),
        str(board.draw_ply),
    ]
    tags = board.extra_options.to_fen()
    if tags:
        sections.append(tags)
    return SECTION_SEPARATOR.join(sections) + SECTION_SEPARATOR
