"""Defines what can occupy a square, and how it is written in FEN4"""

from __future__ import annotations

from dataclasses import dataclass

from fen4.chess.colors import DEAD_PREFIX, PREFIX_TO_TURN, Alive, Color, Dead, color_to_fen
from fen4.core.exceptions import BadColorError, BadSizeError

WALL_FEN = "X"


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Wall:
    """The walled-off 3x3 corners of the board"""


@dataclass(frozen=True)
class Normal:
    """
    A piece owned by some (living or dead) player.
    `shape` is a single character and deliberately not an enum: fairy variants use whatever letters they like.
    """

    color: Color
    shape: str


Piece = Empty | Wall | Normal

EMPTY = Empty()
WALL = Wall()


def piece_from_fen(token: str) -> Piece:
    """
    'X' is a wall. Otherwise a color prefix followed by exactly one shape character:
    'rK' (red king), 'dQ' (dead queen), 'dbQ' (dead queen that used to be blue's).
    """
    if token == WALL_FEN:
        return WALL
    if not token:
        raise BadSizeError(0)

    prefix, rest = token[0], token[1:]
    if prefix in PREFIX_TO_TURN:
        color: Color = Alive(PREFIX_TO_TURN[prefix])
    elif prefix == DEAD_PREFIX:
        # the player a dead piece belonged to is optional
        if rest[:1] in PREFIX_TO_TURN:
            color = Dead(PREFIX_TO_TURN[rest[0]])
            rest = rest[1:]
        else:
            color = Dead()
    else:
        raise BadColorError(prefix)

    if len(rest) != 1:
        raise BadSizeError(len(token))
    return Normal(color, rest)


def piece_to_fen(piece: Piece) -> str:
    """Empty squares have no text of their own, the grid codec turns them into run lengths."""
    match piece:
        case Empty():
            return ""
        case Wall():
            return WALL_FEN
        case Normal(color, shape):
            return color_to_fen(color) + shape
