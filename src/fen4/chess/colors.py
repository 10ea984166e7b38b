"""The four players and the colors a piece can have"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

PLAYER_COUNT = 4


class TurnColor(IntEnum):
    """
    The players, in the fixed order used by every per-player array in FEN4.
    The value doubles as the index into those arrays.
    """

    RED = 0
    BLUE = 1
    YELLOW = 2
    GREEN = 3

    def next(self) -> TurnColor:
        """Play goes clockwise: Red -> Blue -> Yellow -> Green -> Red"""
        return TurnColor((self.value + 1) % PLAYER_COUNT)


# Upper case letters denote whose turn it is, lower case letters prefix the pieces
TURN_TO_FEN: dict[TurnColor, str] = {
    TurnColor.RED: "R",
    TurnColor.BLUE: "B",
    TurnColor.YELLOW: "Y",
    TurnColor.GREEN: "G",
}
FEN_TO_TURN: dict[str, TurnColor] = {value: key for key, value in TURN_TO_FEN.items()}

PREFIX_TO_TURN: dict[str, TurnColor] = {
    letter.lower(): turn for letter, turn in FEN_TO_TURN.items()
}
DEAD_PREFIX = "d"


@dataclass(frozen=True)
class Alive:
    """Piece of a player that is still in the game"""

    player: TurnColor


@dataclass(frozen=True)
class Dead:
    """Piece of an eliminated player. Newer documents remember who the piece belonged to."""

    player: Optional[TurnColor] = None


Color = Alive | Dead


def color_to_fen(color: Color) -> str:
    match color:
        case Alive(player):
            return TURN_TO_FEN[player].lower()
        case Dead(None):
            return DEAD_PREFIX
        case Dead(player):
            return DEAD_PREFIX + TURN_TO_FEN[player].lower()
