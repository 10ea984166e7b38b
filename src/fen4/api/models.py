"""Requests and Response models for message handlers that pass FEN4 documents around"""

from typing import Self

from pydantic import BaseModel, field_validator

from fen4.chess.board import Board, decode
from fen4.chess.chess960 import chess960
from fen4.chess.colors import TURN_TO_FEN
from fen4.core.exceptions import BoardParseError, InvalidRequestError

TurnLetter = str


# --- REQUEST MODELS ---
class DecodeBoardRequest(BaseModel):
    fen4: str

    @field_validator("fen4")
    @classmethod
    def validate_fen4(cls, value: str) -> str:
        try:
            decode(value)
        except BoardParseError as err:
            raise InvalidRequestError(f"Cannot interpret supplied string as FEN4: {err}") from err
        return value

    def to_board(self) -> Board:
        return decode(self.fen4)


class Chess960Request(BaseModel):
    index: int

    def to_board(self) -> Board:
        return chess960(self.index)


# --- RESPONSE MODELS ---
class BoardResponse(BaseModel):
    turn: TurnLetter
    dead: list[bool]
    castling_king: list[bool]
    castling_queen: list[bool]
    points: list[int]
    draw_ply: int
    fen4: str

    @classmethod
    def from_board(cls, board: Board) -> Self:
        return cls(
            turn=TURN_TO_FEN[board.turn],
            dead=list(board.dead),
            castling_king=list(board.castling_king),
            castling_queen=list(board.castling_queen),
            points=list(board.points),
            draw_ply=board.draw_ply,
            fen4=board.to_fen(),
        )
