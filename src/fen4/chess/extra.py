"""
The optional tag block of a FEN4 document.
----

Variants of four player chess need more state than the base notation can express
(royal squares, lives in N-check, who resigned, en passant squares, ...).
That state is written as a block of labelled values between the draw ply and the board:

    {'lives':(50,50,50,50),'enPassant':('i3:i4','','','l9:k9')}

* A label is always quoted, followed by ':' and a value.
* A value is a quoted string, a bare number/boolean, or a parenthesized 4-tuple of those (one per player, Red, Blue, Yellow, Green).
* Labels may come in any order when reading. Writing always uses the declaration order of the fields of `Extra`.
* Values equal to their default are not written at all, and a block with nothing to write is left out of the document entirely.
  That is also why an empty '{}' block is rejected when reading.
"""

from dataclasses import dataclass, fields
from enum import Enum, auto
from typing import Any, Callable, Optional, Self

from fen4.chess.colors import PLAYER_COUNT
from fen4.chess.position import Position
from fen4.core.exceptions import (
    BadArrayError,
    BadBooleanError,
    BadBraceError,
    BadColonError,
    BadCommaError,
    BadParenthesisError,
    BadQuoteError,
    BadScalarError,
    BadTagNumberError,
    BadTagPositionError,
    PositionParseError,
    RepeatedTagError,
    TagEncodeError,
    UnknownTagError,
)
from fen4.core.logging import logger

DEFAULT_PAWN_BASE_RANK = 2

EnPassant = tuple[Position, Position]


@dataclass(frozen=True)
class Extra:
    """Per-game metadata from the tag block. Every field defaults to 'not present'."""

    royal: tuple[Optional[Position], ...] = (None,) * PLAYER_COUNT
    lives: Optional[tuple[int, ...]] = None
    resigned: tuple[bool, ...] = (False,) * PLAYER_COUNT
    flagged: tuple[bool, ...] = (False,) * PLAYER_COUNT
    stalemated: tuple[bool, ...] = (False,) * PLAYER_COUNT
    zombie_immune: tuple[bool, ...] = (False,) * PLAYER_COUNT
    zombie_type: tuple[str, ...] = ("",) * PLAYER_COUNT
    enpassant: tuple[Optional[EnPassant], ...] = (None,) * PLAYER_COUNT
    pawnbaserank: int = DEFAULT_PAWN_BASE_RANK
    # meaning unknown, kept verbatim
    uniquify: int = 0
    std2pc: bool = False
    game_over: str = ""

    def is_default(self) -> bool:
        return self == Extra()

    @classmethod
    def from_fen(cls, tagged: str) -> Self:
        """Parse a complete '{...}' block"""
        values: dict[str, Any] = {}
        for label, value in _TagScanner(tagged).entries():
            tag = LABEL_TO_TAG.get(label)
            if tag is None:
                raise UnknownTagError(label)
            if tag.field in values:
                raise RepeatedTagError(label)
            if label != tag.label:
                logger.debug("Legacy tag {!r} read as {!r}", label, tag.label)
            values[tag.field] = tag.decode(label, value)
        return cls(**values)

    def to_fen(self) -> str:
        """The '{...}' block, or an empty string if every field has its default value."""
        entries = []
        for extra_field in fields(self):
            value = getattr(self, extra_field.name)
            if value == extra_field.default:
                continue
            tag = FIELD_TO_TAG[extra_field.name]
            entries.append(f"'{tag.label}':{tag.encode(tag.label, value)}")
        if not entries:
            return ""
        return "{" + ",".join(entries) + "}"


# --- SCANNING ---
@dataclass(frozen=True)
class _Token:
    """A single value as written: either quoted ('a4') or bare (50, true). `index` is where it starts in the block."""

    text: str
    quoted: bool
    index: int


_Value = _Token | tuple[_Token, ...]


class _ScanState(Enum):
    AWAITING_LABEL = auto()
    AWAITING_COLON = auto()
    AWAITING_VALUE = auto()
    AWAITING_SEPARATOR = auto()


class _TagScanner:
    """
    Single pass over the block, no backtracking. Only splits the text into (label, value) pairs;
    what a value should look like is decided per label afterwards.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.index = 0

    def entries(self) -> list[tuple[str, _Value]]:
        if not self.text.startswith("{"):
            raise BadBraceError(0)
        if self.text == "{}":
            raise BadBraceError(1)
        if not self.text.endswith("}"):
            raise BadBraceError(len(self.text))

        self.index = 1
        state = _ScanState.AWAITING_LABEL
        label = ""
        entries: list[tuple[str, _Value]] = []
        while True:
            match state:
                case _ScanState.AWAITING_LABEL:
                    label = self._quoted(None)
                    state = _ScanState.AWAITING_COLON
                case _ScanState.AWAITING_COLON:
                    if self._peek() != ":":
                        raise BadColonError(self.index, label)
                    self.index += 1
                    state = _ScanState.AWAITING_VALUE
                case _ScanState.AWAITING_VALUE:
                    entries.append((label, self._value(label)))
                    state = _ScanState.AWAITING_SEPARATOR
                case _ScanState.AWAITING_SEPARATOR:
                    separator = self._peek()
                    if separator == ",":
                        self.index += 1
                        state = _ScanState.AWAITING_LABEL
                    elif separator == "}":
                        # the closing brace has to be the very last character
                        if self.index != len(self.text) - 1:
                            raise BadBraceError(self.index)
                        return entries
                    else:
                        raise BadCommaError(self.index, label)

    def _peek(self) -> str:
        return self.text[self.index : self.index + 1]

    def _quoted(self, label: Optional[str]) -> str:
        if self._peek() != "'":
            raise BadQuoteError(self.index, label)
        end = self.text.find("'", self.index + 1)
        if end == -1:
            raise BadQuoteError(len(self.text), label)
        content = self.text[self.index + 1 : end]
        self.index = end + 1
        return content

    def _value(self, label: str) -> _Value:
        if self._peek() == "(":
            return self._tuple(label)
        return self._item(label, stops=",}")

    def _item(self, label: str, stops: str) -> _Token:
        start = self.index
        if self._peek() == "'":
            return _Token(self._quoted(label), True, start)

        while self.index < len(self.text) and self.text[self.index] not in stops:
            character = self.text[self.index]
            if character in "()":
                raise BadParenthesisError(self.index, label)
            if character == "'":
                raise BadQuoteError(self.index, label)
            self.index += 1
        return _Token(self.text[start : self.index], False, start)

    def _tuple(self, label: str) -> tuple[_Token, ...]:
        self.index += 1  # '('
        items: list[_Token] = []
        while True:
            items.append(self._item(label, stops=",)}"))
            separator = self._peek()
            self.index += 1
            if separator == ")":
                return tuple(items)
            if separator != ",":
                raise BadParenthesisError(self.index - 1, label)


# --- DECODING RULES (one per kind of value) ---
def _per_player(label: str, value: _Value) -> tuple[_Token, ...]:
    if not isinstance(value, tuple):
        raise BadArrayError(label, None)
    if len(value) != PLAYER_COUNT:
        raise BadArrayError(label, len(value))
    return value


def _single(label: str, value: _Value) -> _Token:
    if isinstance(value, tuple):
        raise BadScalarError(label)
    return value


def _text(label: str, token: _Token) -> str:
    if not token.quoted:
        raise BadQuoteError(token.index, label)
    return token.text


def _number(label: str, token: _Token) -> int:
    # quoted numbers and signs are not allowed, and neither are the underscores int() would accept
    if token.quoted or not (token.text.isascii() and token.text.isdigit()):
        raise BadTagNumberError(label, token.text)
    return int(token.text)


def _boolean(label: str, token: _Token, allow_null: bool = False) -> bool:
    if not token.quoted:
        if token.text == "true":
            return True
        if token.text == "false":
            return False
        # older documents wrote null for "not set"
        if allow_null and token.text == "null":
            return False
    raise BadBooleanError(label, token.text)


def _position(label: str, text: str) -> Position:
    try:
        return Position.from_algebraic(text)
    except PositionParseError as err:
        raise BadTagPositionError(label, err) from err


def _optional_position(label: str, token: _Token) -> Optional[Position]:
    text = _text(label, token)
    return _position(label, text) if text else None


def _optional_enpassant(label: str, token: _Token) -> Optional[EnPassant]:
    """'i3:i4' means capturing on i3 removes the pawn on i4"""
    text = _text(label, token)
    if not text:
        return None
    squares = text.split(":")
    if len(squares) != 2:
        raise BadColonError(token.index, label)
    return (_position(label, squares[0]), _position(label, squares[1]))


def _decode_royal(label: str, value: _Value) -> tuple[Optional[Position], ...]:
    return tuple(_optional_position(label, token) for token in _per_player(label, value))


def _decode_lives(label: str, value: _Value) -> tuple[int, ...]:
    return tuple(_number(label, token) for token in _per_player(label, value))


def _decode_booleans(label: str, value: _Value) -> tuple[bool, ...]:
    return tuple(
        _boolean(label, token, allow_null=True) for token in _per_player(label, value)
    )


def _decode_texts(label: str, value: _Value) -> tuple[str, ...]:
    return tuple(_text(label, token) for token in _per_player(label, value))


def _decode_enpassant(label: str, value: _Value) -> tuple[Optional[EnPassant], ...]:
    return tuple(_optional_enpassant(label, token) for token in _per_player(label, value))


def _decode_number(label: str, value: _Value) -> int:
    return _number(label, _single(label, value))


def _decode_boolean(label: str, value: _Value) -> bool:
    return _boolean(label, _single(label, value))


def _decode_text(label: str, value: _Value) -> str:
    return _text(label, _single(label, value))


# --- ENCODING RULES ---
def _quote(label: str, text: str) -> str:
    # no escaping exists in the notation, and a '-' would be mistaken for a section separator
    if "'" in text or "-" in text:
        raise TagEncodeError(label, text)
    return f"'{text}'"


def _bool_to_fen(value: bool) -> str:
    return "true" if value else "false"


def _tuple_to_fen(items: list[str]) -> str:
    return "(" + ",".join(items) + ")"


def _encode_royal(label: str, value: tuple[Optional[Position], ...]) -> str:
    return _tuple_to_fen(
        [_quote(label, square.to_algebraic() if square else "") for square in value]
    )


def _encode_lives(label: str, value: tuple[int, ...]) -> str:
    return _tuple_to_fen([str(lives) for lives in value])


def _encode_booleans(label: str, value: tuple[bool, ...]) -> str:
    return _tuple_to_fen([_bool_to_fen(flag) for flag in value])


def _encode_texts(label: str, value: tuple[str, ...]) -> str:
    return _tuple_to_fen([_quote(label, text) for text in value])


def _encode_enpassant(label: str, value: tuple[Optional[EnPassant], ...]) -> str:
    return _tuple_to_fen(
        [
            _quote(label, f"{pair[0].to_algebraic()}:{pair[1].to_algebraic()}" if pair else "")
            for pair in value
        ]
    )


def _encode_number(label: str, value: int) -> str:
    return str(value)


def _encode_boolean(label: str, value: bool) -> str:
    return _bool_to_fen(value)


def _encode_text(label: str, value: str) -> str:
    return _quote(label, value)


@dataclass(frozen=True)
class Tag:
    """How one field of `Extra` is labelled, read and written."""

    field: str
    label: str
    decode: Callable[[str, _Value], Any]
    encode: Callable[[str, Any], str]
    aliases: tuple[str, ...] = ()


TAGS: tuple[Tag, ...] = (
    Tag("royal", "royal", _decode_royal, _encode_royal, aliases=("kingSquares",)),
    Tag("lives", "lives", _decode_lives, _encode_lives),
    Tag("resigned", "resigned", _decode_booleans, _encode_booleans),
    Tag("flagged", "flagged", _decode_booleans, _encode_booleans),
    Tag("stalemated", "stalemated", _decode_booleans, _encode_booleans),
    Tag("zombie_immune", "zombieImmune", _decode_booleans, _encode_booleans),
    Tag("zombie_type", "zombieType", _decode_texts, _encode_texts),
    Tag("enpassant", "enPassant", _decode_enpassant, _encode_enpassant),
    Tag(
        "pawnbaserank",
        "pawnsBaseRank",
        _decode_number,
        _encode_number,
        aliases=("pawnBaseRank",),
    ),
    Tag("uniquify", "uniquify", _decode_number, _encode_number),
    Tag("std2pc", "std2pc", _decode_boolean, _encode_boolean),
    Tag("game_over", "gameOver", _decode_text, _encode_text),
)

FIELD_TO_TAG: dict[str, Tag] = {tag.field: tag for tag in TAGS}
LABEL_TO_TAG: dict[str, Tag] = {
    label: tag for tag in TAGS for label in (tag.label, *tag.aliases)
}
