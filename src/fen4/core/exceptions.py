"""
Exceptions raised across the layers of the FEN4 codec.

The hierarchy mirrors the codec itself: every component (position, piece, tag block, metadata, grid/board)
has its own base class, so callers can catch as broadly or as narrowly as they like.
Every error keeps its payload as attributes, the message is only for humans.
"""

from enum import Enum
from typing import Optional


class FEN4Error(Exception):
    """Root of everything this package raises on purpose."""


# --- POSITIONS ---
class PositionParseError(FEN4Error):
    pass


class PositionLengthError(PositionParseError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"Position {text!r} is malformed. Positions should take the form 'a4'."
        )


class ColumnInvalidError(PositionParseError):
    def __init__(self, column: str) -> None:
        self.column = column
        super().__init__(
            f"{column!r} is not a valid column. Valid columns are 'a'-'n'."
        )


class RowInvalidError(PositionParseError):
    def __init__(self, row: int) -> None:
        self.row = row
        super().__init__(f"'{row}' is not a valid row. Valid rows are 1-14.")


class RowNotANumberError(PositionParseError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Row {text!r} of a position is not a number.")


# --- PIECES ---
class PieceParseError(FEN4Error):
    pass


class BadColorError(PieceParseError):
    def __init__(self, color: str) -> None:
        self.color = color
        super().__init__(
            f"Bad color {color!r}. Only 'r', 'b', 'y', 'g', and 'd' are valid colors."
        )


class BadSizeError(PieceParseError):
    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(
            f"Bad size {size}. Pieces like 'X', 'rK' or 'drK' are the only valid tokens."
        )


# --- TAG BLOCK ---
class ExtraParseError(FEN4Error):
    pass


class BadBraceError(ExtraParseError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"Tag block is not enclosed by a non-empty '{{...}}' (at character {index})."
        )


class BadQuoteError(ExtraParseError):
    def __init__(self, index: int, label: Optional[str] = None) -> None:
        self.index = index
        self.label = label
        where = f" in value of {label!r}" if label is not None else ""
        super().__init__(f"Expected a closing or opening quote{where} at character {index}.")


class BadColonError(ExtraParseError):
    def __init__(self, index: int, label: str) -> None:
        self.index = index
        self.label = label
        super().__init__(f"Expected ':' after tag {label!r} at character {index}.")


class BadParenthesisError(ExtraParseError):
    def __init__(self, index: int, label: str) -> None:
        self.index = index
        self.label = label
        super().__init__(f"Unbalanced parenthesis in value of {label!r} at character {index}.")


class BadCommaError(ExtraParseError):
    def __init__(self, index: int, label: str) -> None:
        self.index = index
        self.label = label
        super().__init__(
            f"Expected ',' or '}}' after the value of {label!r} at character {index}."
        )


class BadArrayError(ExtraParseError):
    def __init__(self, label: str, size: Optional[int]) -> None:
        self.label = label
        self.size = size
        if size is None:
            detail = "a single value was given"
        else:
            detail = f"{size} values were given"
        super().__init__(f"Tag {label!r} needs one value per player but {detail}.")


class BadScalarError(ExtraParseError):
    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Tag {label!r} takes a single value, not a tuple.")


class BadBooleanError(ExtraParseError):
    def __init__(self, label: str, value: str) -> None:
        self.label = label
        self.value = value
        super().__init__(f"{value!r} in tag {label!r} is not 'true' or 'false'.")


class RepeatedTagError(ExtraParseError):
    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Tag {label!r} appears more than once.")


class UnknownTagError(ExtraParseError):
    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Tag {label!r} is not a known tag.")


class BadTagPositionError(ExtraParseError):
    def __init__(self, label: str, cause: PositionParseError) -> None:
        self.label = label
        self.cause = cause
        super().__init__(f"Bad position in tag {label!r}: {cause}")


class BadTagNumberError(ExtraParseError):
    def __init__(self, label: str, value: str) -> None:
        self.label = label
        self.value = value
        super().__init__(f"{value!r} in tag {label!r} is not an unsigned integer.")


# --- METADATA ---
class MetadataParseError(FEN4Error):
    pass


class BadTurnColorError(MetadataParseError):
    def __init__(self, turn: str) -> None:
        self.turn = turn
        super().__init__(f"{turn!r} is not a turn. Valid turns are 'R', 'B', 'Y' and 'G'.")


class BadQuadrupleError(MetadataParseError):
    def __init__(self, section: str, text: str) -> None:
        self.section = section
        self.text = text
        super().__init__(
            f"Section {section!r} should hold four comma separated values, got {text!r}."
        )


class BadNumberError(MetadataParseError):
    def __init__(self, section: str, text: str) -> None:
        self.section = section
        self.text = text
        super().__init__(f"Section {section!r} should be an unsigned integer, got {text!r}.")


class MissingSectionError(MetadataParseError):
    def __init__(self, section: str) -> None:
        self.section = section
        super().__init__(f"Metadata ended before section {section!r}.")


class TrailingSectionError(MetadataParseError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Unexpected metadata {text!r} after the tag block.")


# --- BOARD ---
class BoardSize(Enum):
    TOO_MANY_COLUMNS = "too many columns"
    TOO_FEW_COLUMNS = "too few columns"
    TOO_MANY_ROWS = "too many rows"
    TOO_FEW_ROWS = "too few rows"


class BoardParseError(FEN4Error):
    pass


class NoDashError(BoardParseError):
    def __init__(self) -> None:
        super().__init__(
            "No '-' was found. FEN4 documents start with metadata about turn, castling, and more."
        )


class BadMetadataError(BoardParseError):
    def __init__(self, cause: MetadataParseError | ExtraParseError) -> None:
        self.cause = cause
        super().__init__(f"Something went wrong with metadata parsing: {cause}")


class BadBoardSizeError(BoardParseError):
    def __init__(self, size: BoardSize, row: int) -> None:
        self.size = size
        self.row = row
        match size:
            case BoardSize.TOO_MANY_COLUMNS:
                message = f"Too many columns in row {row}."
            case BoardSize.TOO_FEW_COLUMNS:
                message = f"Not enough columns in row {row}."
            case BoardSize.TOO_MANY_ROWS:
                message = "Too many rows overall. Make sure there is not a leading or trailing '/'."
            case BoardSize.TOO_FEW_ROWS:
                message = f"{row} too few rows overall. Make sure there is not a missing row."
        super().__init__(message)


class EmptySegmentError(BoardParseError):
    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
        super().__init__(f"Segment at ({row},{col}) is empty which is not valid.")


class BadSegmentNumberError(BoardParseError):
    def __init__(self, row: int, col: int, cause: ValueError) -> None:
        self.row = row
        self.col = col
        self.cause = cause
        super().__init__(
            f"Segment at ({row},{col}) starts with a digit but cannot be parsed as a number: {cause}"
        )


class BadSegmentPieceError(BoardParseError):
    def __init__(self, row: int, col: int, cause: PieceParseError) -> None:
        self.row = row
        self.col = col
        self.cause = cause
        super().__init__(f"Segment at ({row},{col}) cannot be parsed as a piece: {cause}")


# --- ENCODING ---
class EncodeError(FEN4Error):
    """Asked to write a value that has no valid FEN4 text. A bug in the caller, not in the input."""


class PositionOutOfRangeError(EncodeError):
    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
        super().__init__(f"Position (row={row}, col={col}) is not on the 14x14 board.")


class TagEncodeError(EncodeError):
    def __init__(self, label: str, value: str) -> None:
        self.label = label
        self.value = value
        super().__init__(f"{value!r} cannot be written in tag {label!r} (contains ' or -).")


# --- API ---
class InvalidRequestError(FEN4Error):
    pass
