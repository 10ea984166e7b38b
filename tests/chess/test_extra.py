"""Unit tests for src/fen4/chess/extra.py"""

from itertools import permutations

import pytest

from fen4.chess.extra import Extra
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
    ExtraParseError,
    RepeatedTagError,
    RowInvalidError,
    TagEncodeError,
    UnknownTagError,
)


def test_default_extra_writes_nothing() -> None:
    assert Extra().is_default()
    assert Extra().to_fen() == ""


def test_lives_and_en_passant() -> None:
    tagged = "{'lives':(50,50,50,50),'enPassant':('i3:i4','c6:d6','f12:f11','l9:k9')}"
    extra = Extra.from_fen(tagged)
    assert extra.lives == (50, 50, 50, 50)
    assert extra.enpassant[0] == (Position.from_algebraic("i3"), Position.from_algebraic("i4"))
    assert extra.enpassant[3] == (Position.from_algebraic("l9"), Position.from_algebraic("k9"))
    assert extra.to_fen() == tagged


def test_every_tag() -> None:
    tagged = (
        "{'royal':('h1','','h14',''),"
        "'lives':(3,2,0,1),"
        "'resigned':(false,true,false,false),"
        "'flagged':(false,false,true,false),"
        "'stalemated':(true,false,false,false),"
        "'zombieImmune':(false,false,false,true),"
        "'zombieType':('rando','','muncher',''),"
        "'enPassant':('','e12:e11','',''),"
        "'pawnsBaseRank':3,"
        "'uniquify':7,"
        "'std2pc':true,"
        "'gameOver':'Checkmate'}"
    )
    extra = Extra.from_fen(tagged)
    assert extra == Extra(
        royal=(Position(0, 7), None, Position(13, 7), None),
        lives=(3, 2, 0, 1),
        resigned=(False, True, False, False),
        flagged=(False, False, True, False),
        stalemated=(True, False, False, False),
        zombie_immune=(False, False, False, True),
        zombie_type=("rando", "", "muncher", ""),
        enpassant=(None, (Position(11, 4), Position(10, 4)), None, None),
        pawnbaserank=3,
        uniquify=7,
        std2pc=True,
        game_over="Checkmate",
    )
    assert extra.to_fen() == tagged


def test_tags_are_read_in_any_order() -> None:
    """Reading does not care about the order, writing always uses the canonical one"""
    entries = ["'uniquify':4", "'royal':('a4','','','')", "'std2pc':true"]
    canonical = "{'royal':('a4','','',''),'uniquify':4,'std2pc':true}"
    for ordering in permutations(entries):
        extra = Extra.from_fen("{" + ",".join(ordering) + "}")
        assert extra.to_fen() == canonical


@pytest.mark.parametrize(
    "legacy, modern",
    [
        ("{'kingSquares':('a4','','','')}", "{'royal':('a4','','','')}"),
        ("{'pawnBaseRank':8}", "{'pawnsBaseRank':8}"),
    ],
)
def test_legacy_labels(legacy: str, modern: str) -> None:
    assert Extra.from_fen(legacy) == Extra.from_fen(modern)
    assert Extra.from_fen(legacy).to_fen() == modern


def test_null_means_false_in_boolean_tuples() -> None:
    extra = Extra.from_fen("{'resigned':(null,true,null,false)}")
    assert extra.resigned == (False, True, False, False)


def test_default_values_are_not_written() -> None:
    """An explicitly written default is read fine, but is dropped again on the way out"""
    extra = Extra.from_fen("{'pawnsBaseRank':2,'std2pc':false,'flagged':(false,false,false,false)}")
    assert extra.is_default()
    assert extra.to_fen() == ""


def test_colons_and_commas_inside_quotes() -> None:
    extra = Extra.from_fen("{'gameOver':'Red won, by: checkmate'}")
    assert extra.game_over == "Red won, by: checkmate"


def test_repeated_tag() -> None:
    with pytest.raises(RepeatedTagError) as exc_info:
        Extra.from_fen("{'lives':(1,1,1,1),'lives':(2,2,2,2)}")
    assert exc_info.value.label == "lives"


def test_alias_counts_as_repeated_tag() -> None:
    with pytest.raises(RepeatedTagError) as exc_info:
        Extra.from_fen("{'royal':('a4','','',''),'kingSquares':('a5','','','')}")
    assert exc_info.value.label == "kingSquares"


def test_unknown_tag_keeps_its_label() -> None:
    with pytest.raises(UnknownTagError) as exc_info:
        Extra.from_fen("{'bogus':12}")
    assert exc_info.value.label == "bogus"


@pytest.mark.parametrize(
    "tagged, error",
    [
        ("{}", BadBraceError),  # an empty tag block has to be left out instead
        ("'lives':(1,1,1,1)}", BadBraceError),  # no opening brace
        ("{'lives':(1,1,1,1)", BadBraceError),  # no closing brace
        ("{'std2pc':true}x}", BadBraceError),  # text after the closing brace
        ("{lives:(1,1,1,1)}", BadQuoteError),  # label not quoted
        ("{'lives:(1,1,1,1)}", BadQuoteError),  # label never closed
        ("{'gameOver':'over}", BadQuoteError),  # string never closed
        ("{'gameOver':over}", BadQuoteError),  # string not quoted
        ("{'uniquify':'3'}", BadTagNumberError),  # number quoted
        ("{'royal':(a4,'','','')}", BadQuoteError),  # position not quoted
        ("{'lives'(1,1,1,1)}", BadColonError),
        ("{'lives'}", BadColonError),
        ("{'enPassant':('i3i4','','','')}", BadColonError),  # pair without separator
        ("{'lives':(1,1,1,1}", BadParenthesisError),
        ("{'lives':1)}", BadParenthesisError),
        ("{'uniquify':(3}", BadParenthesisError),
        ("{'lives':(1,1,1,1)'std2pc':true}", BadCommaError),
        ("{'lives':(1,1,1)}", BadArrayError),
        ("{'lives':(1,1,1,1,1)}", BadArrayError),
        ("{'resigned':true}", BadArrayError),
        ("{'uniquify':(1,2,3,4)}", BadScalarError),
        ("{'resigned':(yes,no,no,no)}", BadBooleanError),
        ("{'std2pc':null}", BadBooleanError),  # null only stands in for false inside tuples
        ("{'lives':(1,-1,1,1)}", BadTagNumberError),
        ("{'pawnsBaseRank':}", BadTagNumberError),
        ("{'uniquify':1_000}", BadTagNumberError),
        ("{'royal':('z4','','','')}", BadTagPositionError),
    ],
)
def test_malformed_tag_block(tagged: str, error: type[ExtraParseError]) -> None:
    with pytest.raises(error):
        Extra.from_fen(tagged)


def test_bad_position_keeps_inner_error() -> None:
    with pytest.raises(BadTagPositionError) as exc_info:
        Extra.from_fen("{'enPassant':('a3:a15','','','')}")
    assert exc_info.value.label == "enPassant"
    assert isinstance(exc_info.value.cause, RowInvalidError)
    assert exc_info.value.__cause__ is exc_info.value.cause


@pytest.mark.parametrize(
    "extra",
    [
        Extra(game_over="it's over"),
        Extra(zombie_type=("", "semi-random", "", "")),
    ],
)
def test_text_that_cannot_be_written(extra: Extra) -> None:
    with pytest.raises(TagEncodeError):
        extra.to_fen()


def test_extra_is_immutable() -> None:
    extra = Extra()
    with pytest.raises(AttributeError):
        extra.uniquify = 3  # type: ignore[misc]
