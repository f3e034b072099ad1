"""Unit tests for src/chess/fen.py"""

import pytest

from src.chess.fen import (
    FEN_DEFAULT_SUFFIX,
    STARTING_FEN,
    FENFields,
    color_from_fen,
    color_to_fen,
)
from src.chess.pieces import Color
from src.core.exceptions import MalformedFENError

EMPTY_POSITION = "/".join(["8"] * 8)


@pytest.mark.parametrize(
    "active_color, expected",
    [
        ("w", Color.WHITE),
        ("b", Color.BLACK),
        ("W", Color.BLACK),  # not exactly 'w'
        ("white", Color.BLACK),
        ("x", Color.BLACK),
        ("", Color.BLACK),
    ],
)
def test_color_from_fen(active_color: str, expected: Color) -> None:
    """Anything that is not 'w' counts as Black to move"""
    assert color_from_fen(active_color) == expected


def test_color_to_fen() -> None:
    assert color_to_fen(Color.WHITE) == "w"
    assert color_to_fen(Color.BLACK) == "b"


def test_parsing_starting_fen() -> None:
    fields = FENFields.from_fen(STARTING_FEN)
    assert fields.position == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
    assert fields.color_to_move == Color.WHITE


@pytest.mark.parametrize(
    "fen, expected_color",
    [
        (f"{EMPTY_POSITION} b - - 0 1", Color.BLACK),
        (f"{EMPTY_POSITION} w - e3 12 40", Color.WHITE),
        (f"{EMPTY_POSITION} w", Color.WHITE),  # trailing fields are optional
        (f"{EMPTY_POSITION} w nonsense in the remaining fields", Color.WHITE),
        (EMPTY_POSITION, Color.BLACK),  # no active color at all
        (f"  {EMPTY_POSITION}   w  ", Color.WHITE),  # extra whitespace
    ],
)
def test_trailing_fields_are_not_interpreted(fen: str, expected_color: Color) -> None:
    fields = FENFields.from_fen(fen)
    assert fields.position == EMPTY_POSITION
    assert fields.color_to_move == expected_color


@pytest.mark.parametrize(
    "fen",
    [
        "",
        "   ",
    ],
)
def test_invalid_fen(fen: str) -> None:
    with pytest.raises(MalformedFENError):
        FENFields.from_fen(fen)


def test_placement_is_left_to_the_board() -> None:
    """Splitting the fields does not read the placement, Board.from_fen does"""
    fields = FENFields.from_fen("not/a/board w")
    assert fields.position == "not/a/board"
    assert fields.color_to_move == Color.WHITE


@pytest.mark.parametrize("color, letter", [(Color.WHITE, "w"), (Color.BLACK, "b")])
def test_writing_fen_uses_default_suffix(color: Color, letter: str) -> None:
    """Castling, en passant and the clocks are always written as the defaults"""
    fen = FENFields(EMPTY_POSITION, color).to_fen()
    assert fen == f"{EMPTY_POSITION} {letter} {FEN_DEFAULT_SUFFIX}"
    assert fen.endswith(" KQkq - 0 1")


def test_metadata_is_not_round_tripped() -> None:
    """A known gap: whatever the input says about castling etc., the output has the defaults"""
    fen = "r3k2r/pppq1ppp/2npbn2/4p3/2B1P3/2NP1N2/PPP2PPP/R1BQ1RK1 b kq - 3 9"
    assert (
        FENFields.from_fen(fen).to_fen()
        == "r3k2r/pppq1ppp/2npbn2/4p3/2B1P3/2NP1N2/PPP2PPP/R1BQ1RK1 b KQkq - 0 1"
    )
