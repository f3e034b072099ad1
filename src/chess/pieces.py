"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.core.exceptions import MalformedFENError


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opposite(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

# Every letter that may appear in a FEN placement, looked up exactly (no case folding)
FEN_LETTERS: dict[str, tuple[PieceType, Color]] = {
    **{
        letter.upper(): (piece_type, Color.WHITE)
        for letter, piece_type in FEN_TO_PIECE.items()
    },
    **{letter: (piece_type, Color.BLACK) for letter, piece_type in FEN_TO_PIECE.items()},
}


@dataclass(frozen=True)
class Piece:
    """A piece is nothing more than its kind and its color. Two pieces with the same kind and color are interchangeable."""

    kind: PieceType
    color: Color

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        if character not in FEN_LETTERS:
            raise MalformedFENError(f"Unknown piece letter: {character!r}")
        return cls(*FEN_LETTERS[character])

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.kind].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.kind]
        )
