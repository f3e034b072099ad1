"""The board only knows where pieces are. It has no notion of whose turn it is, or what a legal move is."""

from dataclasses import dataclass
from string import digits
from typing import Optional, Self

from src.chess.pieces import Color, Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import MalformedFENError

NUM_RANKS, NUM_FILES = BOARD_DIMENSIONS
NUM_SQUARES = NUM_RANKS * NUM_FILES


@dataclass(frozen=True)
class Board:
    """
    Flat, immutable grid of the 64 squares, read row by row from the top-left (a8) to the bottom-right (h1).
    Every change produces a new Board, so two boards can never share a row.
    """

    squares: tuple[Optional[Piece], ...]

    def __post_init__(self) -> None:
        if len(self.squares) != NUM_SQUARES:
            raise ValueError(
                f"A board holds exactly {NUM_SQUARES} squares, got {len(self.squares)}"
            )

    @classmethod
    def empty(cls) -> Self:
        return cls((None,) * NUM_SQUARES)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the first part of a FEN string (the piece placement).

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the top row, starting with the rook in the top-left corner (a8)
        * pawns cover the second row entirely
        * the four middle rows have 8 consecutive empty squares
        * the white pawns and pieces (capital letters) fill the bottom two rows
        """
        squares: list[Optional[Piece]] = []
        fen_by_ranks = fen_str.split("/")
        if len(fen_by_ranks) != NUM_RANKS:
            raise MalformedFENError(
                f"Expected {NUM_RANKS} ranks, got {len(fen_by_ranks)}: {fen_str!r}"
            )

        for fen_one_rank in fen_by_ranks:
            rank_squares: list[Optional[Piece]] = []
            for character in fen_one_rank:
                if character in digits:
                    # A number denotes the amount of empty squares after each other
                    rank_squares.extend([None] * int(character))
                else:
                    rank_squares.append(Piece.from_fen(character))

            if len(rank_squares) != NUM_FILES:
                raise MalformedFENError(
                    f"Rank {fen_one_rank!r} covers {len(rank_squares)} files, "
                    f"expected {NUM_FILES}"
                )
            squares.extend(rank_squares)
        return cls(tuple(squares))

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._rank_to_fen(rank) for rank in range(NUM_RANKS))

    def _rank_to_fen(self, rank: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(NUM_FILES):
            piece = self.piece(Square(rank, file))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.squares[self._index(square)]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def locate_color(self, color: Color) -> list[Square]:
        return [
            Square(*divmod(index, NUM_FILES))
            for index, piece in enumerate(self.squares)
            if piece is not None and piece.color == color
        ]

    def with_move(self, from_square: Square, to_square: Square) -> Self:
        """New board with whatever stands on from_square moved to to_square. The old occupant of to_square is gone."""
        squares = list(self.squares)
        squares[self._index(to_square)] = squares[self._index(from_square)]
        squares[self._index(from_square)] = None
        return type(self)(tuple(squares))

    def rows(self) -> list[tuple[Optional[Piece], ...]]:
        """Convenience method for rendering: the grid as rows, top to bottom"""
        return [
            self.squares[rank * NUM_FILES : (rank + 1) * NUM_FILES]
            for rank in range(NUM_RANKS)
        ]

    @staticmethod
    def _index(square: Square) -> int:
        return square.rank * NUM_FILES + square.file
