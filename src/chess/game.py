"""
The GameState is everything the rest of the application needs to know about a game in progress:
where the pieces are and which color moves next.
It is immutable. Applying a move hands back a new GameState (or the very same one, if the move was rejected).
"""

import logging
from dataclasses import dataclass
from typing import Self

from src.chess.board import Board
from src.chess.fen import STARTING_FEN, FENFields
from src.chess.pieces import Color
from src.chess.square import Square

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    board: Board
    side_to_move: Color

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Only the piece placement and the active color are read. Raises MalformedFENError, never builds a partial board."""
        fields = FENFields.from_fen(fen)
        board = Board.from_fen(fields.position)
        return cls(board, fields.color_to_move)

    def to_fen(self) -> str:
        return FENFields(self.board.to_fen(), self.side_to_move).to_fen()

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_FEN)


def load_from_fen(fen: str) -> GameState:
    return GameState.from_fen(fen)


def to_fen(state: GameState) -> str:
    return state.to_fen()


def is_move_allowed(state: GameState, from_square: Square, to_square: Square) -> bool:
    """
    The one and only rule of this board: you cannot land on a piece of your own color.
    ----
    Moving a piece that is not there is not allowed either.

    NOTE: Piece movement patterns, check, and whose turn it is are NOT considered here.
    """
    mover = state.board.piece(from_square)
    if mover is None:
        return False

    target = state.board.piece(to_square)
    return target is None or target.color != mover.color


def apply_move(state: GameState, from_square: Square, to_square: Square) -> GameState:
    """
    Attempt to move a piece.
    ----

    * Accepted: a new GameState. The piece stands on to_square (capturing anything there), from_square is empty,
      and the other color is to move.
    * Rejected: the same GameState object is returned, untouched. No exception is raised.
    """
    if state.board.is_empty(from_square):
        _log.warning(
            "Ignoring move from empty square %s to %s",
            from_square.to_algebraic(),
            to_square.to_algebraic(),
        )
        return state

    if not is_move_allowed(state, from_square, to_square):
        _log.debug(
            "Rejected move %s%s: square occupied by own piece",
            from_square.to_algebraic(),
            to_square.to_algebraic(),
        )
        return state

    new_state = GameState(
        board=state.board.with_move(from_square, to_square),
        side_to_move=state.side_to_move.opposite,
    )
    _log.info(
        "Moved %s%s, now at %s",
        from_square.to_algebraic(),
        to_square.to_algebraic(),
        new_state.to_fen(),
    )
    return new_state
