"""
Reading and writing the parts of a FEN string this board actually uses: the piece placement and the active color.
"""

from dataclasses import dataclass
from typing import Self

from src.chess.pieces import Color
from src.core.exceptions import MalformedFENError

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Castling rights, en passant square and the move clocks are not tracked. These are always written out as the defaults.
FEN_DEFAULT_SUFFIX = "KQkq - 0 1"


def color_from_fen(active_color: str) -> Color:
    """Anything that is not exactly 'w' (including a missing field) means Black is to move."""
    return Color.WHITE if active_color == "w" else Color.BLACK


def color_to_fen(color: Color) -> str:
    return "w" if color == Color.WHITE else "b"


@dataclass(frozen=True)
class FENFields:
    """
    The two leading fields of a FEN string.
    ----

    FEN, or Forsyth-Edwards Notation, is a standard notation for describing a particular board position of a chess game.

    <board position string><active color><castling rights><en passant square><# half move clock><number turns played>

    * The board position lists the ranks from top (8th) to bottom (1st), separated by slashes.
      Letters are pieces (capitals for White), digits count consecutive empty squares.
    * The active color is "w" or "b".
    * The remaining four fields are accepted on input but not interpreted.
      On output they are always the defaults of the starting position: KQkq - 0 1

    ex) The standard starting position has a FEN
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1
    """

    position: str
    color_to_move: Color

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Split the FEN into its fields. Whether the board position can be built is up to Board.from_fen"""
        parts = fen.split()
        if not parts:
            raise MalformedFENError(f"Cannot interpret supplied string as FEN: {fen!r}")

        active_color = parts[1] if len(parts) > 1 else ""
        return cls(parts[0], color_from_fen(active_color))

    def to_fen(self) -> str:
        active_color = color_to_fen(self.color_to_move)
        return f"{self.position} {active_color} {FEN_DEFAULT_SUFFIX}"
