"""Mapping between screen pixels and squares"""

from typing import Optional

from src.chess.pieces import PieceType
from src.chess.square import BOARD_DIMENSIONS, Square

TILE_SIZE = 100
BOARD_SIZE = BOARD_DIMENSIONS[0]

# Outline glyphs for both colors; the color of the text tells the sides apart
PIECE_GLYPHS: dict[PieceType, str] = {
    PieceType.KING: "♔",
    PieceType.QUEEN: "♕",
    PieceType.ROOK: "♖",
    PieceType.BISHOP: "♗",
    PieceType.KNIGHT: "♘",
    PieceType.PAWN: "♙",
}


def square_at(x: int, y: int, tile_size: int = TILE_SIZE) -> Optional[Square]:
    """Square under the pixel (x, y), measured from the top-left corner of the board. None when off the board."""
    if x < 0 or y < 0:
        return None
    square = Square(y // tile_size, x // tile_size)
    return square if square.is_within_bounds() else None


def square_origin(square: Square, tile_size: int = TILE_SIZE) -> tuple[int, int]:
    """Top-left pixel (x, y) of a square"""
    return square.file * tile_size, square.rank * tile_size
