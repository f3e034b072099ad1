"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color

# FEN letter of the piece on a square, or None for an empty square
SquareContent = Optional[str]


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    starting_fen: Optional[str] = None

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        if not value.strip():
            raise InvalidRequestError("FEN string cannot be blank.")
        return value


class ClickRequest(BaseModel):
    """A click that was already mapped onto the grid (row 0 is the top row)."""

    row: int
    col: int

    @field_validator("row")
    @classmethod
    def validate_row(cls, value: int) -> int:
        if not (0 <= value < BOARD_DIMENSIONS[0]):
            raise InvalidRequestError(f"Row {value} is not on the board.")
        return value

    @field_validator("col")
    @classmethod
    def validate_col(cls, value: int) -> int:
        if not (0 <= value < BOARD_DIMENSIONS[1]):
            raise InvalidRequestError(f"Column {value} is not on the board.")
        return value


# --- RESPONSE MODELS ---
class BoardResponse(BaseModel):
    fen: str
    side_to_move: Color
    squares: list[list[SquareContent]]
    selected: Optional[tuple[int, int]] = None
