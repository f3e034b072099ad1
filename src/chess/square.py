"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# (number of ranks, number of files). Chess board is always 8x8.
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    """
    Grid coordinate of a square, as it is drawn on screen.

    rank 0 is the topmost rendered row (the 8th rank in chess terms), file 0 is the left-most column (the a-file).
    """

    rank: int
    file: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' - 'h1' get converted to (0,0) - (7,7)"""
        file = ord(sq[0]) - ord("a")
        rank = BOARD_DIMENSIONS[0] - int(sq[1])
        return cls(rank, file)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a'))}{BOARD_DIMENSIONS[0] - self.rank}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.rank < BOARD_DIMENSIONS[0]) and (
            0 <= self.file < BOARD_DIMENSIONS[1]
        )
