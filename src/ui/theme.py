"""Color palettes of the board. Purely presentation: nothing in here touches the game."""

from dataclasses import dataclass
from enum import Enum, auto

RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, int]

WHITE_PIECE: RGB = (255, 255, 255)
SELECTION_HIGHLIGHT: RGBA = (255, 255, 0, 100)


@dataclass(frozen=True)
class Palette:
    light: RGB
    dark: RGB
    black_piece: RGB


class Theme(Enum):
    DEFAULT = auto()
    ALTERNATE = auto()

    def toggled(self) -> "Theme":
        return Theme.ALTERNATE if self == Theme.DEFAULT else Theme.DEFAULT


PALETTES: dict[Theme, Palette] = {
    Theme.DEFAULT: Palette(
        light=(240, 217, 181), dark=(181, 136, 99), black_piece=(0, 0, 0)
    ),
    Theme.ALTERNATE: Palette(
        light=(224, 237, 217), dark=(29, 13, 40), black_piece=(40, 40, 40)
    ),
}


def square_color(row: int, col: int, theme: Theme) -> RGB:
    """The top-left square is light, then the colors alternate."""
    palette = PALETTES[theme]
    return palette.light if (row + col) % 2 == 0 else palette.dark
