"""
Pygame front end: draws the board and turns mouse clicks into ClickRequests for the BoardService.

Run: python -m src.ui.app [--fen "<FEN>"] [--tile-size 100] [--log-level INFO]
Controls:
- Left click: select a piece / move the selected piece
- "Theme" button or T key: switch between the two color palettes
"""

import argparse
import logging
from typing import Optional

import pygame

from src.api.models import BoardResponse, ClickRequest, NewGameRequest
from src.chess.pieces import Color, Piece
from src.chess.square import Square
from src.core.exceptions import GameError
from src.services.board_service import BoardService
from src.ui.geometry import (
    BOARD_SIZE,
    PIECE_GLYPHS,
    TILE_SIZE,
    square_at,
    square_origin,
)
from src.ui.theme import (
    PALETTES,
    SELECTION_HIGHLIGHT,
    WHITE_PIECE,
    Theme,
    square_color,
)

_log = logging.getLogger(__name__)

WINDOW_TITLE = "Chess is a Game"
CONTROL_STRIP_HEIGHT = 40
BUTTON_SIZE = (90, 28)
BUTTON_COLOR = (220, 220, 220)
BUTTON_BORDER = (120, 120, 120)
BUTTON_TEXT = (20, 20, 20)
FPS = 30


class Renderer:
    """Draws a BoardResponse onto a surface. Knows nothing about the rules."""

    def __init__(self, surface: pygame.Surface, tile_size: int) -> None:
        self.surface = surface
        self.tile_size = tile_size
        self.piece_font = pygame.font.SysFont(
            "dejavusans,segoeuisymbol,arial", tile_size // 2, bold=True
        )
        self.button_font = pygame.font.SysFont(None, 24)
        self.button_rect = pygame.Rect(
            surface.get_width() - BUTTON_SIZE[0] - 8,
            (CONTROL_STRIP_HEIGHT - BUTTON_SIZE[1]) // 2,
            *BUTTON_SIZE,
        )

    def draw(self, board: BoardResponse, theme: Theme) -> None:
        self.surface.fill(BUTTON_COLOR)
        self._draw_control_strip(theme)
        self._draw_squares(theme)
        self._draw_pieces(board, theme)
        if board.selected is not None:
            self._highlight(Square(*board.selected))

    def _draw_control_strip(self, theme: Theme) -> None:
        pygame.draw.rect(self.surface, BUTTON_COLOR, self.button_rect)
        border_width = 3 if theme == Theme.ALTERNATE else 1
        pygame.draw.rect(self.surface, BUTTON_BORDER, self.button_rect, border_width)
        text = self.button_font.render("Theme", True, BUTTON_TEXT)
        self.surface.blit(text, text.get_rect(center=self.button_rect.center))

    def _draw_squares(self, theme: Theme) -> None:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                tile = self._tile(Square(row, col))
                pygame.draw.rect(self.surface, square_color(row, col, theme), tile)

    def _draw_pieces(self, board: BoardResponse, theme: Theme) -> None:
        for row, contents in enumerate(board.squares):
            for col, fen_char in enumerate(contents):
                if fen_char is None:
                    continue
                piece = Piece.from_fen(fen_char)
                color = (
                    WHITE_PIECE
                    if piece.color == Color.WHITE
                    else PALETTES[theme].black_piece
                )
                text = self.piece_font.render(PIECE_GLYPHS[piece.kind], True, color)
                tile = self._tile(Square(row, col))
                self.surface.blit(text, text.get_rect(center=tile.center))

    def _highlight(self, square: Square) -> None:
        overlay = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        overlay.fill(SELECTION_HIGHLIGHT)
        self.surface.blit(overlay, self._tile(square).topleft)

    def _tile(self, square: Square) -> pygame.Rect:
        x, y = square_origin(square, self.tile_size)
        return pygame.Rect(x, y + CONTROL_STRIP_HEIGHT, self.tile_size, self.tile_size)


class ChessWindow:
    """The event loop. Redraws only when something changed."""

    def __init__(
        self, surface: pygame.Surface, service: BoardService, tile_size: int
    ) -> None:
        self.surface = surface
        self.service = service
        self.tile_size = tile_size
        self.renderer = Renderer(surface, tile_size)
        self.clock = pygame.time.Clock()
        self.theme = Theme.DEFAULT
        self.needs_redraw = True

    def request_redraw(self) -> None:
        self.needs_redraw = True

    def toggle_theme(self) -> None:
        self.theme = self.theme.toggled()
        self.request_redraw()

    def handle_click(self, pos: tuple[int, int]) -> None:
        if self.renderer.button_rect.collidepoint(pos):
            self.toggle_theme()
            return

        x, y = pos
        square = square_at(x, y - CONTROL_STRIP_HEIGHT, self.tile_size)
        if square is None:
            return
        response = self.service.click(ClickRequest(row=square.rank, col=square.file))
        _log.debug("Clicked %s, position now %s", square.to_algebraic(), response.fen)

    def run_once(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_click(event.pos)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_t:
                self.toggle_theme()

        if self.needs_redraw:
            self.renderer.draw(self.service.board_state(), self.theme)
            pygame.display.flip()
            self.needs_redraw = False
        self.clock.tick(FPS)
        return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chessboard", description=WINDOW_TITLE)
    parser.add_argument(
        "--fen",
        default=None,
        help="position to start from (default: standard starting position)",
    )
    parser.add_argument(
        "--tile-size", type=int, default=TILE_SIZE, help="size of one square in pixels"
    )
    parser.add_argument(
        "--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    window: Optional[ChessWindow] = None

    def request_redraw() -> None:
        if window is not None:
            window.request_redraw()

    # a malformed FEN fails here, before a window is opened
    service = BoardService(on_change=request_redraw)
    try:
        service.new_game(NewGameRequest(starting_fen=args.fen))
    except GameError as exc:
        parser.error(f"--fen: {exc}")

    pygame.init()
    board_pixels = BOARD_SIZE * args.tile_size
    screen = pygame.display.set_mode(
        (board_pixels, board_pixels + CONTROL_STRIP_HEIGHT)
    )
    pygame.display.set_caption(WINDOW_TITLE)
    window = ChessWindow(screen, service, args.tile_size)

    running = True
    while running:
        running = window.run_once()

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
