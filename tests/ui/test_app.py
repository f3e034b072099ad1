"""Unit tests for src/ui/app.py, run against SDL's dummy video driver so no display is needed"""

from typing import Iterator
from unittest.mock import Mock

import pygame
import pytest

from src.services.board_service import BoardService
from src.ui.app import CONTROL_STRIP_HEIGHT, ChessWindow, main
from src.ui.theme import Theme

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
TILE = 100


@pytest.fixture
def window(monkeypatch: pytest.MonkeyPatch) -> Iterator[ChessWindow]:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    pygame.font.init()
    surface = pygame.Surface((8 * TILE, 8 * TILE + CONTROL_STRIP_HEIGHT))
    yield ChessWindow(surface, BoardService(), TILE)
    pygame.quit()


# -- CLICK HANDLING ---
def test_theme_button_toggles_theme(window: ChessWindow) -> None:
    window.needs_redraw = False
    window.handle_click(window.renderer.button_rect.center)

    assert window.theme == Theme.ALTERNATE
    assert window.needs_redraw
    assert window.service.board_state().fen == STARTING_FEN
    assert window.service.board_state().selected is None


def test_click_on_board_is_shifted_by_control_strip(window: ChessWindow) -> None:
    """(450, 650) is e2 on the board itself, the strip above pushes it down"""
    window.handle_click((450, 650 + CONTROL_STRIP_HEIGHT))
    assert window.service.board_state().selected == (6, 4)

    window.handle_click((450, 450 + CONTROL_STRIP_HEIGHT))
    state = window.service.board_state()
    assert state.selected is None
    assert state.fen == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"
    assert window.theme == Theme.DEFAULT


@pytest.mark.parametrize(
    "pos",
    [
        (10, 20),  # control strip, left of the button
        (450, CONTROL_STRIP_HEIGHT - 1),  # last pixel row of the strip
        (450, 8 * TILE + CONTROL_STRIP_HEIGHT),  # below the board
        (8 * TILE, 400),  # right of the board
    ],
)
def test_clicks_off_the_board_are_ignored(
    window: ChessWindow, pos: tuple[int, int]
) -> None:
    window.handle_click(pos)

    state = window.service.board_state()
    assert state.fen == STARTING_FEN
    assert state.selected is None
    assert window.theme == Theme.DEFAULT


def test_click_on_top_row_selects_nothing_for_white(window: ChessWindow) -> None:
    """a8 holds a black rook, and it is White's turn"""
    window.handle_click((50, CONTROL_STRIP_HEIGHT))
    assert window.service.board_state().selected is None


# -- COMMAND LINE ---
@pytest.mark.parametrize(
    "fen",
    [
        "not a fen",
        "rnbqkbnr/pppppppp/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
        "",  # blank, rejected by the request model
    ],
)
def test_bad_fen_is_a_usage_error(
    fen: str, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    pygame_init = Mock()
    monkeypatch.setattr(pygame, "init", pygame_init)

    with pytest.raises(SystemExit) as exc_info:
        main(["--fen", fen])

    assert exc_info.value.code == 2
    assert "--fen:" in capsys.readouterr().err
    # no window is opened
    pygame_init.assert_not_called()
