"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from unittest.mock import Mock

import pytest

from src.chess.game import GameState
from src.chess.interaction import InteractionController

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


@pytest.fixture
def starting_state() -> GameState:
    return GameState.from_fen(STARTING_FEN)


@pytest.fixture
def render_request() -> Mock:
    """Stands in for the front end asking for a redraw."""
    return Mock()


@pytest.fixture
def controller(render_request: Mock) -> InteractionController:
    return InteractionController(on_change=render_request)
