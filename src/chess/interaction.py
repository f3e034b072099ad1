"""
Turning clicks on squares into moves.

The controller remembers a single thing: which square (if any) was clicked first.
The GameState itself is passed in and handed back on every click, the controller never holds on to it.
"""

import logging
from enum import Enum, auto
from typing import Callable, Optional

from src.chess.game import GameState, apply_move
from src.chess.square import Square

_log = logging.getLogger(__name__)

RenderRequest = Callable[[], None]


class ControllerState(Enum):
    IDLE = auto()
    SELECTED = auto()


def _no_render() -> None:
    return None


class InteractionController:
    """Two states: IDLE (nothing selected) and SELECTED (a piece of the side to move is picked up)."""

    def __init__(self, on_change: Optional[RenderRequest] = None) -> None:
        self._selection: Optional[Square] = None
        self._on_change = on_change or _no_render

    @property
    def selection(self) -> Optional[Square]:
        return self._selection

    @property
    def state(self) -> ControllerState:
        if self._selection is None:
            return ControllerState.IDLE
        return ControllerState.SELECTED

    def reset(self) -> None:
        self._selection = None

    def click(self, game: GameState, target: Square) -> GameState:
        """
        Handle one click on a square.
        ----

        IDLE:
            * target holds a piece of the side to move -> select it
            * anything else -> silently ignored
        SELECTED:
            * try to move the selected piece to target, then ALWAYS drop the selection (also when the move was rejected)
        """
        if self._selection is None:
            piece = game.board.piece(target)
            if piece is not None and piece.color == game.side_to_move:
                self._selection = target
                _log.debug("Selected %s", target.to_algebraic())
                self._on_change()
            return game

        source = self._selection
        new_game = apply_move(game, source, target)
        self._selection = None
        self._on_change()
        return new_game
