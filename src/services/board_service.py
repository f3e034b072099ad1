"""Orchestration between whatever front end delivers the clicks and the board logic in the domain layer."""

import logging
from typing import Optional

from src.api.models import BoardResponse, ClickRequest, NewGameRequest
from src.chess.game import GameState
from src.chess.interaction import InteractionController, RenderRequest
from src.chess.square import Square
from src.core.shared_types import Color

_log = logging.getLogger(__name__)


class BoardService:
    """Owns the one game of a session, and the controller that interprets the clicks on it."""

    def __init__(self, on_change: Optional[RenderRequest] = None) -> None:
        self.controller = InteractionController(on_change)
        self.game = GameState.starting_position()

    # -- Front end logic ---
    def new_game(self, request: NewGameRequest) -> BoardResponse:
        """
        Start over from the standard starting position, or from the supplied FEN.
        ----
        If the FEN cannot be read, the MalformedFENError propagates and the current game stays as it was.
        """
        game = (
            GameState.from_fen(request.starting_fen)
            if request.starting_fen
            else GameState.starting_position()
        )
        self.game = game
        self.controller.reset()
        _log.info("New game loaded: %s", game.to_fen())
        return self.board_state()

    def click(self, request: ClickRequest) -> BoardResponse:
        """A square was clicked."""
        self.game = self.controller.click(self.game, Square(request.row, request.col))
        return self.board_state()

    def board_state(self) -> BoardResponse:
        """Everything the front end needs to draw the board."""
        selection = self.controller.selection
        return BoardResponse(
            fen=self.game.to_fen(),
            side_to_move=Color[self.game.side_to_move.name],
            squares=[
                [piece.to_fen() if piece is not None else None for piece in row]
                for row in self.game.board.rows()
            ],
            selected=(selection.rank, selection.file) if selection else None,
        )
