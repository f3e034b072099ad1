"""Custom exceptions shared by all layers. Everything derives from GameError so callers can catch one type."""


class GameError(Exception):
    """Top-level exception of the application."""


class MalformedFENError(GameError):
    """The piece placement of a FEN string cannot be turned into an 8x8 board."""


class InvalidRequestError(GameError):
    """A request coming in from the boundary layer is not well-formed."""
