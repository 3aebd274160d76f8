"""Custom exceptions. Every layer raises a subclass of GameError so callers can catch a single top-level type."""


class GameError(Exception):
    """Top-level exception of this project."""


# --- Domain layer ---
class GameStateError(GameError):
    """Operation not allowed in the current state of the game."""


class InvalidPlayerNameError(GameStateError):
    """A game cannot start without two non-blank player names."""


class InvalidCellError(GameError):
    """Cell index outside of the board."""


class CellOccupiedError(GameError):
    """A marked cell can never be overwritten."""


# --- Service layer ---
class SessionNotFoundError(GameError):
    """No game session registered under the requested ID."""


# --- Persistence layer ---
class RepositoryError(GameError):
    """Storage backend could not complete the request."""


# --- API layer ---
class InvalidRequestError(GameError):
    """Request data could not be interpreted."""
