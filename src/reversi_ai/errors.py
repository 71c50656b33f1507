"""
Reversi error hierarchy.

All custom exceptions inherit from ReversiError so callers can catch the whole
family at once. Two kinds of failure exist:

- Recoverable: IllegalMoveError, NoUndoError, ProtocolError. The game state is
  left untouched and the caller re-prompts or re-selects.
- Contract violations: EndedGameError, SearchError. These mean the caller or
  the engine broke an invariant and the current match should be aborted.

Usage:
    from reversi_ai.errors import IllegalMoveError

    try:
        turn = rules.apply(turn, coord)
    except IllegalMoveError as e:
        print(f"Illegal move {e.coord}, try again")
"""

from typing import Any, Optional

__all__ = [
    "ReversiError",
    "InvalidCoordinateError",
    "IllegalMoveError",
    "EndedGameError",
    "NoUndoError",
    "SearchError",
    "ConfigurationError",
    "ProtocolError",
]


class ReversiError(Exception):
    """Base exception for all Reversi errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "REVERSI_ERROR"

    def __init__(self, message: str = "", *, code: Optional[str] = None, **context: Any):
        self.message = message or self.__class__.__doc__ or self.code
        if code is not None:
            self.code = code
        self.context = context
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.context:
            details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({details})"
        return f"[{self.code}] {self.message}"


class InvalidCoordinateError(ReversiError, IndexError):
    """Coordinate falls outside the 8x8 board."""
    code = "INVALID_COORDINATE"


class IllegalMoveError(ReversiError):
    """Move does not capture any disk, or the target cell is taken."""
    code = "ILLEGAL_MOVE"

    def __init__(self, coord, message: str = "", **context: Any):
        self.coord = coord
        super().__init__(message or f"Illegal move at {coord}", coord=coord, **context)


class EndedGameError(ReversiError):
    """A move was requested on a game that has already ended."""
    code = "ENDED_GAME"


class NoUndoError(ReversiError):
    """There is no earlier turn of the requesting side to rewind to."""
    code = "NO_UNDO"


class SearchError(ReversiError):
    """Search engine invariant broken or an evaluation worker failed."""
    code = "SEARCH_ERROR"


class ConfigurationError(ReversiError):
    """Invalid search configuration or unknown strategy name."""
    code = "CONFIGURATION_ERROR"


class ProtocolError(ReversiError):
    """Malformed board/status string or move bytes in the text protocol."""
    code = "PROTOCOL_ERROR"
