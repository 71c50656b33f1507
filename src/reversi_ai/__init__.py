"""Reversi rules engine and minimax opponent."""

from reversi_ai.config import SearchConfig, STRATEGIES, get_strategy
from reversi_ai.errors import (
    ReversiError,
    IllegalMoveError,
    EndedGameError,
    NoUndoError,
    SearchError,
    ConfigurationError,
    ProtocolError,
)
from reversi_ai.game import Board, Side, Status, Turn, Match, UNDO
from reversi_ai.engine import SearchEngine, SearchResult, Score, AiPlayer, RandomPlayer

__version__ = "0.1"
