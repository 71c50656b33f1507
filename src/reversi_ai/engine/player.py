"""
In-process opponents.

AiPlayer wraps a SearchEngine configured from a named strategy; RandomPlayer
picks a uniformly random legal move and serves as a baseline.
"""

import logging
from typing import Optional

import numpy as np

from reversi_ai.config import SearchConfig, get_strategy
from reversi_ai.engine.search import SearchEngine, SearchResult
from reversi_ai.errors import EndedGameError
from reversi_ai.game.board import Coord
from reversi_ai.game.rules import Turn, legal_moves

logger = logging.getLogger(__name__)


class AiPlayer:
    """
    Search-based opponent.

    Args:
        strategy: name in config.STRATEGIES ('weak', 'medium', 'strong', ...)
        config: explicit SearchConfig, takes precedence over strategy
        **overrides: SearchConfig fields applied on top of the strategy
    """

    def __init__(self, strategy: str = 'medium', config: Optional[SearchConfig] = None, **overrides):
        if config is None:
            self.name = strategy
            config = get_strategy(strategy, **overrides)
        else:
            self.name = 'custom'
            if overrides:
                config = config.with_overrides(**overrides)
        self.engine = SearchEngine(config)
        self.last_result: Optional[SearchResult] = None

    def make_move(self, turn: Turn) -> Coord:
        result = self.engine.find_best_move(turn)
        self.last_result = result
        logger.info(
            "%s (%s) plays %s [depth=%d, nodes=%d, %dms]",
            turn.side_to_move, self.name, result.best_move,
            result.depth_reached, result.nodes_searched, result.time_ms,
        )
        return result.best_move

    def close(self):
        """Release the search worker processes."""
        self.engine.close()

    def __repr__(self):
        return f"AiPlayer({self.name!r})"


class RandomPlayer:
    """Uniformly random legal move."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def make_move(self, turn: Turn) -> Coord:
        moves = legal_moves(turn)
        if not moves:
            raise EndedGameError("No legal moves available")
        return moves[int(self.rng.integers(len(moves)))]

    def __repr__(self):
        return "RandomPlayer()"
