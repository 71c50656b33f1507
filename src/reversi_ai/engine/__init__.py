"""
Minimax search engine for Reversi.

This module contains the AI components:
- Score type with terminal-over-heuristic ordering
- Corner-pattern heuristic evaluator
- Iterative-deepening minimax with root fan-out and exact endgame
- Search-based and random opponents
"""

from reversi_ai.engine.score import Score, ENDED_SCALE
from reversi_ai.engine.evaluator import evaluate, heavy_eval, disk_difference, mobility
from reversi_ai.engine.search import SearchEngine, SearchResult, Minimax
from reversi_ai.engine.player import AiPlayer, RandomPlayer

__all__ = [
    'Score',
    'ENDED_SCALE',
    'evaluate',
    'heavy_eval',
    'disk_difference',
    'mobility',
    'SearchEngine',
    'SearchResult',
    'Minimax',
    'AiPlayer',
    'RandomPlayer',
]
