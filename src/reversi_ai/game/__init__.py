"""
Board, rules and match driver.
"""

from reversi_ai.game.board import BOARD_SIZE, BOARD_AREA, Board, Coord, Side, all_coords
from reversi_ai.game.rules import Status, Turn, apply, try_apply, flips, legal, legal_moves
from reversi_ai.game.match import Match, Opponent, Undo, UNDO

__all__ = [
    'BOARD_SIZE',
    'BOARD_AREA',
    'Board',
    'Coord',
    'Side',
    'all_coords',
    'Status',
    'Turn',
    'apply',
    'try_apply',
    'flips',
    'legal',
    'legal_moves',
    'Match',
    'Opponent',
    'Undo',
    'UNDO',
]
