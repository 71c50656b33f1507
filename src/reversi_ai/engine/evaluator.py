"""
Static position evaluation used at the search cutoff.

The heavy heuristic only looks at four fixed 7-cell corner patterns, so it is
O(1) per leaf. Scores are Light-positive.

Corner pattern (NW shown; the other corners are mirrored):

    C  o  e  .          C = corner
    co oc .  .          o / co = odd cells (edge neighbours of the corner)
    ce .  ec .          e / ce = even cells (one step further along the edge)
                        oc / ec = odd / even diagonal cells

- corner taken by S: big bonus to S, plus a fixed bonus for each odd cell of S
  walled in behind it (and its even cell behind that)
- corner empty: an odd cell is a malus to its owner, otherwise the even cell is
  a bonus to its owner; same for the diagonal pair
"""

from typing import Tuple

from reversi_ai.config import HeuristicWeights, SearchConfig
from reversi_ai.game.board import EMPTY, Coord, Side
from reversi_ai.game.rules import Status, Turn, legal_moves

# (corner, odd, odd_corner, even, even_corner, counter_odd, counter_even)
CORNER_PATTERNS: Tuple[Tuple[Coord, ...], ...] = (
    ((0, 0), (0, 1), (1, 1), (0, 2), (2, 2), (1, 0), (2, 0)),  # NW
    ((0, 7), (1, 7), (1, 6), (2, 7), (2, 5), (0, 6), (0, 5)),  # NE
    ((7, 0), (6, 0), (6, 1), (5, 0), (5, 2), (7, 1), (7, 2)),  # SW
    ((7, 7), (6, 7), (6, 6), (5, 7), (5, 5), (7, 6), (7, 5)),  # SE
)


def disk_difference(turn: Turn) -> float:
    """Light disks minus Dark disks."""
    return float(turn.score_diff)


def _edge_score(cells, odd: Coord, even: Coord, w: HeuristicWeights) -> int:
    owner = cells.item(odd)
    if owner != EMPTY:
        return -owner * w.odd_malus
    owner = cells.item(even)
    if owner != EMPTY:
        return owner * w.even_bonus
    return 0


def heavy_eval(turn: Turn, weights: HeuristicWeights = HeuristicWeights()) -> int:
    """Corner-pattern heuristic, Light-positive."""
    cells = turn.board.cells
    w = weights
    score = 0

    for corner, odd, odd_corner, even, even_corner, counter_odd, counter_even in CORNER_PATTERNS:
        owner = cells.item(corner)
        if owner != EMPTY:
            score += owner * w.corner_bonus
            if cells.item(odd) == owner:
                score += owner * w.fixed_bonus
                if cells.item(even) == owner:
                    score += owner * w.fixed_bonus
            if cells.item(counter_odd) == owner:
                score += owner * w.fixed_bonus
                if cells.item(counter_even) == owner:
                    score += owner * w.fixed_bonus
        else:
            score += _edge_score(cells, odd, even, w)
            score += _edge_score(cells, counter_odd, counter_even, w)

            diagonal = cells.item(odd_corner)
            if diagonal != EMPTY:
                score -= diagonal * w.odd_corner_malus
            else:
                diagonal = cells.item(even_corner)
                if diagonal != EMPTY:
                    score += diagonal * w.even_corner_bonus

    return score


def mobility(turn: Turn) -> int:
    """Legal moves of Light minus legal moves of Dark on the current board."""
    light = Turn(turn.board, Status.running(Side.LIGHT), turn.score_light, turn.score_dark)
    dark = Turn(turn.board, Status.running(Side.DARK), turn.score_light, turn.score_dark)
    return len(legal_moves(light)) - len(legal_moves(dark))


def evaluate(turn: Turn, config: SearchConfig) -> float:
    """
    Cutoff score of a running position, Light-positive.

    Combines the configured evaluator with the optional mobility term and a
    tempo bonus toward the side to move.
    """
    if config.evaluator == 'disk_difference':
        score = disk_difference(turn)
    else:
        score = float(heavy_eval(turn, config.weights))
        if config.normalize:
            score /= config.weights.total

    if config.mobility_weight:
        score += config.mobility_weight * mobility(turn)

    if turn.side_to_move is not None:
        score += int(turn.side_to_move) * config.turn_bonus

    return score
