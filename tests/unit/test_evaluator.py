"""
Unit tests for the heuristic evaluators.

Sign convention: positive favours Light.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from reversi_ai.config import HeuristicWeights, SearchConfig
from reversi_ai.engine.evaluator import disk_difference, evaluate, heavy_eval, mobility
from reversi_ai.game.board import Side
from reversi_ai.game.rules import Turn, apply, legal_moves

from helpers import D, L, board_with, raw_turn

W = HeuristicWeights()


def heavy(cells):
    return heavy_eval(raw_turn(board_with(cells)))


class TestHeavyEval:
    def test_opening_is_neutral(self):
        assert heavy_eval(Turn.initial()) == 0

    def test_corner_bonus(self):
        assert heavy({(0, 0): L}) == W.corner_bonus
        assert heavy({(0, 0): D}) == -W.corner_bonus

    def test_all_four_corners(self):
        for corner in [(0, 0), (0, 7), (7, 0), (7, 7)]:
            assert heavy({corner: L}) == W.corner_bonus

    def test_wall_behind_corner(self):
        assert heavy({(0, 0): L, (0, 1): L}) == W.corner_bonus + W.fixed_bonus
        assert heavy({(0, 0): L, (0, 1): L, (0, 2): L}) == W.corner_bonus + 2 * W.fixed_bonus
        assert heavy({(0, 0): L, (0, 1): L, (1, 0): L}) == W.corner_bonus + 2 * W.fixed_bonus
        # Even cell alone is not walled in
        assert heavy({(0, 0): L, (0, 2): L}) == W.corner_bonus

    def test_odd_cell_is_malus_to_occupier(self):
        assert heavy({(0, 1): L}) == -W.odd_malus
        assert heavy({(0, 1): D}) == W.odd_malus
        assert heavy({(1, 0): L}) == -W.odd_malus

    def test_even_cell_is_bonus_to_occupier(self):
        assert heavy({(0, 2): L}) == W.even_bonus
        assert heavy({(0, 2): D}) == -W.even_bonus

    def test_odd_cell_shadows_even_cell(self):
        assert heavy({(0, 1): L, (0, 2): L}) == -W.odd_malus

    def test_diagonal_cells(self):
        assert heavy({(1, 1): L}) == -W.odd_corner_malus
        assert heavy({(2, 2): L}) == W.even_corner_bonus
        assert heavy({(6, 6): D}) == W.odd_corner_malus
        assert heavy({(5, 5): D}) == -W.even_corner_bonus

    def test_mirror_symmetry(self):
        cells = {(0, 1): L, (2, 2): D, (0, 7): L, (1, 7): L}
        mirrored = {(7 - r, c): side for (r, c), side in cells.items()}
        assert heavy(cells) == heavy(mirrored)

    def test_colour_swap_negates(self):
        cells = {(0, 0): L, (0, 1): L, (6, 6): D, (7, 5): L, (2, 7): D}
        swapped = {coord: side.opposite() for coord, side in cells.items()}
        assert heavy(swapped) == -heavy(cells)


class TestEvaluate:
    def test_turn_bonus_favours_mover(self):
        config = SearchConfig()
        assert evaluate(Turn.initial(), config) == -config.turn_bonus
        after = apply(Turn.initial(), (2, 3))
        assert evaluate(after, config) == config.turn_bonus

    def test_disk_difference(self):
        config = SearchConfig(evaluator='disk_difference', turn_bonus=0.0)
        after = apply(Turn.initial(), (2, 3))
        assert disk_difference(after) == -3.0
        assert evaluate(after, config) == -3.0

    def test_normalized(self):
        config = SearchConfig(normalize=True, turn_bonus=0.0)
        turn = raw_turn(board_with({(0, 0): L}))
        assert evaluate(turn, config) == pytest.approx(W.corner_bonus / W.total)

    def test_normalized_stays_in_range(self):
        config = SearchConfig(normalize=True, turn_bonus=0.0)
        rng = np.random.default_rng(7)
        for _ in range(50):
            cells = rng.integers(-1, 2, size=(8, 8))
            board = board_with({})
            board.cells[:] = cells
            assert -1.0 <= evaluate(raw_turn(board), config) <= 1.0

    def test_mobility(self):
        assert mobility(Turn.initial()) == 0
        after = apply(Turn.initial(), (2, 3))
        light_moves = len(legal_moves(after))
        assert light_moves == 3
        config = SearchConfig(mobility_weight=1.0, turn_bonus=0.0)
        assert evaluate(after, config) == pytest.approx(heavy_eval(after) + mobility(after))
