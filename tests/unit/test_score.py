"""
Unit tests for the Score ordering.

Final scores must dominate heuristic ones for the side they favour, while
comparing numerically among themselves.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from reversi_ai.engine.score import ENDED_SCALE, Score
from reversi_ai.engine.search import better
from reversi_ai.game.board import Side


class TestScoreOrdering:
    def test_running_is_numeric(self):
        assert Score.running(2.0) > Score.running(1.0)
        assert Score.running(-3.0) < Score.running(-1.0)

    def test_ended_is_numeric(self):
        assert Score.final(3) > Score.final(2)
        assert Score.final(-5) < Score.final(-1)
        assert Score.final(0) > Score.final(-1)

    def test_won_game_beats_any_heuristic(self):
        for value in [-1000.0, 0.0, 1000.0, 1e9]:
            assert Score.final(5) > Score.running(value)
            assert Score.final(1) > Score.running(value)
            assert Score.running(value) < Score.final(1)

    def test_lost_game_loses_to_any_heuristic(self):
        for value in [-1e9, -1000.0, 0.0, 1000.0]:
            assert Score.final(-1) < Score.running(value)
            assert Score.running(value) > Score.final(-1)

    def test_draw_sits_at_zero(self):
        assert Score.final(0) > Score.running(-0.5)
        assert Score.final(0) < Score.running(0.5)
        assert not Score.final(0) > Score.running(0.0)
        assert not Score.final(0) < Score.running(0.0)

    def test_as_number(self):
        assert Score.final(2).as_number() == 2 * ENDED_SCALE
        assert Score.final(-1).as_number() == -ENDED_SCALE
        assert Score.running(7.5).as_number() == 7.5

    def test_equality_is_structural(self):
        assert Score.final(3) == Score.final(3)
        assert Score.running(3) == Score.running(3.0)
        assert Score.final(0) != Score.running(0.0)

    def test_draw_and_heuristic_zero_tie_in_order(self):
        draw, zero = Score.final(0), Score.running(0.0)
        assert draw <= zero and draw >= zero
        assert draw.sort_key == zero.sort_key
        assert draw != zero


class TestBetter:
    def test_light_maximizes(self):
        assert better(Side.LIGHT, Score.running(2), Score.running(1))
        assert better(Side.LIGHT, Score.final(1), Score.running(100))
        assert not better(Side.LIGHT, Score.running(1), Score.running(1))

    def test_dark_minimizes(self):
        assert better(Side.DARK, Score.running(1), Score.running(2))
        assert better(Side.DARK, Score.final(-1), Score.running(-100))
        assert not better(Side.DARK, Score.final(0), Score.running(-0.5))
