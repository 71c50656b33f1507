"""
Unit tests for the match driver: alternation, passes, illegal answers and undo.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from reversi_ai.engine.player import RandomPlayer
from reversi_ai.errors import EndedGameError, IllegalMoveError, NoUndoError
from reversi_ai.game.board import Side
from reversi_ai.game.match import UNDO, Match
from reversi_ai.game.rules import Turn

from helpers import L, board_with, forced_pass_board


class Scripted:
    """Opponent that replays a fixed list of actions."""

    def __init__(self, actions):
        self.actions = list(actions)
        self.seen = []

    def make_move(self, turn):
        self.seen.append(turn)
        return self.actions.pop(0)


class TestPlay:
    def test_random_match_reaches_the_end(self):
        match = Match(RandomPlayer(seed=0), RandomPlayer(seed=1))
        final = match.play()

        assert final.is_ended
        assert match.is_ended
        assert len(match.history) == len(match.moves) + 1
        dark, light = match.score()
        assert dark + light == final.tempo

    def test_sides_alternate(self):
        dark = Scripted([(2, 3)])
        light = Scripted([(2, 2)])
        match = Match(dark, light)

        match.play_turn()
        match.play_turn()

        assert match.moves == [(Side.DARK, (2, 3)), (Side.LIGHT, (2, 2))]
        assert dark.seen[0] == Turn.initial()
        assert match.current_turn.side_to_move == Side.DARK

    def test_pass_gives_same_side_another_turn(self):
        dark = Scripted([])
        light = Scripted([(0, 2), (7, 2)])
        match = Match(dark, light, start=Turn.custom(forced_pass_board(), Side.LIGHT))

        final = match.play()

        assert dark.seen == []
        assert [side for side, _ in match.moves] == [Side.LIGHT, Side.LIGHT]
        assert final.is_ended
        assert match.score() == (0, 6)

    def test_illegal_answer_leaves_state_unchanged(self):
        match = Match(Scripted([(0, 0)]), Scripted([]))

        with pytest.raises(IllegalMoveError) as excinfo:
            match.play_turn()

        assert excinfo.value.coord == (0, 0)
        assert match.history == [Turn.initial()]
        assert match.moves == []

    def test_play_after_end(self):
        ended = Turn.custom(board_with({}, fill=L), Side.DARK)
        match = Match(Scripted([]), Scripted([]), start=ended)
        with pytest.raises(EndedGameError):
            match.play_turn()


class TestUndo:
    def test_undo_rewinds_to_own_previous_turn(self):
        dark = Scripted([(2, 3), UNDO])
        light = Scripted([(2, 2)])
        match = Match(dark, light)

        match.play_turn()
        match.play_turn()
        action = match.play_turn()

        assert action is UNDO
        assert match.history == [Turn.initial()]
        assert match.moves == []
        assert match.current_turn.side_to_move == Side.DARK

    def test_undo_across_a_pass(self):
        light = Scripted([(0, 2), UNDO])
        start = Turn.custom(forced_pass_board(), Side.LIGHT)
        match = Match(Scripted([]), light, start=start)

        match.play_turn()
        assert match.current_turn.side_to_move == Side.LIGHT
        match.play_turn()

        assert match.current_turn == start
        assert match.moves == []

    def test_nothing_to_undo_at_start(self):
        match = Match(Scripted([UNDO]), Scripted([]))
        with pytest.raises(NoUndoError):
            match.play_turn()
        assert match.history == [Turn.initial()]

    def test_light_cannot_undo_before_its_first_move(self):
        match = Match(Scripted([(2, 3)]), Scripted([UNDO]))
        match.play_turn()
        with pytest.raises(NoUndoError):
            match.play_turn()
        assert len(match.history) == 2
