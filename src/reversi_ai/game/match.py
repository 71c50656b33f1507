"""
Match driver: two opponents alternate through the Rules Engine.

The match keeps every Turn played so far, so it can rewind for undo. An
opponent is anything with make_move(turn) that returns a coordinate or the
UNDO request.
"""

from typing import List, Optional, Protocol, Tuple, Union

from reversi_ai.errors import EndedGameError, NoUndoError
from reversi_ai.game.board import Coord, Side
from reversi_ai.game.rules import Turn, apply


class Undo:
    """Request to take back the requesting side's last move."""

    def __repr__(self):
        return "UNDO"


UNDO = Undo()

Action = Union[Coord, Undo]


class Opponent(Protocol):
    def make_move(self, turn: Turn) -> Action:
        ...


class Match:
    def __init__(self, dark: Opponent, light: Opponent, start: Optional[Turn] = None):
        self.players = {Side.DARK: dark, Side.LIGHT: light}
        self.history: List[Turn] = [start if start is not None else Turn.initial()]
        self.moves: List[Tuple[Side, Coord]] = []

    @property
    def current_turn(self) -> Turn:
        return self.history[-1]

    @property
    def is_ended(self) -> bool:
        return self.current_turn.is_ended

    def score(self) -> Tuple[int, int]:
        """(dark, light) disk counts."""
        turn = self.current_turn
        return turn.score_dark, turn.score_light

    def play_turn(self) -> Action:
        """
        Ask the side to move for an action and carry it out.

        Raises:
            EndedGameError: the match is over
            IllegalMoveError: the opponent answered with an illegal move; the
                match state is unchanged
            NoUndoError: undo requested with nothing of that side to rewind
        """
        turn = self.current_turn
        if turn.is_ended:
            raise EndedGameError("Match already ended")

        side = turn.side_to_move
        action = self.players[side].make_move(turn)

        if isinstance(action, Undo):
            self.undo(side)
        else:
            coord = (int(action[0]), int(action[1]))
            self.history.append(apply(turn, coord))
            self.moves.append((side, coord))
        return action

    def undo(self, side: Side) -> Turn:
        """
        Rewind to the latest earlier Turn where side was to move.

        Passes mean the previous Turn is not always the other side's, so the
        search walks back through the history.
        """
        for index in range(len(self.history) - 2, -1, -1):
            if self.history[index].side_to_move == side:
                del self.history[index + 1:]
                del self.moves[index:]
                return self.current_turn
        raise NoUndoError("No earlier move to undo", side=str(side))

    def play(self) -> Turn:
        """Play until the game ends and return the final Turn."""
        while not self.is_ended:
            self.play_turn()
        return self.current_turn
