"""Position builders and failing search helpers shared by the unit tests."""

import os

from reversi_ai.config import HeuristicWeights
from reversi_ai.game.board import Board, Side
from reversi_ai.game.rules import Status, Turn

L = Side.LIGHT
D = Side.DARK


def board_with(cells, fill=None):
    """Board filled with `fill` (None = empty) and the given {coord: side} cells."""
    board = Board.from_rows([[fill] * 8 for _ in range(8)])
    for coord, side in cells.items():
        board.place(coord, side)
    return board


def raw_turn(board, side=Side.LIGHT):
    """Turn with an unnormalised Running status, for evaluator tests."""
    return Turn(board, Status.running(side), board.count(Side.LIGHT), board.count(Side.DARK))


def forced_pass_board():
    """
    Light to move; after Light plays (0, 2) Dark has no move but Light does.

        row 0: L D . . . . . .
        row 7: L D . . . . . .
    """
    return board_with({(0, 0): L, (0, 1): D, (7, 0): L, (7, 1): D})


def one_empty_board():
    """Full Light board except (0, 0) empty and (0, 2) Dark: Dark's only move is (0, 0)."""
    board = board_with({(0, 2): D}, fill=L)
    board.cells[0, 0] = 0
    return board


def two_empty_board():
    """Full Light board with (0, 0), (7, 7) empty; Dark on (0, 2), (7, 5)."""
    board = board_with({(0, 2): D, (7, 5): D}, fill=L)
    board.cells[0, 0] = 0
    board.cells[7, 7] = 0
    return board


class FailingWeights(HeuristicWeights):
    """Weights whose normalisation total raises inside the evaluating process."""

    @property
    def total(self):
        raise RuntimeError("evaluation failed")


class ExitOnLoad:
    """Kills the process that unpickles it, like a worker lost to the OOM killer."""

    def __reduce__(self):
        return os._exit, (1,)
