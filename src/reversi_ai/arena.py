"""
Play a series of matches between two opponents.

Contestant A and B swap colours every other game when swap_sides is set, so
neither benefits from always moving first.
"""

from dataclasses import dataclass
from typing import Callable

from tqdm import tqdm

from reversi_ai.game.board import Side
from reversi_ai.game.match import Match, Opponent


@dataclass
class SeriesResult:
    wins_a: int = 0
    wins_b: int = 0
    ties: int = 0
    disks_a: int = 0
    disks_b: int = 0

    @property
    def total(self) -> int:
        return self.wins_a + self.wins_b + self.ties

    @property
    def win_rate_a(self) -> float:
        """Wins of A, ties counted as half."""
        if self.total == 0:
            return 0.0
        return (self.wins_a + 0.5 * self.ties) / self.total


def _close(player):
    close = getattr(player, "close", None)
    if close is not None:
        close()


def play_game(dark: Opponent, light: Opponent):
    """Play one match to the end and return the final Turn."""
    return Match(dark, light).play()


def play_series(
    make_a: Callable[[], Opponent],
    make_b: Callable[[], Opponent],
    games: int = 10,
    swap_sides: bool = True,
    verbose: bool = True,
) -> SeriesResult:
    """
    Play `games` matches of A against B.

    Opponents are built fresh for each game from the factories, so players
    with internal state (random generators, search statistics) start clean.
    """
    result = SeriesResult()

    iterator = tqdm(range(games), desc="Series") if verbose else range(games)

    for i in iterator:
        a_side = Side.DARK if (i % 2 == 0 or not swap_sides) else Side.LIGHT
        a, b = make_a(), make_b()
        try:
            if a_side == Side.DARK:
                final = play_game(a, b)
            else:
                final = play_game(b, a)
        finally:
            _close(a)
            _close(b)

        a_disks = final.score_dark if a_side == Side.DARK else final.score_light
        b_disks = final.tempo - a_disks
        result.disks_a += a_disks
        result.disks_b += b_disks

        winner = final.winner()
        if winner is None:
            result.ties += 1
        elif winner == a_side:
            result.wins_a += 1
        else:
            result.wins_b += 1

    if verbose:
        print(f"A wins {result.wins_a} games with total score {result.disks_a}")
        print(f"B wins {result.wins_b} games with total score {result.disks_b}")
        print(f"Tied {result.ties} games")

    return result
