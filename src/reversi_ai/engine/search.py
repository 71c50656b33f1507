"""
Minimax search engine for Reversi.

Plain minimax (no pruning) with the work split across root moves:

    def find_best_move(turn):
        moves = legal_moves(turn)
        if len(moves) == 1:
            return moves[0]                      # forced, nothing to search
        depth = minimum_depth
        scores = fan_out(moves, depth)           # one task per root move
        while elapsed < time_limit and depth + 1 + tempo <= 64:
            depth += 1
            scores = fan_out(moves, depth)       # previous answer discarded
        return extremal(scores)

Each root task owns its own copy of the post-move Turn and recurses
sequentially below it, so tasks share no mutable state. Results are joined in
root-move order, which makes ties resolve by row-major board order no matter
which task finishes first. The clock is only read between depth iterations:
a depth that has started always completes.

With workers > 1 the tasks run in a spawn ProcessPoolExecutor owned by the
engine. A worker that raises or dies aborts the move with SearchError.

Modes:
- iterative deepening with a heuristic at the cutoff (default)
- exact endgame: once empty cells <= endgame_threshold, search to the end of
  the game so every leaf is a final score
- computation budget: each root move gets budget / n_moves units, each node
  splits its units evenly among its children and stops below one unit
"""

import logging
import multiprocessing as mp
import os
import time
from concurrent.futures import ProcessPoolExecutor
from concurrent.futures.process import BrokenProcessPool
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from reversi_ai.config import SearchConfig
from reversi_ai.engine.evaluator import evaluate
from reversi_ai.engine.score import Score
from reversi_ai.errors import EndedGameError, SearchError
from reversi_ai.game.board import BOARD_AREA, Coord, Side
from reversi_ai.game.rules import Turn, apply, legal_moves

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Result of one move computation."""
    best_move: Coord
    score: Optional[Score]
    depth_reached: int
    nodes_searched: int
    time_ms: int
    exact: bool = False
    forced: bool = False
    root_scores: List[Tuple[Coord, Score]] = field(default_factory=list)


def better(side: Side, new: Score, best: Score) -> bool:
    """Whether new strictly improves on best for side (Light max, Dark min)."""
    if side == Side.LIGHT:
        return new > best
    return new < best


class Minimax:
    """
    Sequential minimax below one root move.

    One instance per root task; it only keeps a node counter, the Turns it
    visits are fresh values produced by rules.apply.
    """

    def __init__(self, config: SearchConfig):
        self.config = config
        self.nodes = 0

    def eval(self, turn: Turn, depth: int) -> Score:
        self.nodes += 1

        if turn.is_ended:
            return Score.final(turn.score_diff)

        if depth <= 0:
            return Score.running(evaluate(turn, self.config))

        return self._best_child(turn, lambda child, n_moves: self.eval(child, depth - 1))

    def eval_budget(self, turn: Turn, budget: float) -> Score:
        self.nodes += 1

        if turn.is_ended:
            return Score.final(turn.score_diff)

        if budget < 1:
            return Score.running(evaluate(turn, self.config))

        return self._best_child(turn, lambda child, n_moves: self.eval_budget(child, budget / n_moves))

    def _best_child(self, turn: Turn, recurse) -> Score:
        moves = legal_moves(turn)
        if not moves:
            # Running status guarantees a move; reaching this is a rules bug
            raise SearchError("Running position without legal moves", status=str(turn.status))

        side = turn.side_to_move
        best = None
        for move in moves:
            score = recurse(apply(turn, move), len(moves))
            if best is None or better(side, score, best):
                best = score
        return best


def _evaluate_branch(task):
    """Root task: score one root move (module level so it can be pickled)."""
    coord, turn_after_move, depth, budget, config = task
    searcher = Minimax(config)
    if budget is not None:
        score = searcher.eval_budget(turn_after_move, budget)
    else:
        score = searcher.eval(turn_after_move, depth)
    return coord, score, searcher.nodes


def _worker_ready(_):
    return os.getpid()


class _InProcessPool:
    def map(self, func, iterable):
        return [func(item) for item in iterable]


class SearchEngine:
    """
    Iterative-deepening minimax with root fan-out.

    Usage:
        with SearchEngine(get_strategy('strong')) as engine:
            result = engine.find_best_move(turn)
            turn = rules.apply(turn, result.best_move)

    The worker processes are started on the first search that needs them and
    kept until close().
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = (config or SearchConfig()).validate()
        self.rng = np.random.default_rng(self.config.seed)
        self.nodes_searched = 0
        self._executor: Optional[ProcessPoolExecutor] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Shut down the worker processes, if any were started."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def find_best_move(self, turn: Turn) -> SearchResult:
        """
        Pick a move for the side to move.

        Raises:
            EndedGameError: turn is Ended (callers must check the status first)
            SearchError: an evaluation task failed or an invariant broke
        """
        if turn.is_ended:
            raise EndedGameError("Game ended, cannot search for a move")

        start_time = time.perf_counter()
        self.nodes_searched = 0

        moves = legal_moves(turn)
        if not moves:
            raise SearchError("Running position without legal moves", status=str(turn.status))

        if len(moves) == 1:
            logger.debug("Forced move %s, skipping search", moves[0])
            return SearchResult(
                best_move=moves[0],
                score=None,
                depth_reached=0,
                nodes_searched=0,
                time_ms=self._elapsed_ms(start_time),
                forced=True,
            )

        config = self.config
        exact = False

        pool = self._pool()
        # The time budget covers searching only, not worker start-up
        search_start = time.perf_counter()

        if config.computation_budget is not None:
            depth = 0
            root_scores = self._search_root(
                pool, turn, moves, depth=0, budget=config.computation_budget / len(moves)
            )
        elif turn.empty_count <= config.endgame_threshold:
            depth = turn.empty_count
            exact = True
            logger.debug("Endgame: solving %d empty cells exactly", depth)
            root_scores = self._search_root(pool, turn, moves, depth=depth)
        else:
            depth = config.minimum_depth
            root_scores = self._search_root(pool, turn, moves, depth=depth)
            while self._should_deepen(turn, depth, search_start):
                depth += 1
                root_scores = self._search_root(pool, turn, moves, depth=depth)

        best_move, best_score = self._select(turn.side_to_move, root_scores)
        elapsed_ms = self._elapsed_ms(start_time)

        logger.debug(
            "Search done: move=%s score=%s depth=%d nodes=%d time=%dms",
            best_move, best_score, depth, self.nodes_searched, elapsed_ms,
        )

        return SearchResult(
            best_move=best_move,
            score=best_score,
            depth_reached=depth,
            nodes_searched=self.nodes_searched,
            time_ms=elapsed_ms,
            exact=exact,
            root_scores=root_scores,
        )

    def _should_deepen(self, turn: Turn, depth: int, start_time: float) -> bool:
        if time.perf_counter() - start_time >= self.config.time_limit:
            return False
        if depth + 1 + turn.tempo > BOARD_AREA:
            return False
        if self.config.max_depth is not None and depth + 1 > self.config.max_depth:
            return False
        return True

    def _search_root(
        self,
        pool,
        turn: Turn,
        moves: List[Coord],
        depth: int,
        budget: Optional[float] = None,
    ) -> List[Tuple[Coord, Score]]:
        """Score every root move at one depth; results come back in move order."""
        tasks = [(move, apply(turn, move), depth - 1, budget, self.config) for move in moves]

        try:
            results = list(pool.map(_evaluate_branch, tasks))
        except SearchError:
            raise
        except BrokenProcessPool as e:
            # A worker died; the executor cannot run further tasks
            self.close()
            raise SearchError("Evaluation worker terminated abruptly", depth=depth) from e
        except Exception as e:
            raise SearchError(f"Evaluation task failed: {e!r}", depth=depth) from e

        root_scores = []
        for coord, score, nodes in results:
            root_scores.append((coord, score))
            self.nodes_searched += nodes

        logger.debug("Depth %d complete: %d nodes so far", depth, self.nodes_searched)
        return root_scores

    def _select(self, side: Side, root_scores: List[Tuple[Coord, Score]]) -> Tuple[Coord, Score]:
        """
        Extremal score for side, first one in board order on ties.

        With a randomness tolerance, any Running candidate within the
        tolerance of the best Running score may be picked instead.
        """
        best_move, best_score = root_scores[0]
        for move, score in root_scores[1:]:
            if better(side, score, best_score):
                best_move, best_score = move, score

        tolerance = self.config.randomness_tolerance
        if tolerance > 0 and not best_score.ended:
            candidates = [
                (move, score) for move, score in root_scores
                if not score.ended and abs(score.value - best_score.value) <= tolerance
            ]
            best_move, best_score = candidates[int(self.rng.integers(len(candidates)))]

        return best_move, best_score

    def _pool(self):
        workers = self.config.workers
        if workers <= 1:
            return _InProcessPool()
        if self._executor is None:
            ctx = mp.get_context('spawn')
            executor = ProcessPoolExecutor(max_workers=workers, mp_context=ctx)
            try:
                # One task per worker so every process is up before the clock starts
                pids = set(executor.map(_worker_ready, range(workers)))
            except BrokenProcessPool as e:
                executor.shutdown(wait=True)
                raise SearchError("Evaluation workers failed to start", workers=workers) from e
            logger.debug("Started %d search workers", len(pids))
            self._executor = executor
        return self._executor

    @staticmethod
    def _elapsed_ms(start_time: float) -> int:
        return int((time.perf_counter() - start_time) * 1000)
