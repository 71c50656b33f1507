"""
Configuration for the Reversi search engine.

Every AI opponent is driven by one SearchConfig. The STRATEGIES table maps the
strength levels (weak / medium / strong) and the engine flavours
(brute / heavy / stable / budget) to parameter sets.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from reversi_ai.errors import ConfigurationError

EVALUATORS = ('heavy', 'disk_difference')


@dataclass(frozen=True)
class HeuristicWeights:
    """Weights of the corner-pattern heuristic (values in disk 'points')."""
    corner_bonus: int = 45        # corner taken
    odd_corner_malus: int = 25    # diagonal neighbour of an open corner taken
    even_corner_bonus: int = 10   # second diagonal cell of an open corner taken
    odd_malus: int = 6            # edge neighbour of an open corner taken (x2 per corner)
    even_bonus: int = 4           # second edge cell of an open corner taken (x2 per corner)
    fixed_bonus: int = 3          # edge cell walled in behind an owned corner

    @property
    def total(self) -> int:
        """Largest absolute value the heuristic can reach, used to normalize."""
        per_corner = max(
            self.corner_bonus + 4 * self.fixed_bonus,
            2 * self.odd_malus + self.odd_corner_malus,
            2 * self.even_bonus + self.even_corner_bonus,
        )
        return 4 * per_corner


@dataclass(frozen=True)
class SearchConfig:
    minimum_depth: int = 4              # first iterative-deepening depth
    time_limit: float = 1.0             # seconds; checked between depths only
    endgame_threshold: int = 8          # empty cells at which exact solving starts
    randomness_tolerance: float = 0.0   # root near-tie window, 0 = deterministic
    evaluator: str = 'heavy'            # 'heavy' or 'disk_difference'
    normalize: bool = False             # scale heavy score to [-1, 1]
    mobility_weight: float = 0.0        # per legal-move difference
    turn_bonus: float = 3.0             # tempo bonus for the side to move
    computation_budget: Optional[float] = None  # budget mode instead of depth
    max_depth: Optional[int] = None     # hard cap on deepening, None = end of game
    workers: int = 1                    # root fan-out processes, <= 1 is in-process
    seed: Optional[int] = None          # seed for root tie sampling
    weights: HeuristicWeights = field(default_factory=HeuristicWeights)

    def validate(self) -> "SearchConfig":
        if self.minimum_depth < 1:
            raise ConfigurationError("minimum_depth must be at least 1", minimum_depth=self.minimum_depth)
        if self.max_depth is not None and self.max_depth < self.minimum_depth:
            raise ConfigurationError("max_depth must not be below minimum_depth", max_depth=self.max_depth)
        if self.time_limit < 0:
            raise ConfigurationError("time_limit must be non-negative", time_limit=self.time_limit)
        if self.endgame_threshold < 0:
            raise ConfigurationError("endgame_threshold must be non-negative",
                                     endgame_threshold=self.endgame_threshold)
        if self.randomness_tolerance < 0:
            raise ConfigurationError("randomness_tolerance must be non-negative",
                                     randomness_tolerance=self.randomness_tolerance)
        if self.evaluator not in EVALUATORS:
            raise ConfigurationError("Unknown evaluator", evaluator=self.evaluator)
        if self.computation_budget is not None and self.computation_budget < 1:
            raise ConfigurationError("computation_budget must be at least 1",
                                     computation_budget=self.computation_budget)
        return self

    def with_overrides(self, **overrides) -> "SearchConfig":
        try:
            return replace(self, **overrides).validate()
        except TypeError as e:
            raise ConfigurationError(f"Invalid override: {e}") from e


# Strategy table
STRATEGIES = {
    # Strength levels
    'weak': SearchConfig(
        minimum_depth=1,
        time_limit=0.1,
        endgame_threshold=4,
        randomness_tolerance=1.0,
    ),
    'medium': SearchConfig(
        minimum_depth=3,
        time_limit=0.5,
        endgame_threshold=6,
        randomness_tolerance=1.0,
    ),
    'strong': SearchConfig(
        minimum_depth=4,
        time_limit=1.0,
        endgame_threshold=8,
        mobility_weight=1.0,
        workers=4,
    ),

    # Engine flavours
    'brute': SearchConfig(
        minimum_depth=3,
        time_limit=0.5,
        endgame_threshold=0,
        evaluator='disk_difference',
        turn_bonus=0.0,
    ),
    'heavy': SearchConfig(
        minimum_depth=3,
        time_limit=0.5,
        endgame_threshold=0,
        turn_bonus=1.0,
    ),
    'stable': SearchConfig(
        minimum_depth=4,
        time_limit=1.0,
        endgame_threshold=8,
        randomness_tolerance=1.0,
        mobility_weight=1.0,
    ),
    'budget': SearchConfig(
        computation_budget=1000.0,
        normalize=True,
        turn_bonus=0.0,
        randomness_tolerance=0.05,
    ),
}

STRENGTH_LEVELS = ('weak', 'medium', 'strong')


def get_strategy(name: str, **overrides) -> SearchConfig:
    """Look up a strategy by name and apply keyword overrides."""
    try:
        config = STRATEGIES[name.lower()]
    except KeyError:
        raise ConfigurationError("Unknown strategy", name=name, known=sorted(STRATEGIES)) from None
    return config.with_overrides(**overrides)
