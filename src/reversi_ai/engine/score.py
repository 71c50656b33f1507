"""
Search scores.

A score is either Running (a heuristic value for a position still in play) or
Ended (the exact final disk difference, light minus dark). Both are
Light-positive: Light maximizes, Dark minimizes.

Ordering:
- Running vs Running: numeric
- Ended vs Ended: numeric
- Ended(s > 0) beats every Running value, Ended(s < 0) loses to every one
- Ended(0) ties with Running(0): it beats negative and loses to positive
  Running values

Equality stays structural: Ended(0) != Running(0) even though neither is
ordered before the other. Search only compares with < and >, and results
keep telling a solved draw apart from a heuristic zero.
"""

from dataclasses import dataclass
from typing import Tuple, Union

# Scale of Ended scores in flat numeric form
ENDED_SCALE = 64


@dataclass(frozen=True)
class Score:
    value: Union[int, float]
    ended: bool = False

    @classmethod
    def running(cls, value: float) -> "Score":
        return cls(float(value), False)

    @classmethod
    def final(cls, diff: int) -> "Score":
        return cls(int(diff), True)

    @property
    def sort_key(self) -> Tuple[int, float]:
        # tier 2: won, tier 1: running or drawn, tier 0: lost
        if self.ended:
            if self.value > 0:
                return (2, self.value)
            if self.value < 0:
                return (0, self.value)
            return (1, 0.0)
        return (1, self.value)

    def as_number(self) -> float:
        """Flat numeric form, Ended scores scaled by ENDED_SCALE."""
        if self.ended:
            return self.value * ENDED_SCALE
        return self.value

    def __lt__(self, other: "Score") -> bool:
        return self.sort_key < other.sort_key

    def __gt__(self, other: "Score") -> bool:
        return self.sort_key > other.sort_key

    def __le__(self, other: "Score") -> bool:
        return self.sort_key <= other.sort_key

    def __ge__(self, other: "Score") -> bool:
        return self.sort_key >= other.sort_key

    def __str__(self):
        if self.ended:
            return f"Ended({self.value:+d})"
        return f"Running({self.value:+.2f})"
