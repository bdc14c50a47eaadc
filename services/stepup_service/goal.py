"""
Daily step goal with progressive digit reveal.

The goal is a random number the user cannot see up front. Every full
thousand steps unmasks one more leading digit; reaching the goal unmasks
all of them.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

GOAL_MIN = 5000
GOAL_MAX = 10000
STEPS_PER_DIGIT = 1000
MASK_CHAR = "*"

GOAL_REACHED_MESSAGE = "Today's step goal"
GOAL_PENDING_MESSAGE = "Every 1000 steps will unmask a digit of today's step goal"


def generate_daily_goal(
    rng: random.Random | None = None,
    minimum: int = GOAL_MIN,
    maximum: int = GOAL_MAX,
) -> int:
    """Random goal in [minimum, maximum)."""
    if maximum <= minimum:
        raise ValueError(f"goal range is empty: [{minimum}, {maximum})")
    return (rng or random).randrange(minimum, maximum)


def crossed_thousand(previous: int, current: int) -> bool:
    return current // STEPS_PER_DIGIT > previous // STEPS_PER_DIGIT


@dataclass(frozen=True)
class DailyGoal:
    value: int

    @property
    def digits(self) -> str:
        return str(self.value)

    def is_reached(self, steps: int) -> bool:
        return steps >= self.value

    def revealed_count(self, steps: int) -> int:
        if self.is_reached(steps):
            return len(self.digits)
        return min(steps // STEPS_PER_DIGIT, len(self.digits))

    def masked(self, steps: int) -> str:
        shown = self.revealed_count(steps)
        return self.digits[:shown] + MASK_CHAR * (len(self.digits) - shown)

    def message(self, steps: int) -> str:
        return GOAL_REACHED_MESSAGE if self.is_reached(steps) else GOAL_PENDING_MESSAGE
