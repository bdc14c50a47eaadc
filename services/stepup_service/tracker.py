"""
Step-count observer and display state.

The health platform (or anything standing in for it) calls update() with
today's cumulative step count whenever it changes. Each update kicks off a
background request for a motivational sentence; failures are logged and the
message is simply left out of the display, since it is cosmetic.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from shared.logging.logger import log_extra
from shared.motivation import MotivationError, MotivationProvider
from shared.motivation.base import validate_steps
from shared.observability.metrics import step_count, step_updates
from services.stepup_service.goal import DailyGoal, crossed_thousand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepUpdate:
    steps: int
    previous: int
    crossed_thousand: bool
    goal_reached: bool


class StepTracker:
    def __init__(self, provider: MotivationProvider, goal: DailyGoal) -> None:
        self._provider = provider
        self.goal = goal
        self.step_count = 0
        self.motivational_message: str | None = None
        self._tasks: set[asyncio.Task] = set()
        self._requested_seq = 0
        self._applied_seq = 0

    def update(self, steps: int) -> StepUpdate:
        """Record a new step count and schedule a fresh motivational message."""
        validate_steps(steps)
        previous = self.step_count
        self.step_count = steps
        step_count.set(steps)
        step_updates.inc()

        result = StepUpdate(
            steps=steps,
            previous=previous,
            crossed_thousand=crossed_thousand(previous, steps),
            goal_reached=self.goal.is_reached(steps),
        )
        if result.crossed_thousand:
            logger.info("Crossed a 1000-step threshold", extra=log_extra(steps=steps))

        task = asyncio.create_task(self.refresh_message(steps))
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return result

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Motivational message refresh crashed", exc_info=exc)

    async def refresh_message(self, steps: int) -> str | None:
        self._requested_seq += 1
        seq = self._requested_seq
        try:
            message = await self._provider.generate_motivational_sentence(steps)
        except MotivationError as exc:
            logger.warning(
                "Motivational message suppressed: %s",
                exc,
                extra=log_extra(steps=steps, error_type=type(exc).__name__),
            )
            return None

        # Out-of-order completions must not replace a newer message.
        if seq > self._applied_seq:
            self._applied_seq = seq
            self.motivational_message = message
        return message

    async def wait_idle(self) -> None:
        """Wait for all pending message refreshes to finish."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def snapshot(self) -> dict[str, Any]:
        steps = self.step_count
        return {
            "steps": steps,
            "goal": self.goal.masked(steps),
            "goal_message": self.goal.message(steps),
            "goal_reached": self.goal.is_reached(steps),
            "motivational_message": self.motivational_message,
        }

    async def aclose(self) -> None:
        for task in list(self._tasks):
            task.cancel()
        await self.wait_idle()
