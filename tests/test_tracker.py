"""Tests for the step-count observer and its display state."""

from __future__ import annotations

import asyncio

from shared.motivation import MotivationProvider, NetworkError, RateLimitExceeded
from services.stepup_service.goal import DailyGoal
from services.stepup_service.tracker import StepTracker


class ScriptedProvider(MotivationProvider):
    def __init__(self, outcomes: dict[int, object], delays: dict[int, float] | None = None) -> None:
        self.outcomes = outcomes
        self.delays = delays or {}
        self.calls: list[int] = []

    async def generate_motivational_sentence(self, steps: int) -> str:
        self.calls.append(steps)
        await asyncio.sleep(self.delays.get(steps, 0))
        outcome = self.outcomes[steps]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_update_records_steps_and_fetches_message() -> None:
    async def _run() -> None:
        provider = ScriptedProvider({1500: "Barely moving."})
        tracker = StepTracker(provider, DailyGoal(6123))
        update = tracker.update(1500)
        assert update.previous == 0
        assert update.crossed_thousand
        assert not update.goal_reached

        await tracker.wait_idle()
        assert tracker.snapshot() == {
            "steps": 1500,
            "goal": "6***",
            "goal_message": "Every 1000 steps will unmask a digit of today's step goal",
            "goal_reached": False,
            "motivational_message": "Barely moving.",
        }

    asyncio.run(_run())


def test_failures_are_suppressed() -> None:
    async def _run() -> None:
        provider = ScriptedProvider({100: NetworkError(OSError("offline")), 200: RateLimitExceeded()})
        tracker = StepTracker(provider, DailyGoal(5000))
        tracker.update(100)
        tracker.update(200)
        await tracker.wait_idle()
        assert tracker.motivational_message is None
        assert tracker.step_count == 200

    asyncio.run(_run())


def test_failure_keeps_previous_message() -> None:
    async def _run() -> None:
        provider = ScriptedProvider({100: "Lazy.", 200: RateLimitExceeded()})
        tracker = StepTracker(provider, DailyGoal(5000))
        tracker.update(100)
        await tracker.wait_idle()
        tracker.update(200)
        await tracker.wait_idle()
        assert tracker.motivational_message == "Lazy."

    asyncio.run(_run())


def test_slow_older_response_does_not_overwrite_newer_one() -> None:
    async def _run() -> None:
        provider = ScriptedProvider({100: "old", 200: "new"}, delays={100: 0.05})
        tracker = StepTracker(provider, DailyGoal(5000))
        tracker.update(100)
        tracker.update(200)
        await tracker.wait_idle()
        assert tracker.motivational_message == "new"

    asyncio.run(_run())


def test_goal_reached_snapshot() -> None:
    async def _run() -> None:
        tracker = StepTracker(ScriptedProvider({9000: "Show-off."}), DailyGoal(8500))
        update = tracker.update(9000)
        assert update.goal_reached
        await tracker.aclose()
        snap = tracker.snapshot()
        assert snap["goal"] == "8500"
        assert snap["goal_message"] == "Today's step goal"

    asyncio.run(_run())
