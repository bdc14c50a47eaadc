from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class StepupConfig:
    llm_provider: str
    log_level: str
    goal_min: int
    goal_max: int
    goal_seed: int | None

    @classmethod
    def from_env(cls) -> StepupConfig:
        seed = os.environ.get("STEP_GOAL_SEED", "")
        return cls(
            llm_provider=os.environ.get("LLM_PROVIDER", "mock"),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
            goal_min=int(os.environ.get("STEP_GOAL_MIN", "5000")),
            goal_max=int(os.environ.get("STEP_GOAL_MAX", "10000")),
            goal_seed=int(seed) if seed else None,
        )
