"""
Stepup Service -- step counter with a hidden daily goal.

Entry points:
- POST /steps       step-count observer callback (health platform bridge)
- GET  /today       display state: masked goal + motivational message
- POST /motivation  generate a motivational sentence on demand
- GET  /health, GET /metrics

The motivational message is cosmetic: /steps and /today never fail because
of it. /motivation exposes the error kinds as HTTP statuses for callers that
want to see them.
"""

from __future__ import annotations

import logging
import random
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from shared.logging.logger import setup_logging
from shared.motivation import (
    MotivationError,
    MotivationProvider,
    NetworkError,
    RateLimitExceeded,
    get_motivation_client,
    reset_client,
)
from shared.observability.metrics import metrics_response
from services.stepup_service.config import StepupConfig
from services.stepup_service.goal import DailyGoal, generate_daily_goal
from services.stepup_service.tracker import StepTracker

SERVICE_NAME = "stepup_service"
cfg: StepupConfig | None = None
provider: MotivationProvider | None = None
tracker: StepTracker | None = None


@asynccontextmanager
async def lifespan(application: FastAPI):
    global cfg, provider, tracker
    cfg = StepupConfig.from_env()
    logger = setup_logging(SERVICE_NAME, cfg.log_level)

    provider = get_motivation_client(cfg.llm_provider)
    rng = random.Random(cfg.goal_seed) if cfg.goal_seed is not None else None
    goal = DailyGoal(generate_daily_goal(rng, cfg.goal_min, cfg.goal_max))
    tracker = StepTracker(provider, goal)
    logger.info("Stepup Service ready (provider=%s)", cfg.llm_provider)
    yield

    logger.info("Shutting down")
    if tracker:
        await tracker.aclose()
    if provider:
        await provider.aclose()
    reset_client()


app = FastAPI(
    title="Stepup Service",
    version="0.1.0",
    description="Daily step goal reveal and motivational messages",
    lifespan=lifespan,
)
logger = logging.getLogger(SERVICE_NAME)


@app.get("/health")
async def health():
    return {"status": "ok", "service": SERVICE_NAME}


@app.get("/metrics")
async def metrics():
    return metrics_response()


class StepsRequest(BaseModel):
    steps: int = Field(ge=0)


class StepsResponse(BaseModel):
    steps: int
    previous: int
    crossed_thousand: bool
    goal_reached: bool


class MotivationResponse(BaseModel):
    steps: int
    message: str


@app.post("/steps", response_model=StepsResponse)
async def report_steps(req: StepsRequest):
    update = tracker.update(req.steps)
    return StepsResponse(
        steps=update.steps,
        previous=update.previous,
        crossed_thousand=update.crossed_thousand,
        goal_reached=update.goal_reached,
    )


@app.get("/today")
async def today():
    return tracker.snapshot()


@app.post("/motivation", response_model=MotivationResponse)
async def motivation(req: StepsRequest):
    try:
        message = await provider.generate_motivational_sentence(req.steps)
    except MotivationError as e:
        if isinstance(e, RateLimitExceeded):
            status_code = 429
        elif isinstance(e, NetworkError):
            status_code = 503
        else:
            status_code = 502
        logger.warning("Motivation request failed: %s", e)
        return JSONResponse(
            status_code=status_code,
            content={
                "detail": "Motivational message unavailable",
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )
    return MotivationResponse(steps=req.steps, message=message)
