from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    generate_latest,
    CONTENT_TYPE_LATEST,
)
from fastapi import Response


motivation_requests = Counter(
    "motivation_requests_total",
    "Outbound motivational message requests by outcome",
    ["outcome"],
)

motivation_cache = Counter(
    "motivation_cache_total",
    "Motivational message cache lookups",
    ["result"],
)

motivation_request_latency = Histogram(
    "motivation_request_latency_seconds",
    "Latency of outbound chat-completion requests",
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

step_count = Gauge(
    "stepup_step_count",
    "Most recent step count reported for today",
)

step_updates = Counter(
    "stepup_step_updates_total",
    "Step count updates received from the observer",
)


def metrics_response() -> Response:
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
