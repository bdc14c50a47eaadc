from shared.motivation.base import MotivationProvider
from shared.motivation.cache import ResponseCache
from shared.motivation.client import MotivationalMessageClient, build_prompt
from shared.motivation.config import MotivationConfig
from shared.motivation.errors import (
    ApiError,
    EmptyResponse,
    InvalidResponse,
    InvalidURL,
    MotivationError,
    NetworkError,
    ParsingError,
    RateLimitExceeded,
)
from shared.motivation.factory import get_motivation_client, reset_client
from shared.motivation.mock_client import MockMotivationClient
from shared.motivation.models import ChatMessage, ChatRequest, ChatResponse
from shared.motivation.rate_limit import MinIntervalRateLimiter

__all__ = [
    "MotivationProvider",
    "MotivationalMessageClient",
    "MockMotivationClient",
    "MotivationConfig",
    "ResponseCache",
    "MinIntervalRateLimiter",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "build_prompt",
    "get_motivation_client",
    "reset_client",
    "MotivationError",
    "InvalidURL",
    "InvalidResponse",
    "ApiError",
    "ParsingError",
    "RateLimitExceeded",
    "NetworkError",
    "EmptyResponse",
]
