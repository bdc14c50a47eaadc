"""
Provider factory -- single entry point for motivational messages.

Reads LLM_PROVIDER from env (default: 'mock') and returns a singleton
provider:

  mock     Built-in deterministic sentences, no API key needed (default)
  openai   Any OpenAI-compatible chat-completions endpoint
           -- needs LLM_API_KEY (or OPENAI_API_KEY)
           -- LLM_BASE_URL overrides the endpoint
"""

from __future__ import annotations

import logging
import os

from shared.motivation.base import MotivationProvider
from shared.motivation.client import MotivationalMessageClient
from shared.motivation.config import MotivationConfig
from shared.motivation.mock_client import MockMotivationClient

logger = logging.getLogger(__name__)

_PROVIDERS = ("mock", "openai")

_instance: MotivationProvider | None = None


def get_motivation_client(provider_name: str | None = None) -> MotivationProvider:
    """
    Return the process-wide motivation provider, creating it on first use.

    Args:
        provider_name: Override for LLM_PROVIDER env var.
    """
    global _instance
    if _instance is not None:
        return _instance

    name = (provider_name or os.environ.get("LLM_PROVIDER", "mock")).lower()

    if name == "mock":
        _instance = MockMotivationClient()
        logger.info("Motivation provider initialized: mock")
    elif name == "openai":
        config = MotivationConfig.from_env()
        _instance = MotivationalMessageClient(config)
        logger.info("Motivation provider initialized: openai (model=%s)", config.model)
    else:
        raise ValueError(
            f"Unknown motivation provider '{name}'. "
            f"Available: {', '.join(_PROVIDERS)}"
        )
    return _instance


def reset_client() -> None:
    """Reset the singleton (for testing)."""
    global _instance
    _instance = None
