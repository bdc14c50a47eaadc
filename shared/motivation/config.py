from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

from shared.motivation.errors import InvalidURL

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_BASE_URL = "https://api.openai.com/v1/chat/completions"


@dataclass(frozen=True)
class MotivationConfig:
    api_key: str
    model: str = DEFAULT_MODEL
    temperature: float = 0.7
    max_tokens: int = 60
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0

    @classmethod
    def from_env(cls) -> MotivationConfig:
        return cls(
            api_key=(
                os.environ.get("LLM_API_KEY", "")
                or os.environ.get("OPENAI_API_KEY", "")
            ),
            model=os.environ.get("LLM_MODEL", "") or DEFAULT_MODEL,
            temperature=float(os.environ.get("LLM_TEMPERATURE", "0.7") or 0.7),
            max_tokens=int(os.environ.get("LLM_MAX_TOKENS", "60") or 60),
            base_url=os.environ.get("LLM_BASE_URL", "") or DEFAULT_BASE_URL,
            timeout_seconds=float(os.environ.get("LLM_REQUEST_TIMEOUT", "30") or 30),
        )

    def validate(self) -> None:
        if not self.api_key:
            raise ValueError(
                "An API key is required for the motivation client. "
                "Set LLM_API_KEY (or OPENAI_API_KEY) in your environment."
            )
        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError(f"temperature must be within [0, 2], got {self.temperature}")
        if self.max_tokens < 1:
            raise ValueError(f"max_tokens must be at least 1, got {self.max_tokens}")
        try:
            url = httpx.URL(self.base_url)
        except httpx.InvalidURL as exc:
            raise InvalidURL(self.base_url) from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURL(self.base_url)
