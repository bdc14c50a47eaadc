"""
Motivational message client for OpenAI-compatible chat-completion endpoints.

Flow per call:
  cache lookup -> rate-limit wait -> POST -> record dispatch -> classify

Cache hits never touch the network or the rate limiter. Every failure is
raised as one of the MotivationError kinds and nothing is retried here;
the caller decides whether to try again.
"""

from __future__ import annotations

import logging
import time

import httpx
from pydantic import ValidationError

from shared.logging.logger import log_extra
from shared.motivation.base import MotivationProvider, validate_steps
from shared.motivation.cache import ResponseCache
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
from shared.motivation.models import ChatMessage, ChatRequest, ChatResponse, ErrorEnvelope
from shared.motivation.rate_limit import MinIntervalRateLimiter
from shared.observability.metrics import (
    motivation_cache,
    motivation_request_latency,
    motivation_requests,
)

logger = logging.getLogger(__name__)

_PROMPT_TEMPLATE = (
    "Given that I have taken {steps} steps today, generate a single short, "
    "fun and savage sentence reacting to it. If the step count is low, ridicule "
    "me for being lazy. If it is high, make fun of me for putting in the effort. "
    "It is for adults, so it can be rude. Respond with just the sentence, no "
    "quotes or additional text. Only give 1 sentence. DO NOT show the actual "
    "step count in the message."
)


def build_prompt(steps: int) -> str:
    return _PROMPT_TEMPLATE.format(steps=steps)


class MotivationalMessageClient(MotivationProvider):
    """
    Generates one motivational sentence per step count.

    The cache and rate limiter are private to this instance and serialize
    their own state, so a single client can be shared by any number of
    concurrent callers.
    """

    def __init__(
        self,
        config: MotivationConfig,
        http_client: httpx.AsyncClient | None = None,
        cache: ResponseCache | None = None,
        rate_limiter: MinIntervalRateLimiter | None = None,
    ) -> None:
        config.validate()
        self._config = config
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.AsyncClient(
            timeout=config.timeout_seconds
        )
        self.cache = cache if cache is not None else ResponseCache()
        self.rate_limiter = rate_limiter if rate_limiter is not None else MinIntervalRateLimiter()

    @property
    def config(self) -> MotivationConfig:
        return self._config

    def build_request(self, steps: int) -> ChatRequest:
        return ChatRequest(
            model=self._config.model,
            messages=(ChatMessage(role="user", content=build_prompt(steps)),),
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
        )

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }

    async def generate_motivational_sentence(self, steps: int) -> str:
        validate_steps(steps)

        cached = await self.cache.get(steps)
        if cached is not None:
            motivation_cache.labels(result="hit").inc()
            return cached
        motivation_cache.labels(result="miss").inc()

        body = self.build_request(steps).to_json()

        previous = await self.rate_limiter.wait()
        reserved = self.rate_limiter.last_request_at

        started = time.perf_counter()
        sent = True
        try:
            response = await self._dispatch(body)
        except InvalidURL:
            sent = False
            self.rate_limiter.release(previous, reserved)
            raise
        finally:
            if sent:
                self.rate_limiter.mark_dispatched()
                motivation_request_latency.observe(time.perf_counter() - started)

        try:
            sentence = self._classify(response)
        except MotivationError as exc:
            motivation_requests.labels(outcome=type(exc).__name__).inc()
            logger.warning(
                "Motivation request failed for %d steps: %s", steps, exc
            )
            raise

        await self.cache.put(steps, sentence)
        motivation_requests.labels(outcome="success").inc()
        logger.info(
            "Motivation generated for %d steps",
            steps,
            extra=log_extra(model=self._config.model, status=response.status_code),
        )
        return sentence

    async def _dispatch(self, body: str) -> httpx.Response:
        try:
            return await self._http.post(
                self._config.base_url,
                content=body,
                headers=self._headers(),
                timeout=self._config.timeout_seconds,
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            motivation_requests.labels(outcome="InvalidURL").inc()
            logger.warning("Rejected endpoint URL %s: %s", self._config.base_url, exc)
            raise InvalidURL(self._config.base_url) from exc
        except httpx.DecodingError as exc:
            motivation_requests.labels(outcome="InvalidResponse").inc()
            logger.warning("Malformed response from %s: %s", self._config.base_url, exc)
            raise InvalidResponse() from exc
        except httpx.TransportError as exc:
            motivation_requests.labels(outcome="NetworkError").inc()
            logger.warning("Transport failure calling %s: %r", self._config.base_url, exc)
            raise NetworkError(exc) from exc

    @staticmethod
    def _classify(response: httpx.Response) -> str:
        status = response.status_code
        if status == 200:
            try:
                decoded = ChatResponse.model_validate_json(response.content)
            except ValidationError as exc:
                raise ParsingError(str(exc)) from exc
            sentence = decoded.first_content()
            if sentence is None:
                raise EmptyResponse()
            return sentence

        if status == 429:
            raise RateLimitExceeded()

        try:
            envelope = ErrorEnvelope.model_validate_json(response.content)
        except ValidationError:
            raise ApiError(f"HTTP {status}") from None
        raise ApiError(envelope.error.message)

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> MotivationalMessageClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
