"""Abstract base class for motivational message providers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MotivationProvider(ABC):
    """
    Contract for motivational message providers.

    Every implementation MUST:
    - Return a single trimmed sentence for a non-negative step count
    - Raise only MotivationError subclasses for generation failures
    """

    @abstractmethod
    async def generate_motivational_sentence(self, steps: int) -> str:
        """Return a short sentence reacting to today's step count."""

    async def aclose(self) -> None:
        """Optional resource cleanup hook."""
        return None


def validate_steps(steps: int) -> None:
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise TypeError(f"steps must be an int, got {type(steps).__name__}")
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")
