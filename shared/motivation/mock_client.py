"""
Deterministic mock provider for development and tests.

Always returns the same sentence for the same step bucket, so the service
can run end to end without an API key or network access.
"""

from __future__ import annotations

import hashlib

from shared.motivation.base import MotivationProvider, validate_steps

_LOW = (
    "Your couch has filed a complaint about the dent you left in it.",
    "Even your shadow got bored and went for a walk without you.",
    "Sloths are watching you and feeling pretty good about themselves.",
)
_MID = (
    "Not bad, you almost looked like someone who owns running shoes.",
    "Halfway to impressive and already acting like a marathoner.",
    "You moved enough to justify one snack, not three.",
)
_HIGH = (
    "Calm down, nobody is handing out medals for walking to the fridge this often.",
    "Wow, all that effort and you still have to do it again tomorrow.",
    "Your legs want a lawyer after the day you just put them through.",
)


class MockMotivationClient(MotivationProvider):

    def __init__(self) -> None:
        self.call_count = 0

    async def generate_motivational_sentence(self, steps: int) -> str:
        validate_steps(steps)
        self.call_count += 1

        if steps < 3000:
            pool = _LOW
        elif steps < 8000:
            pool = _MID
        else:
            pool = _HIGH

        bucket = str(steps // 1000).encode()
        index = int(hashlib.sha256(bucket).hexdigest(), 16) % len(pool)
        return pool[index]
