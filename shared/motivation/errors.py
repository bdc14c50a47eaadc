"""
Closed error taxonomy for the motivational message client.

Every failure of a generation call surfaces as exactly one of these kinds.
Callers that only care whether a message is available can catch
MotivationError; callers that want to react differently (e.g. HTTP status
mapping in the service layer) match on the subclass.
"""

from __future__ import annotations


class MotivationError(Exception):
    """Base class for all motivational message failures."""


class InvalidURL(MotivationError):
    def __init__(self, url: str = "") -> None:
        self.url = url
        super().__init__("Invalid API endpoint URL" + (f": {url}" if url else ""))


class InvalidResponse(MotivationError):
    def __init__(self) -> None:
        super().__init__("Invalid response from server")


class ApiError(MotivationError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"API Error: {message}")


class ParsingError(MotivationError):
    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Parsing Error: {details}")


class RateLimitExceeded(MotivationError):
    def __init__(self) -> None:
        super().__init__("Rate limit exceeded. Please try again later.")


class NetworkError(MotivationError):
    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Network Error: {cause}")


class EmptyResponse(MotivationError):
    def __init__(self) -> None:
        super().__init__("Received empty response from the model")
