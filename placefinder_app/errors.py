"""
errors.py - Exceptions raised by the controller and the API client.

Only two kinds of failure reach the user:
    ValidationError → the query is empty, nothing was sent
    RequestFailure  → a request to either endpoint failed (network, HTTP
                      status, or a response that is not the expected JSON)

"No locations" and "no places" are not errors; they are empty states.
"""


class PlacefinderError(Exception):
    """Base class for every error this application raises."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(PlacefinderError):
    """User input rejected before any network call."""


class RequestFailure(PlacefinderError):
    """A backend request failed or returned something unusable."""

    def __init__(self, message: str = "", status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
