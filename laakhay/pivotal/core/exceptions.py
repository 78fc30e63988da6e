"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class TrackerError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(TrackerError):
    """Client configuration is missing or invalid."""

    pass


class ProviderError(TrackerError):
    """Error response from the Tracker API.

    Raised for any HTTP status >= 400. The decoded error body (when the
    API returned one) is kept in ``payload`` so callers can inspect the
    Tracker error ``code`` and ``possible_fix`` fields.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload

    @property
    def code(self) -> str | None:
        """Tracker error code (e.g. ``unfound_resource``), if present."""
        if isinstance(self.payload, dict):
            return self.payload.get("code")
        return None


class EnvelopeError(TrackerError):
    """List response did not carry a pagination envelope.

    The raw response body is available as ``response``.
    """

    def __init__(self, message: str, response: Any = None) -> None:
        super().__init__(message)
        self.response = response


class PaginationError(TrackerError):
    """Continuation or fetch session used outside its contract."""

    pass
