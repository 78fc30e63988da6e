"""Client configuration.

This module centralizes the base URL, authentication token and request
defaults so the transport and paginator receive one immutable object
instead of reading globals.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://www.pivotaltracker.com/services/v5/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_PAGE_LIMIT = 128

# Header Tracker reads the API token from
TOKEN_HEADER = "X-TrackerToken"

ENV_TOKEN = "PIVOTAL_TRACKER_TOKEN"
ENV_BASE_URL = "PIVOTAL_TRACKER_BASE_URL"
ENV_TIMEOUT = "PIVOTAL_TRACKER_TIMEOUT"


@dataclass(frozen=True)
class TrackerConfig:
    """Immutable client configuration.

    Attributes:
        token: Opaque API token sent with every request
        base_url: API root; always ends with "/"
        timeout: Total per-request timeout in seconds
        page_limit: Default page size for paginated list endpoints
    """

    token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    page_limit: int = DEFAULT_PAGE_LIMIT

    def __post_init__(self) -> None:
        """Validate and normalize configuration."""
        if not self.token:
            raise ConfigurationError("Tracker API token must not be empty")
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        if self.page_limit <= 0:
            raise ConfigurationError(f"page_limit must be positive, got {self.page_limit}")

    @property
    def auth_headers(self) -> dict[str, str]:
        """Headers attached to every request."""
        return {TOKEN_HEADER: self.token}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TrackerConfig:
        """Build configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            TrackerConfig populated from PIVOTAL_TRACKER_* variables

        Raises:
            ConfigurationError: If the token is missing or a value is malformed
        """
        env = os.environ if environ is None else environ
        token = env.get(ENV_TOKEN)
        if not token:
            raise ConfigurationError(f"{ENV_TOKEN} is not set")

        timeout_raw = env.get(ENV_TIMEOUT)
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(f"{ENV_TIMEOUT} must be a number, got {timeout_raw!r}") from None

        return cls(
            token=token,
            base_url=env.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
            timeout=timeout,
        )
