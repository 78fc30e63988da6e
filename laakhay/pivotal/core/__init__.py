"""Core components."""

from .config import DEFAULT_BASE_URL, DEFAULT_PAGE_LIMIT, TOKEN_HEADER, TrackerConfig
from .enums import HTTPMethod, SessionStatus
from .exceptions import (
    ConfigurationError,
    EnvelopeError,
    PaginationError,
    ProviderError,
    TrackerError,
)

__all__ = [
    "TrackerConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_PAGE_LIMIT",
    "TOKEN_HEADER",
    "HTTPMethod",
    "SessionStatus",
    "TrackerError",
    "ConfigurationError",
    "ProviderError",
    "EnvelopeError",
    "PaginationError",
]
