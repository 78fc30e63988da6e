"""Laakhay Pivotal - Async client for the Pivotal Tracker v5 REST API."""

from .client import TrackerClient
from .core import (
    ConfigurationError,
    EnvelopeError,
    HTTPMethod,
    PaginationError,
    ProviderError,
    SessionStatus,
    TrackerConfig,
    TrackerError,
)
from .models import (
    Activity,
    Comment,
    FileAttachment,
    Iteration,
    Label,
    PaginationMeta,
    Person,
    ProjectMembership,
    Story,
)
from .runtime import Continuation, FetchSession, Paginator, RESTTransport, SessionOutcome

__version__ = "0.1.0"

__all__ = [
    "TrackerClient",
    "TrackerConfig",
    # Runtime
    "RESTTransport",
    "Paginator",
    "FetchSession",
    "Continuation",
    "SessionOutcome",
    # Enums
    "HTTPMethod",
    "SessionStatus",
    # Models
    "Story",
    "Label",
    "Comment",
    "Iteration",
    "ProjectMembership",
    "Person",
    "Activity",
    "FileAttachment",
    "PaginationMeta",
    # Exceptions
    "TrackerError",
    "ConfigurationError",
    "ProviderError",
    "EnvelopeError",
    "PaginationError",
]
