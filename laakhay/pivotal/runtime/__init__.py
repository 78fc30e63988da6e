"""Runtime components: request execution and pagination."""

from .pagination import Continuation, FetchSession, Paginator, SessionOutcome
from .rest import RESTTransport, RestRunner

__all__ = [
    "RESTTransport",
    "RestRunner",
    "Paginator",
    "FetchSession",
    "Continuation",
    "SessionOutcome",
]
