"""Offset/limit pagination for enveloped list endpoints.

Architecture:
    The pagination layer consists of:
    - definitions.py: PageRequest, Page, SessionOutcome and envelope parsing
    - session.py: FetchSession, the explicit per-listing iterator state
    - paginator.py: Paginator and Continuation (iterator and callback forms)
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import Page, PageRequest, SessionOutcome, parse_envelope
from .paginator import Continuation, Paginator
from .session import FetchSession

__all__ = [
    "Page",
    "PageRequest",
    "SessionOutcome",
    "parse_envelope",
    "FetchSession",
    "Paginator",
    "Continuation",
]
