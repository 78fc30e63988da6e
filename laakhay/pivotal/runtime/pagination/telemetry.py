"""Structured logging for pagination sessions.

This module provides telemetry hooks for fetch sessions, emitting
structured log records with an event name and ``extra`` fields.
"""

from __future__ import annotations

import logging

from .definitions import Page, SessionOutcome

logger = logging.getLogger(__name__)


def log_page_fetched(*, page: Page, latency_ms: float | None = None) -> None:
    """Log a successfully fetched page.

    Args:
        page: Delivered page
        latency_ms: Request latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "path": page.request.path,
            "page_index": page.index,
            "offset": page.request.offset,
            "limit": page.request.limit,
            "returned": page.meta.returned,
            "total": page.meta.total,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(*, path: str, page_index: int, offset: int, error: BaseException) -> None:
    """Log a failed page request.

    Args:
        path: Resource path
        page_index: Zero-based index of the page that failed
        offset: Offset that was requested
        error: Exception raised by the request or envelope parsing
    """
    logger.error(
        "page_error",
        extra={
            "path": path,
            "page_index": page_index,
            "offset": offset,
            "error_type": type(error).__name__,
            "error_message": str(error),
        },
    )


def log_session_complete(*, path: str, outcome: SessionOutcome) -> None:
    """Log the end of a fetch session."""
    logger.info(
        "session_complete",
        extra={
            "path": path,
            "status": outcome.status.value,
            "pages": outcome.pages,
            "items": outcome.items,
            "next_offset": outcome.next_offset,
        },
    )
