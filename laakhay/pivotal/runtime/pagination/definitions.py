"""Pagination data structures.

This module defines the immutable values passed around by the pagination
layer: the per-request plan, the delivered page and the session outcome,
plus envelope parsing.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from ...core.enums import SessionStatus
from ...core.exceptions import EnvelopeError
from ...models import PaginationMeta


@dataclass(frozen=True)
class PageRequest:
    """Plan for a single page request.

    Attributes:
        path: Resource path relative to the API root
        offset: Offset of the first item to request
        limit: Number of items to request
        options: Caller query options (filters, fields, ...)
    """

    path: str
    offset: int
    limit: int
    options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def query(self) -> dict[str, Any]:
        """Query parameters; pagination keys override caller options."""
        return {**self.options, "offset": self.offset, "limit": self.limit, "envelope": True}


@dataclass(frozen=True)
class Page:
    """One delivered page.

    Attributes:
        items: Items in this page (parsed if the session has an item parser)
        meta: Pagination metadata returned with the page
        request: The request that produced this page
        index: Zero-based position of the page in its session
    """

    items: list[Any]
    meta: PaginationMeta
    request: PageRequest
    index: int = 0

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class SessionOutcome:
    """Result of a fetch session.

    ``error`` holds the exception for FAILED sessions and the value the
    caller aborted with for ABORTED sessions; it is None for COMPLETED.

    Attributes:
        status: Terminal session status
        error: Failure or abort value
        pages: Number of pages fetched
        items: Number of items delivered
        next_offset: Offset the next request would have used
    """

    status: SessionStatus
    error: Any = None
    pages: int = 0
    items: int = 0
    next_offset: int = 0

    @property
    def completed(self) -> bool:
        return self.status is SessionStatus.COMPLETED

    @property
    def aborted(self) -> bool:
        return self.status is SessionStatus.ABORTED

    @property
    def failed(self) -> bool:
        return self.status is SessionStatus.FAILED


def parse_envelope(response: Any) -> tuple[list[Any], PaginationMeta]:
    """Split an ``envelope=true`` response into items and metadata.

    Args:
        response: Decoded response body

    Returns:
        Tuple of (items, pagination metadata)

    Raises:
        EnvelopeError: If the response has no usable pagination envelope
    """
    if not isinstance(response, dict) or response.get("pagination") is None:
        raise EnvelopeError("Response is missing the pagination envelope", response=response)

    try:
        meta = PaginationMeta.model_validate(response["pagination"])
    except ValidationError as exc:
        raise EnvelopeError(f"Malformed pagination envelope: {exc}", response=response) from exc

    data = response.get("data")
    if data is None:
        data = []
    if not isinstance(data, list):
        raise EnvelopeError("Envelope 'data' field is not a list", response=response)
    return data, meta
