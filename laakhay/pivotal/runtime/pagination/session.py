"""Fetch session: explicit state for one paginated listing.

A FetchSession walks one resource page by page using offset/limit
requests with ``envelope=true``. It owns its offset counter, so sessions
never share mutable state and may run concurrently against the same
resource.

Usage:
    async with paginator.session("projects/1/stories") as session:
        async for page in session:
            handle(page.items)

Requesting the next page is the "continue" decision. Leaving the loop
early and calling ``abort()`` (or exiting the ``async with`` block) is the
"stop" decision. Only one request is ever in flight per session.

Known limitation:
    The next offset and final limit are computed from the ``total``
    reported by the most recent page. If the collection is mutated on the
    server while a session runs, ``total`` may drift between pages; this
    is neither detected nor compensated, and items can be skipped or
    delivered twice.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from time import perf_counter
from typing import Any

from ...core.config import DEFAULT_PAGE_LIMIT
from ...core.enums import HTTPMethod, SessionStatus
from ...core.exceptions import PaginationError
from ...models import PaginationMeta
from ..rest.transport import RESTTransport
from .definitions import Page, PageRequest, SessionOutcome, parse_envelope
from .telemetry import log_page_error, log_page_fetched


class FetchSession:
    """Iterator state for one logical "list all items" operation."""

    def __init__(
        self,
        transport: RESTTransport,
        path: str,
        *,
        offset: int = 0,
        limit: int = DEFAULT_PAGE_LIMIT,
        options: Mapping[str, Any] | None = None,
        parse_item: Callable[[Any], Any] | None = None,
    ) -> None:
        """Initialize a fetch session.

        Args:
            transport: Request executor used for page requests
            path: Resource path relative to the API root
            offset: Initial offset (>= 0)
            limit: Page size (> 0); the final page may request fewer
            options: Extra query options sent with every page request
            parse_item: Optional converter applied to every delivered item

        Raises:
            ValueError: If offset is negative or limit is not positive
        """
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        if limit <= 0:
            raise ValueError(f"limit must be > 0, got {limit}")

        self._transport = transport
        self.path = path
        self.initial_offset = offset
        self.page_limit = limit
        self.options = dict(options or {})
        self._parse_item = parse_item

        self._offset = offset
        self._status = SessionStatus.RUNNING
        self._error: Any = None
        self._pages = 0
        self._items = 0
        self._last_meta: PaginationMeta | None = None
        self._in_flight = False

    @property
    def offset(self) -> int:
        """Offset the next page request will use."""
        return self._offset

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def finished(self) -> bool:
        return self._status.is_terminal

    @property
    def last_meta(self) -> PaginationMeta | None:
        """Pagination metadata of the most recent page."""
        return self._last_meta

    @property
    def outcome(self) -> SessionOutcome:
        """Snapshot of the session result so far."""
        return SessionOutcome(
            status=self._status,
            error=self._error,
            pages=self._pages,
            items=self._items,
            next_offset=self._offset,
        )

    def next_request(self) -> PageRequest | None:
        """Plan the next page request.

        The first request always goes out, even when the collection turns
        out to be empty. After that, the remaining count is
        ``total - offset`` from the latest page and the limit is clamped to
        it.

        Returns:
            The next PageRequest, or None when nothing is left
        """
        if self._last_meta is None:
            return PageRequest(self.path, self._offset, self.page_limit, self.options)

        remaining = self._last_meta.total - self._offset
        if remaining <= 0:
            return None
        return PageRequest(self.path, self._offset, min(remaining, self.page_limit), self.options)

    async def fetch_next(self) -> Page | None:
        """Fetch the next page, or complete the session.

        Returns:
            The next Page, or None if the session just completed

        Raises:
            PaginationError: If the session is finished or a request is in flight
            EnvelopeError: If the response has no pagination envelope
            Exception: Transport and parse_item errors propagate unchanged; the
                session is marked failed first
        """
        if self.finished:
            raise PaginationError(f"Fetch session for {self.path} already {self._status.value}")
        if self._in_flight:
            raise PaginationError(f"A page request for {self.path} is already in flight")

        request = self.next_request()
        if request is None:
            self._finish(SessionStatus.COMPLETED)
            return None

        self._in_flight = True
        start = perf_counter()
        try:
            response = await self._transport.request(HTTPMethod.GET, request.path, params=request.query)
            items, meta = parse_envelope(response)
            if self._parse_item is not None:
                items = [self._parse_item(item) for item in items]
        except Exception as exc:
            log_page_error(path=self.path, page_index=self._pages, offset=request.offset, error=exc)
            self._finish(SessionStatus.FAILED, exc)
            raise
        finally:
            self._in_flight = False
        latency_ms = (perf_counter() - start) * 1000.0

        page = Page(items=items, meta=meta, request=request, index=self._pages)
        self._offset += meta.returned
        self._pages += 1
        self._items += len(items)
        self._last_meta = meta

        log_page_fetched(page=page, latency_ms=latency_ms)
        return page

    def abort(self, reason: Any = True) -> None:
        """Stop the session; no further pages will be requested.

        Args:
            reason: Value recorded as the outcome's ``error``

        Raises:
            PaginationError: If the session already finished
        """
        if self.finished:
            raise PaginationError(f"Fetch session for {self.path} already {self._status.value}")
        self._finish(SessionStatus.ABORTED, reason)

    def fail(self, error: BaseException) -> None:
        """Mark the session failed with an error raised outside the request."""
        if self.finished:
            raise PaginationError(f"Fetch session for {self.path} already {self._status.value}")
        self._finish(SessionStatus.FAILED, error)

    def _finish(self, status: SessionStatus, error: Any = None) -> None:
        self._status = status
        self._error = error

    def __aiter__(self) -> FetchSession:
        return self

    async def __anext__(self) -> Page:
        if self.finished:
            raise StopAsyncIteration
        page = await self.fetch_next()
        if page is None:
            raise StopAsyncIteration
        return page

    async def __aenter__(self) -> FetchSession:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close the session: a still-running session is failed or aborted."""
        if self.finished:
            return
        if exc_val is not None and isinstance(exc_val, Exception):
            self.fail(exc_val)
        else:
            self.abort()

    def __repr__(self) -> str:
        return (
            f"FetchSession(path={self.path!r}, offset={self._offset}, "
            f"limit={self.page_limit}, status={self._status.value})"
        )
