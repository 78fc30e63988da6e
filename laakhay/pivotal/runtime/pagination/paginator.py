"""Caller-driven pagination over enveloped Tracker list endpoints.

Architecture:
    Paginator creates FetchSession objects and offers two ways to drive
    them:
    - session(): an async iterator the caller pulls pages from
    - paginate(): a callback form where ``on_page(items, meta, decide)``
      receives a single-use Continuation per page and ``on_complete``
      receives the SessionOutcome exactly once

    Both forms share the same offset/limit bookkeeping, so the delivered
    offsets always cover ``[offset, total)`` without gaps when the server
    honors ``limit`` and ``total`` stays stable.

Contract:
    The session is idle until ``decide`` is called. A caller that never
    calls it stalls the session forever; ``decide`` must be called exactly
    once per page, synchronously or later, but always eventually.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from ...core.config import DEFAULT_PAGE_LIMIT
from ...core.exceptions import PaginationError
from ...models import PaginationMeta
from ..rest.transport import RESTTransport
from .definitions import SessionOutcome
from .session import FetchSession
from .telemetry import log_session_complete

class Continuation:
    """Single-use decision handed to ``on_page``.

    Call with a falsy value (or nothing) to fetch the next page; call with
    a truthy value to abort the session with that value.
    """

    def __init__(self) -> None:
        self._future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()

    def __call__(self, error: Any = None) -> None:
        if self._future.done():
            raise PaginationError("Continuation already used")
        self._future.set_result(error)

    @property
    def used(self) -> bool:
        return self._future.done()

    async def wait(self) -> Any:
        """Wait for the caller's decision and return the value passed."""
        return await self._future


PageCallback = Callable[[list[Any], PaginationMeta, Continuation], Awaitable[None] | None]
CompleteCallback = Callable[[SessionOutcome], Awaitable[None] | None]


class Paginator:
    """Drives fetch sessions against one request executor."""

    def __init__(self, transport: RESTTransport, *, page_limit: int = DEFAULT_PAGE_LIMIT) -> None:
        if page_limit <= 0:
            raise ValueError(f"page_limit must be > 0, got {page_limit}")
        self._transport = transport
        self.page_limit = page_limit

    def session(
        self,
        path: str,
        offset: int = 0,
        limit: int | None = None,
        options: Mapping[str, Any] | None = None,
        *,
        parse_item: Callable[[Any], Any] | None = None,
    ) -> FetchSession:
        """Create a fetch session; nothing is requested until it is iterated."""
        return FetchSession(
            self._transport,
            path,
            offset=offset,
            limit=self.page_limit if limit is None else limit,
            options=options,
            parse_item=parse_item,
        )

    async def paginate(
        self,
        path: str,
        offset: int = 0,
        limit: int | None = None,
        options: Mapping[str, Any] | None = None,
        *,
        on_page: PageCallback,
        on_complete: CompleteCallback | None = None,
        parse_item: Callable[[Any], Any] | None = None,
    ) -> SessionOutcome:
        """Fetch pages and hand each one to ``on_page`` until told to stop.

        Args:
            path: Resource path relative to the API root
            offset: Initial offset
            limit: Page size (defaults to the paginator's page_limit)
            options: Extra query options sent with every page
            on_page: ``on_page(items, meta, decide)``; may be sync or async
            on_complete: ``on_complete(outcome)``; invoked exactly once
            parse_item: Optional converter applied to every item

        Returns:
            The SessionOutcome also passed to ``on_complete``
        """
        session = self.session(path, offset, limit, options, parse_item=parse_item)
        try:
            while True:
                page = await session.fetch_next()
                if page is None:
                    break

                decide = Continuation()
                result = on_page(page.items, page.meta, decide)
                if inspect.isawaitable(result):
                    await result

                reason = await decide.wait()
                if reason:
                    session.abort(reason)
                    break
        except Exception as exc:
            # Request failures already marked the session; callback errors did not
            if not session.finished:
                session.fail(exc)

        outcome = session.outcome
        log_session_complete(path=path, outcome=outcome)
        if on_complete is not None:
            result = on_complete(outcome)
            if inspect.isawaitable(result):
                await result
        return outcome

    async def collect(
        self,
        path: str,
        offset: int = 0,
        limit: int | None = None,
        options: Mapping[str, Any] | None = None,
        *,
        parse_item: Callable[[Any], Any] | None = None,
        max_items: int | None = None,
    ) -> list[Any]:
        """Drain a session and return every item.

        No caller decides between pages here, so an empty page reported
        while ``total`` says items remain fails the session instead of
        requesting the same offset again.

        Args:
            max_items: Stop (abort) once at least this many items are collected;
                the result is truncated to exactly ``max_items``

        Raises:
            PaginationError: If a page makes no progress before ``total``
            Exception: Transport and envelope errors propagate unchanged
        """
        items: list[Any] = []
        session = self.session(path, offset, limit, options, parse_item=parse_item)
        try:
            async with session:
                async for page in session:
                    items.extend(page.items)
                    if max_items is not None and len(items) >= max_items:
                        session.abort("max_items")
                        break
                    if page.meta.returned == 0 and session.next_request() is not None:
                        raise PaginationError(
                            f"Empty page at offset {session.offset} of {page.meta.total} for {path}"
                        )
        finally:
            log_session_complete(path=path, outcome=session.outcome)
        return items if max_items is None else items[:max_items]
