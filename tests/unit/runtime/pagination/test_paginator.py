"""Unit tests for the callback form of pagination.

Tests focus on continuation handling, offset/limit bookkeeping and the
exactly-once completion contract.
"""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import MagicMock

import aiohttp
import pytest

from laakhay.pivotal.core import EnvelopeError, PaginationError, SessionStatus
from laakhay.pivotal.runtime.pagination import Paginator
from laakhay.pivotal.utils import serialize_query


def continue_always(items, meta, decide):
    decide()


class TestPaginatorScenarios:
    """Concrete pagination scenarios."""

    @pytest.mark.asyncio
    async def test_empty_collection_issues_single_request(self, fake_transport_factory):
        """total=0: one GET with offset=0&limit=128&envelope=true, then completion."""
        transport = fake_transport_factory(total=0)
        paginator = Paginator(transport)
        on_page = MagicMock(side_effect=continue_always)
        on_complete = MagicMock()

        outcome = await paginator.paginate(
            "projects/12345/stories", on_page=on_page, on_complete=on_complete
        )

        assert len(transport.calls) == 1
        call = transport.calls[0]
        assert call["method"] == "get"
        assert call["path"] == "projects/12345/stories"
        assert serialize_query(call["params"]) == {
            "offset": "0",
            "limit": "128",
            "envelope": "true",
        }
        on_page.assert_called_once()
        on_complete.assert_called_once_with(outcome)
        assert outcome.status is SessionStatus.COMPLETED
        assert outcome.error is None

    @pytest.mark.asyncio
    async def test_three_pages_with_clamped_final_limit(self, fake_transport_factory):
        """total=300, limit=128: offsets 0/128/256, final limit 44."""
        transport = fake_transport_factory(total=300)
        paginator = Paginator(transport)
        pages: list[list[int]] = []
        on_complete = MagicMock()

        def on_page(items, meta, decide):
            pages.append([item["id"] for item in items])
            decide()

        outcome = await paginator.paginate(
            "projects/1/stories", 0, 128, on_page=on_page, on_complete=on_complete
        )

        assert transport.offsets == [0, 128, 256]
        assert transport.limits == [128, 128, 44]
        assert len(pages) == 3
        assert [len(p) for p in pages] == [128, 128, 44]
        on_complete.assert_called_once()
        assert outcome.completed
        assert outcome.pages == 3
        assert outcome.items == 300
        assert outcome.next_offset == 300

    @pytest.mark.asyncio
    async def test_transport_error_on_first_request(self, fake_transport_factory):
        """Transport error: on_page never runs, on_complete runs once with the error."""
        error = aiohttp.ClientConnectionError("connection refused")
        transport = fake_transport_factory(total=10, errors={0: error})
        paginator = Paginator(transport)
        on_page = MagicMock()
        on_complete = MagicMock()

        outcome = await paginator.paginate("projects/1/stories", on_page=on_page, on_complete=on_complete)

        on_page.assert_not_called()
        on_complete.assert_called_once_with(outcome)
        assert outcome.status is SessionStatus.FAILED
        assert outcome.error is error
        assert len(transport.calls) == 1

    @pytest.mark.asyncio
    async def test_missing_envelope_fails_with_raw_response(self, fake_transport_factory):
        """A bare list response is a contract violation carrying the raw body."""
        transport = fake_transport_factory(total=10, responses={0: []})
        paginator = Paginator(transport)
        on_page = MagicMock()
        on_complete = MagicMock()

        outcome = await paginator.paginate("projects/1/stories", on_page=on_page, on_complete=on_complete)

        on_page.assert_not_called()
        on_complete.assert_called_once()
        assert outcome.failed
        assert isinstance(outcome.error, EnvelopeError)
        assert outcome.error.response == []

    @pytest.mark.asyncio
    async def test_error_on_later_page_keeps_earlier_pages(self, fake_transport_factory):
        """A failure on page 2 ends the session after page 1 was delivered."""
        error = aiohttp.ServerDisconnectedError()
        transport = fake_transport_factory(total=30, errors={1: error})
        paginator = Paginator(transport)
        on_page = MagicMock(side_effect=continue_always)

        outcome = await paginator.paginate("projects/1/stories", 0, 10, on_page=on_page)

        assert on_page.call_count == 1
        assert outcome.failed
        assert outcome.error is error
        assert outcome.pages == 1
        assert outcome.next_offset == 10


class TestPaginatorContinuation:
    """Test continuation decisions."""

    @pytest.mark.asyncio
    async def test_truthy_decision_aborts(self, fake_transport_factory):
        """Aborting on page 2 means no page 3 request and the value reaches on_complete."""
        transport = fake_transport_factory(total=100)
        paginator = Paginator(transport)
        on_complete = MagicMock()
        seen = []

        def on_page(items, meta, decide):
            seen.append(meta.offset)
            decide("stop" if len(seen) == 2 else None)

        outcome = await paginator.paginate(
            "projects/1/stories", 0, 10, on_page=on_page, on_complete=on_complete
        )

        assert len(transport.calls) == 2
        assert seen == [0, 10]
        on_complete.assert_called_once_with(outcome)
        assert outcome.status is SessionStatus.ABORTED
        assert outcome.error == "stop"

    @pytest.mark.asyncio
    async def test_falsy_values_continue(self, fake_transport_factory):
        """Any falsy value (None, 0, "", False) means continue."""
        transport = fake_transport_factory(total=40)
        paginator = Paginator(transport)
        decisions = iter([None, 0, "", False])

        def on_page(items, meta, decide):
            decide(next(decisions))

        outcome = await paginator.paginate("projects/1/stories", 0, 10, on_page=on_page)

        assert len(transport.calls) == 4
        assert outcome.completed

    @pytest.mark.asyncio
    async def test_deferred_decision(self, fake_transport_factory):
        """The continuation may be invoked after on_page returns."""
        transport = fake_transport_factory(total=25)
        paginator = Paginator(transport)

        def on_page(items, meta, decide):
            asyncio.get_running_loop().call_later(0.01, decide)

        outcome = await paginator.paginate("projects/1/stories", 0, 10, on_page=on_page)

        assert transport.offsets == [0, 10, 20]
        assert transport.limits == [10, 10, 5]
        assert outcome.completed

    @pytest.mark.asyncio
    async def test_async_callbacks(self, fake_transport_factory):
        """on_page and on_complete may be coroutines."""
        transport = fake_transport_factory(total=15)
        paginator = Paginator(transport)
        collected = []
        completed = []

        async def on_page(items, meta, decide):
            await asyncio.sleep(0)
            collected.extend(item["id"] for item in items)
            decide()

        async def on_complete(outcome):
            completed.append(outcome)

        await paginator.paginate("projects/1/stories", 0, 10, on_page=on_page, on_complete=on_complete)

        assert collected == list(range(15))
        assert len(completed) == 1
        assert completed[0].completed

    @pytest.mark.asyncio
    async def test_undecided_page_stalls_session(self, fake_transport_factory):
        """Without a decision the session waits forever and issues no new request."""
        transport = fake_transport_factory(total=50)
        paginator = Paginator(transport)

        def on_page(items, meta, decide):
            pass

        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(
                paginator.paginate("projects/1/stories", 0, 10, on_page=on_page), timeout=0.05
            )

        assert len(transport.calls) == 1

    @pytest.mark.asyncio
    async def test_reused_continuation_fails_session(self, fake_transport_factory):
        """Calling the continuation twice raises and fails the session."""
        transport = fake_transport_factory(total=50)
        paginator = Paginator(transport)
        on_complete = MagicMock()

        def on_page(items, meta, decide):
            decide()
            decide()

        outcome = await paginator.paginate(
            "projects/1/stories", 0, 10, on_page=on_page, on_complete=on_complete
        )

        assert outcome.failed
        assert isinstance(outcome.error, PaginationError)
        on_complete.assert_called_once()
        assert len(transport.calls) == 1

    @pytest.mark.asyncio
    async def test_on_page_exception_fails_session(self, fake_transport_factory):
        """Errors raised by on_page are reported through on_complete."""
        transport = fake_transport_factory(total=50)
        paginator = Paginator(transport)
        error = RuntimeError("handler broke")
        on_complete = MagicMock()

        def on_page(items, meta, decide):
            raise error

        outcome = await paginator.paginate(
            "projects/1/stories", on_page=on_page, on_complete=on_complete
        )

        assert outcome.failed
        assert outcome.error is error
        on_complete.assert_called_once_with(outcome)


class TestPaginatorOffsets:
    """Test offset/limit bookkeeping."""

    @pytest.mark.asyncio
    async def test_offsets_cover_range_from_initial_offset(self, fake_transport_factory):
        """Delivered ids cover [offset, total) exactly once."""
        transport = fake_transport_factory(total=30)
        paginator = Paginator(transport)
        ids = []

        def on_page(items, meta, decide):
            ids.extend(item["id"] for item in items)
            decide()

        await paginator.paginate("projects/1/stories", 10, 8, on_page=on_page)

        assert ids == list(range(10, 30))
        assert transport.offsets == [10, 18, 26]
        assert transport.limits == [8, 8, 4]

    @pytest.mark.asyncio
    async def test_initial_offset_equal_to_total(self, fake_transport_factory):
        """Nothing remaining: exactly one request and a clean completion."""
        transport = fake_transport_factory(total=50)
        paginator = Paginator(transport)
        on_page = MagicMock(side_effect=continue_always)
        on_complete = MagicMock()

        outcome = await paginator.paginate(
            "projects/1/stories", 50, on_page=on_page, on_complete=on_complete
        )

        assert len(transport.calls) == 1
        on_page.assert_called_once()
        assert on_page.call_args.args[0] == []
        assert outcome.completed
        assert outcome.error is None
        on_complete.assert_called_once()

    @pytest.mark.asyncio
    async def test_server_clamped_limit(self, fake_transport_factory):
        """Offset advances by 'returned', so server clamping leaves no gaps."""
        transport = fake_transport_factory(total=120, max_limit=50)
        paginator = Paginator(transport)
        ids = []

        def on_page(items, meta, decide):
            ids.extend(item["id"] for item in items)
            decide()

        outcome = await paginator.paginate("projects/1/stories", 0, 128, on_page=on_page)

        assert ids == list(range(120))
        assert transport.offsets == [0, 50, 100]
        assert transport.limits == [128, 70, 20]
        assert outcome.items == 120

    @pytest.mark.asyncio
    async def test_extra_options_merged_into_query(self, fake_transport_factory):
        """Caller options travel with every page; pagination keys win."""
        transport = fake_transport_factory(total=20)
        paginator = Paginator(transport)

        await paginator.paginate(
            "projects/1/stories",
            0,
            10,
            {"with_state": "started", "offset": 999},
            on_page=continue_always,
        )

        for call in transport.calls:
            assert call["params"]["with_state"] == "started"
            assert call["params"]["envelope"] is True
        assert transport.offsets == [0, 10]

    @pytest.mark.asyncio
    async def test_default_page_limit_from_paginator(self, fake_transport_factory):
        """limit=None falls back to the paginator's page_limit."""
        transport = fake_transport_factory(total=12)
        paginator = Paginator(transport, page_limit=5)

        await paginator.paginate("projects/1/stories", on_page=continue_always)

        assert transport.limits == [5, 5, 2]

    @pytest.mark.asyncio
    async def test_concurrent_sessions_do_not_interfere(self, fake_transport_factory):
        """Sessions keep their own offsets when run concurrently."""
        transport = fake_transport_factory(total=40)
        paginator = Paginator(transport)
        first: list[int] = []
        second: list[int] = []

        def collector(target):
            def on_page(items, meta, decide):
                target.extend(item["id"] for item in items)
                asyncio.get_running_loop().call_soon(decide)

            return on_page

        await asyncio.gather(
            paginator.paginate("projects/1/stories", 0, 7, on_page=collector(first)),
            paginator.paginate("projects/1/stories", 5, 9, on_page=collector(second)),
        )

        assert first == list(range(40))
        assert second == list(range(5, 40))

    def test_invalid_page_limit(self, fake_transport_factory):
        with pytest.raises(ValueError):
            Paginator(fake_transport_factory(total=0), page_limit=0)


class TestPaginatorCollect:
    """Test collect()."""

    @pytest.mark.asyncio
    async def test_collect_all(self, fake_transport_factory):
        transport = fake_transport_factory(total=33)
        paginator = Paginator(transport)

        items = await paginator.collect("projects/1/stories", limit=10)

        assert [item["id"] for item in items] == list(range(33))
        assert len(transport.calls) == 4

    @pytest.mark.asyncio
    async def test_collect_max_items_stops_early(self, fake_transport_factory):
        transport = fake_transport_factory(total=100)
        paginator = Paginator(transport)

        items = await paginator.collect("projects/1/stories", limit=10, max_items=15)

        assert [item["id"] for item in items] == list(range(15))
        assert len(transport.calls) == 2

    @pytest.mark.asyncio
    async def test_collect_propagates_transport_errors(self, fake_transport_factory):
        error = aiohttp.ClientConnectionError("down")
        transport = fake_transport_factory(total=100, errors={1: error})
        paginator = Paginator(transport)

        with pytest.raises(aiohttp.ClientConnectionError):
            await paginator.collect("projects/1/stories", limit=10)

    @pytest.mark.asyncio
    async def test_collect_logs_failed_session(self, fake_transport_factory, caplog):
        error = aiohttp.ClientConnectionError("down")
        transport = fake_transport_factory(total=100, errors={1: error})
        paginator = Paginator(transport)

        with caplog.at_level(logging.INFO, logger="laakhay.pivotal.runtime.pagination"):
            with pytest.raises(aiohttp.ClientConnectionError):
                await paginator.collect("projects/1/stories", limit=10)

        records = [r for r in caplog.records if r.getMessage() == "session_complete"]
        assert len(records) == 1
        assert records[0].status == "failed"
        assert records[0].pages == 1

    @pytest.mark.asyncio
    async def test_collect_stops_on_empty_page_before_total(self, fake_transport_factory):
        stuck = {
            "data": [],
            "pagination": {"total": 30, "returned": 0, "limit": 10, "offset": 10},
        }
        transport = fake_transport_factory(total=30, responses={1: stuck, 2: stuck})
        paginator = Paginator(transport)

        with pytest.raises(PaginationError, match="Empty page at offset 10"):
            await paginator.collect("projects/1/stories", limit=10)

        assert transport.offsets == [0, 10]

    @pytest.mark.asyncio
    async def test_collect_accepts_empty_collection(self, fake_transport_factory):
        transport = fake_transport_factory(total=0)
        paginator = Paginator(transport)

        assert await paginator.collect("projects/1/stories") == []
        assert len(transport.calls) == 1
