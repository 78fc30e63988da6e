"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import Any

import pytest


class FakeTransport:
    """In-memory stand-in for RESTTransport serving enveloped list pages.

    Items are ``{"id": <position>}`` so delivered ids equal their offsets.
    """

    def __init__(
        self,
        total: int,
        *,
        max_limit: int | None = None,
        errors: dict[int, Exception] | None = None,
        responses: dict[int, Any] | None = None,
    ) -> None:
        self.total = total
        self.max_limit = max_limit
        self.errors = errors or {}
        self.responses = responses or {}
        self.items = [{"id": i, "name": f"Story {i}"} for i in range(total)]
        self.calls: list[dict[str, Any]] = []

    async def request(
        self,
        method: Any,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        data: Any = None,
        parse_json: bool = True,
    ) -> Any:
        index = len(self.calls)
        self.calls.append({"method": method, "path": path, "params": dict(params or {})})
        if index in self.errors:
            raise self.errors[index]
        if index in self.responses:
            return self.responses[index]

        offset = params["offset"]
        limit = params["limit"]
        if self.max_limit is not None:
            limit = min(limit, self.max_limit)
        data_slice = self.items[offset : offset + limit]
        return {
            "data": data_slice,
            "pagination": {
                "total": self.total,
                "offset": offset,
                "limit": limit,
                "returned": len(data_slice),
            },
        }

    @property
    def offsets(self) -> list[int]:
        return [call["params"]["offset"] for call in self.calls]

    @property
    def limits(self) -> list[int]:
        return [call["params"]["limit"] for call in self.calls]


@pytest.fixture
def fake_transport_factory():
    """Build FakeTransport instances with per-test settings."""
    return FakeTransport
