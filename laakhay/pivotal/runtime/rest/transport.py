"""Authenticated request executor for the Tracker API.

RESTTransport is the single entry point every endpoint and the paginator
use to talk to Tracker. It joins relative paths onto the configured base
URL, serializes query options, attaches the token header and hands the
decoded body back. Nothing is retried or reinterpreted here.
"""

from __future__ import annotations

from typing import Any

from ...core.config import TrackerConfig
from ...core.enums import HTTPMethod
from ...utils.query import serialize_query
from .http_client import HTTPClient


class RESTTransport:
    """Request executor bound to one immutable TrackerConfig."""

    def __init__(self, config: TrackerConfig) -> None:
        self._config = config
        self._http = HTTPClient(
            base_url=config.base_url,
            timeout=config.timeout,
            headers=config.auth_headers,
        )

    @property
    def config(self) -> TrackerConfig:
        return self._config

    async def request(
        self,
        method: str | HTTPMethod,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        data: Any = None,
        parse_json: bool = True,
    ) -> Any:
        """Execute one authenticated request.

        Args:
            method: One of get/post/put/delete
            path: Path relative to the API base URL (e.g. "projects/1/stories")
            params: Query options; serialized with serialize_query
            json_body: Payload sent as JSON
            data: Form fields, raw body or aiohttp.FormData
            parse_json: Decode the response as JSON (otherwise return text)

        Returns:
            Decoded response body
        """
        verb = HTTPMethod.from_str(method)
        query = serialize_query(params) or None
        return await self._http.request(
            verb.value,
            path,
            params=query,
            json_body=json_body,
            data=data,
            parse_json=parse_json,
        )

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request(HTTPMethod.GET, path, params=params)

    async def post(
        self,
        path: str,
        json_body: Any = None,
        *,
        data: Any = None,
        parse_json: bool = True,
    ) -> Any:
        return await self.request(
            HTTPMethod.POST, path, json_body=json_body, data=data, parse_json=parse_json
        )

    async def put(self, path: str, json_body: Any = None) -> Any:
        return await self.request(HTTPMethod.PUT, path, json_body=json_body)

    async def delete(self, path: str) -> Any:
        return await self.request(HTTPMethod.DELETE, path)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
