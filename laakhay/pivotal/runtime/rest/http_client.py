"""HTTP client helper."""

from __future__ import annotations

import json
import logging
from typing import Any

import aiohttp

from ...core.exceptions import ProviderError

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper around a lazily created aiohttp session.

    Transport failures (``aiohttp.ClientError``, timeouts) propagate
    unchanged; error statuses are raised as ProviderError.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def build_url(self, url: str) -> str:
        """Join a relative path onto base_url; absolute URLs pass through."""
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
        parse_json: bool = True,
    ) -> Any:
        """Issue a request and return the decoded body.

        Args:
            method: HTTP verb ("get", "post", ...)
            url: Absolute URL or path relative to base_url
            params: Query parameters (already serialized)
            json_body: Payload sent as JSON
            data: Form fields, raw body or aiohttp.FormData
            headers: Extra headers merged over the client defaults
            parse_json: Decode the body as JSON (otherwise return text)

        Returns:
            Decoded JSON (None for an empty body) or the raw text

        Raises:
            ProviderError: On HTTP status >= 400
        """
        url = self.build_url(url)
        merged_headers = {**self.headers, **(headers or {})}

        kwargs: dict[str, Any] = {"params": params, "headers": merged_headers}
        if json_body is not None:
            kwargs["json"] = json_body
        if data is not None:
            kwargs["data"] = data

        logger.debug("http_request", extra={"method": method.upper(), "url": url})
        async with self.session.request(method.upper(), url, **kwargs) as response:
            body = await response.text()
            if response.status >= 400:
                raise _error_from_response(response.status, body)
            if not parse_json:
                return body
            return json.loads(body) if body.strip() else None

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request."""
        return await self.request("get", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST request with a JSON body."""
        return await self.request("post", url, json_body=json, headers=headers)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _error_from_response(status: int, body: str) -> ProviderError:
    """Build a ProviderError from a Tracker error body.

    Tracker errors look like ``{"kind": "error", "code": ..., "error": ...,
    "general_problem": ...}``; non-JSON bodies are kept verbatim.
    """
    payload: Any = body
    message = f"HTTP {status}"
    try:
        payload = json.loads(body) if body.strip() else None
    except ValueError:
        payload = body
    if isinstance(payload, dict):
        detail = payload.get("error") or payload.get("general_problem")
        if detail:
            message = f"HTTP {status}: {detail}"
    return ProviderError(message, status_code=status, payload=payload)
