"""Precise unit tests for RestRunner.

Tests focus on endpoint execution and parameter building.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from laakhay.pivotal.runtime.rest import ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport


class TestRestRunner:
    """Test RestRunner endpoint execution."""

    @pytest.fixture
    def mock_transport(self):
        transport = MagicMock(spec=RESTTransport)
        transport.request = AsyncMock(return_value={"data": "test"})
        return transport

    @pytest.fixture
    def runner(self, mock_transport):
        return RestRunner(mock_transport)

    @pytest.fixture
    def mock_adapter(self):
        adapter = MagicMock(spec=ResponseAdapter)
        adapter.parse = MagicMock(return_value={"parsed": "data"})
        return adapter

    @pytest.mark.asyncio
    async def test_run_get_endpoint(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="test",
            method="GET",
            build_path=lambda p: f"projects/{p['id']}",
            build_query=lambda p: {"param": p.get("param")},
        )
        params = {"id": "123", "param": "value"}

        result = await runner.run(spec=spec, adapter=mock_adapter, params=params)

        assert result == {"parsed": "data"}
        mock_transport.request.assert_called_once_with(
            "GET",
            "projects/123",
            params={"param": "value"},
            json_body=None,
            data=None,
            parse_json=True,
        )
        mock_adapter.parse.assert_called_once_with({"data": "test"}, params)

    @pytest.mark.asyncio
    async def test_run_post_endpoint(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="test",
            method="POST",
            build_path=lambda p: "projects/1/labels",
            build_body=lambda p: {"name": p["name"]},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={"name": "bug"})

        kwargs = mock_transport.request.call_args.kwargs
        assert kwargs["json_body"] == {"name": "bug"}
        assert kwargs["params"] is None

    @pytest.mark.asyncio
    async def test_run_form_endpoint(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="test",
            method="POST",
            build_path=lambda p: "projects/1/export",
            build_data=lambda p: [("story_ids[]", "1")],
            parse_json=False,
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={})

        kwargs = mock_transport.request.call_args.kwargs
        assert kwargs["data"] == [("story_ids[]", "1")]
        assert kwargs["parse_json"] is False

    @pytest.mark.asyncio
    async def test_default_adapter_passthrough(self, runner):
        spec = RestEndpointSpec(id="me", method="GET", build_path=lambda p: "me")

        result = await runner.run(spec=spec, adapter=ResponseAdapter(), params={})

        assert result == {"data": "test"}
