"""Integration tests against the live Tracker API.

Requires RUN_LAAKHAY_NETWORK_TESTS=1, PIVOTAL_TRACKER_TOKEN and
PIVOTAL_TRACKER_PROJECT_ID. Read-only.
"""

import os

import pytest

from laakhay.pivotal import SessionStatus, TrackerClient

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.environ.get("RUN_LAAKHAY_NETWORK_TESTS") != "1",
        reason="Requires network access to the Tracker API",
    ),
]


class TestLiveTracker:
    """Read-only checks against a real project."""

    @pytest.mark.asyncio
    async def test_health(self):
        async with TrackerClient.from_env() as client:
            health = await client.fetch_health()
        assert health["status"] == "ok"

    @pytest.mark.asyncio
    async def test_list_stories_pages(self, project_id):
        seen_offsets = []

        def on_page(stories, meta, decide):
            seen_offsets.append(meta.offset)
            decide("stop" if len(seen_offsets) >= 3 else None)

        async with TrackerClient.from_env() as client:
            outcome = await client.list_stories(project_id, {}, on_page, limit=5)

        assert outcome.status in (SessionStatus.COMPLETED, SessionStatus.ABORTED)
        assert seen_offsets == sorted(seen_offsets)

    @pytest.mark.asyncio
    async def test_labels_and_memberships(self, project_id):
        async with TrackerClient.from_env() as client:
            labels = await client.get_labels(project_id)
            memberships = await client.get_memberships(project_id)
        assert isinstance(labels, list)
        assert memberships
