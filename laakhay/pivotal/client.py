"""Tracker REST client.

This client maps methods one-to-one onto Tracker v5 endpoints. Simple
endpoints go through the endpoint registry and RestRunner; list endpoints
that support ``envelope=true`` (stories, iterations, activity) are driven
by the Paginator.

Architecture:
    TrackerConfig -> RESTTransport (request executor) -> RestRunner
                                                      -> Paginator
    The config is immutable and shared; every fetch session owns its own
    offset/limit state, so concurrent listings do not interfere.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from time import perf_counter
from typing import Any

from laakhay.pivotal.core import ConfigurationError, TrackerConfig
from laakhay.pivotal.models import (
    Activity,
    Comment,
    FileAttachment,
    Iteration,
    Label,
    ProjectMembership,
    Story,
)
from laakhay.pivotal.runtime.pagination import (
    FetchSession,
    Paginator,
    SessionOutcome,
)
from laakhay.pivotal.runtime.pagination.paginator import CompleteCallback, PageCallback
from laakhay.pivotal.runtime.rest import RESTTransport, RestRunner

from .endpoints import (
    get_endpoint_adapter,
    get_endpoint_spec,
    iterations_path,
    project_activity_path,
    stories_path,
)

logger = logging.getLogger(__name__)


class TrackerClient:
    """Async client for the Pivotal Tracker v5 API.

    Example:
        >>> async with TrackerClient("my-token") as client:
        ...     async for page in client.iter_stories(12345, {"with_state": "started"}):
        ...         for story in page.items:
        ...             print(story.name)
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        config: TrackerConfig | None = None,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: API token (ignored when ``config`` is given)
            config: Full client configuration
            transport: Pre-built request executor (mainly for tests)

        Raises:
            ConfigurationError: If neither a token nor a config is provided
        """
        if config is None:
            if not token:
                raise ConfigurationError("TrackerClient needs a token or a TrackerConfig")
            config = TrackerConfig(token=token)
        self.config = config
        self._transport = transport or RESTTransport(config)
        self._runner = RestRunner(self._transport)
        self._paginator = Paginator(self._transport, page_limit=config.page_limit)

    @classmethod
    def from_env(cls) -> TrackerClient:
        """Create a client from PIVOTAL_TRACKER_* environment variables."""
        return cls(config=TrackerConfig.from_env())

    @property
    def transport(self) -> RESTTransport:
        return self._transport

    @property
    def paginator(self) -> Paginator:
        return self._paginator

    async def fetch_health(self) -> dict[str, object]:
        """Call ``GET /me`` to verify connectivity and the token."""
        path = "me"
        start = perf_counter()
        me = await self._transport.get(path)
        latency_ms = (perf_counter() - start) * 1000.0
        return {
            "service": "pivotal_tracker",
            "status": "ok",
            "username": (me or {}).get("username"),
            "latency_ms": latency_ms,
            "endpoint": path,
        }

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch data from a registered endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "stories", "create_label")
            params: Request parameters (project_id, story_id, options, ...)

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    # --- Stories -----------------------------------------------------------

    async def get_stories(
        self, project_id: int | str, options: Mapping[str, Any] | None = None
    ) -> list[Story]:
        """Search stories without pagination (``filter``, ``with_state``, ...)."""
        return await self.fetch("stories", {"project_id": project_id, "options": options})

    async def get_story(self, project_id: int | str, story_id: int | str) -> Story:
        return await self.fetch("story", {"project_id": project_id, "story_id": story_id})

    async def create_story(self, project_id: int | str, params: Mapping[str, Any]) -> Story:
        return await self.fetch("create_story", {"project_id": project_id, "story": params})

    async def update_story(
        self, project_id: int | str, story_id: int | str, params: Mapping[str, Any]
    ) -> Story:
        return await self.fetch(
            "update_story", {"project_id": project_id, "story_id": story_id, "story": params}
        )

    async def delete_story(self, project_id: int | str, story_id: int | str) -> None:
        await self.fetch("delete_story", {"project_id": project_id, "story_id": story_id})

    async def export_stories(self, project_id: int | str, story_ids: Iterable[int | str]) -> str:
        """Export stories as CSV text."""
        return await self.fetch(
            "export_stories", {"project_id": project_id, "story_ids": list(story_ids)}
        )

    # --- Comments and attachments -----------------------------------------

    async def get_comments(self, project_id: int | str, story_id: int | str) -> list[Comment]:
        return await self.fetch("comments", {"project_id": project_id, "story_id": story_id})

    async def create_comment(
        self,
        project_id: int | str,
        story_id: int | str,
        text: str,
        file_attachments: list[dict[str, Any]] | None = None,
    ) -> Comment:
        return await self.fetch(
            "create_comment",
            {
                "project_id": project_id,
                "story_id": story_id,
                "text": text,
                "file_attachments": file_attachments,
            },
        )

    async def upload_file(
        self,
        project_id: int | str,
        filepath: str | Path,
        content_type: str,
    ) -> FileAttachment:
        """Upload a file to the project; returns the upload resource."""
        path = Path(filepath)
        content = await asyncio.to_thread(path.read_bytes)
        return await self.fetch(
            "upload",
            {
                "project_id": project_id,
                "filename": path.name,
                "content": content,
                "content_type": content_type,
            },
        )

    async def post_attachment(
        self,
        project_id: int | str,
        story_id: int | str,
        filepath: str | Path,
        content_type: str,
        comment: str,
    ) -> Comment:
        """Upload a file and attach it to a new comment on the story.

        Errors from the upload propagate; no comment is posted in that case.
        """
        upload = await self.upload_file(project_id, filepath, content_type)
        logger.debug(
            "attachment_uploaded",
            extra={"project_id": project_id, "story_id": story_id, "attachment_id": upload.id},
        )
        return await self.create_comment(
            project_id,
            story_id,
            comment,
            file_attachments=[upload.model_dump(mode="json", exclude_none=True)],
        )

    # --- Labels, iterations, memberships, activity ------------------------

    async def get_labels(self, project_id: int | str) -> list[Label]:
        return await self.fetch("labels", {"project_id": project_id})

    async def create_label(self, project_id: int | str, name: str) -> Label:
        return await self.fetch("create_label", {"project_id": project_id, "name": name})

    async def get_iterations(
        self, project_id: int | str, options: Mapping[str, Any] | None = None
    ) -> list[Iteration]:
        return await self.fetch("iterations", {"project_id": project_id, "options": options})

    async def get_memberships(self, project_id: int | str) -> list[ProjectMembership]:
        return await self.fetch("memberships", {"project_id": project_id})

    async def get_project_activity(
        self, project_id: int | str, options: Mapping[str, Any] | None = None
    ) -> list[Activity]:
        return await self.fetch("project_activity", {"project_id": project_id, "options": options})

    async def get_story_activity(
        self,
        project_id: int | str,
        story_id: int | str,
        options: Mapping[str, Any] | None = None,
    ) -> list[Activity]:
        return await self.fetch(
            "story_activity",
            {"project_id": project_id, "story_id": story_id, "options": options},
        )

    # --- Paginated listings -----------------------------------------------

    async def list_stories(
        self,
        project_id: int | str,
        options: Mapping[str, Any] | None,
        on_page: PageCallback,
        on_complete: CompleteCallback | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> SessionOutcome:
        """Page through a project's stories, one ``on_page`` call per page."""
        return await self._paginator.paginate(
            stories_path({"project_id": project_id}),
            offset,
            limit,
            options,
            on_page=on_page,
            on_complete=on_complete,
            parse_item=Story.model_validate,
        )

    async def list_iterations(
        self,
        project_id: int | str,
        options: Mapping[str, Any] | None,
        on_page: PageCallback,
        on_complete: CompleteCallback | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> SessionOutcome:
        """Page through a project's iterations, one ``on_page`` call per page."""
        return await self._paginator.paginate(
            iterations_path({"project_id": project_id}),
            offset,
            limit,
            options,
            on_page=on_page,
            on_complete=on_complete,
            parse_item=Iteration.model_validate,
        )

    async def list_activity(
        self,
        project_id: int | str,
        options: Mapping[str, Any] | None,
        on_page: PageCallback,
        on_complete: CompleteCallback | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> SessionOutcome:
        """Page through a project's activity feed, one ``on_page`` call per page."""
        return await self._paginator.paginate(
            project_activity_path({"project_id": project_id}),
            offset,
            limit,
            options,
            on_page=on_page,
            on_complete=on_complete,
            parse_item=Activity.model_validate,
        )

    def iter_stories(
        self,
        project_id: int | str,
        options: Mapping[str, Any] | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> FetchSession:
        return self._paginator.session(
            stories_path({"project_id": project_id}),
            offset,
            limit,
            options,
            parse_item=Story.model_validate,
        )

    def iter_iterations(
        self,
        project_id: int | str,
        options: Mapping[str, Any] | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> FetchSession:
        return self._paginator.session(
            iterations_path({"project_id": project_id}),
            offset,
            limit,
            options,
            parse_item=Iteration.model_validate,
        )

    def iter_activity(
        self,
        project_id: int | str,
        options: Mapping[str, Any] | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> FetchSession:
        return self._paginator.session(
            project_activity_path({"project_id": project_id}),
            offset,
            limit,
            options,
            parse_item=Activity.model_validate,
        )

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> TrackerClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
