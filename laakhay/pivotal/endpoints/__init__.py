"""Tracker REST endpoint registry.

This module exports all endpoint specifications and adapters and maps
endpoint ids to them for generic dispatch.
"""

from __future__ import annotations

from laakhay.pivotal.runtime.rest import ResponseAdapter, RestEndpointSpec

from .activity import (
    PROJECT_ACTIVITY_SPEC,
    STORY_ACTIVITY_SPEC,
    ActivityListAdapter,
    project_activity_path,
    story_activity_path,
)
from .comments import COMMENTS_SPEC, CREATE_COMMENT_SPEC, CommentAdapter, CommentListAdapter
from .iterations import ITERATIONS_SPEC, IterationListAdapter, iterations_path
from .labels import CREATE_LABEL_SPEC, LABELS_SPEC, LabelAdapter, LabelListAdapter
from .memberships import MEMBERSHIPS_SPEC, MembershipListAdapter
from .stories import (
    CREATE_STORY_SPEC,
    DELETE_STORY_SPEC,
    EXPORT_STORIES_SPEC,
    STORIES_SPEC,
    STORY_SPEC,
    UPDATE_STORY_SPEC,
    DeleteStoryAdapter,
    ExportAdapter,
    StoryAdapter,
    StoryListAdapter,
    stories_path,
)
from .uploads import UPLOAD_SPEC, UploadAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "stories": (STORIES_SPEC, StoryListAdapter),
    "story": (STORY_SPEC, StoryAdapter),
    "create_story": (CREATE_STORY_SPEC, StoryAdapter),
    "update_story": (UPDATE_STORY_SPEC, StoryAdapter),
    "delete_story": (DELETE_STORY_SPEC, DeleteStoryAdapter),
    "export_stories": (EXPORT_STORIES_SPEC, ExportAdapter),
    "comments": (COMMENTS_SPEC, CommentListAdapter),
    "create_comment": (CREATE_COMMENT_SPEC, CommentAdapter),
    "labels": (LABELS_SPEC, LabelListAdapter),
    "create_label": (CREATE_LABEL_SPEC, LabelAdapter),
    "iterations": (ITERATIONS_SPEC, IterationListAdapter),
    "memberships": (MEMBERSHIPS_SPEC, MembershipListAdapter),
    "project_activity": (PROJECT_ACTIVITY_SPEC, ActivityListAdapter),
    "story_activity": (STORY_ACTIVITY_SPEC, ActivityListAdapter),
    "upload": (UPLOAD_SPEC, UploadAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "stories", "create_label")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "stories", "create_label")

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    """All registered endpoint ids."""
    return sorted(_ENDPOINT_REGISTRY)


__all__ = [
    "get_endpoint_spec",
    "get_endpoint_adapter",
    "list_endpoints",
    "stories_path",
    "iterations_path",
    "project_activity_path",
    "story_activity_path",
]
