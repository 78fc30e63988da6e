"""Activity feed endpoint definitions and adapter."""

from __future__ import annotations

from typing import Any

from laakhay.pivotal.models import Activity
from laakhay.pivotal.runtime.rest import RestEndpointSpec

from .base import ModelListAdapter, build_options_query, project_path, story_path


def project_activity_path(params: dict[str, Any]) -> str:
    """Build the project activity path (also used for pagination)."""
    return f"{project_path(params)}/activity"


def story_activity_path(params: dict[str, Any]) -> str:
    return f"{story_path(params)}/activity"


PROJECT_ACTIVITY_SPEC = RestEndpointSpec(
    id="project_activity",
    method="GET",
    build_path=project_activity_path,
    build_query=build_options_query,
)

STORY_ACTIVITY_SPEC = RestEndpointSpec(
    id="story_activity",
    method="GET",
    build_path=story_activity_path,
    build_query=build_options_query,
)


class ActivityListAdapter(ModelListAdapter):
    model = Activity
