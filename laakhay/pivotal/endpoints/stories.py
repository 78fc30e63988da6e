"""Story endpoint definitions and adapters.

Covers search/list, single story CRUD and CSV export.
"""

from __future__ import annotations

from typing import Any

from laakhay.pivotal.models import Story
from laakhay.pivotal.runtime.rest import ResponseAdapter, RestEndpointSpec
from laakhay.pivotal.utils import form_array

from .base import (
    EmptyAdapter,
    ModelAdapter,
    ModelListAdapter,
    build_options_query,
    project_path,
    story_path,
)


def stories_path(params: dict[str, Any]) -> str:
    """Build the stories collection path (also used for pagination)."""
    return f"{project_path(params)}/stories"


def build_story_body(params: dict[str, Any]) -> dict[str, Any]:
    return dict(params["story"])


def build_export_form(params: dict[str, Any]) -> list[tuple[str, str]]:
    """Form-encode story ids as repeated ``story_ids[]`` fields."""
    return form_array("story_ids", params["story_ids"])


STORIES_SPEC = RestEndpointSpec(
    id="stories",
    method="GET",
    build_path=stories_path,
    build_query=build_options_query,
)

STORY_SPEC = RestEndpointSpec(
    id="story",
    method="GET",
    build_path=story_path,
)

CREATE_STORY_SPEC = RestEndpointSpec(
    id="create_story",
    method="POST",
    build_path=stories_path,
    build_body=build_story_body,
)

UPDATE_STORY_SPEC = RestEndpointSpec(
    id="update_story",
    method="PUT",
    build_path=story_path,
    build_body=build_story_body,
)

DELETE_STORY_SPEC = RestEndpointSpec(
    id="delete_story",
    method="DELETE",
    build_path=story_path,
)

EXPORT_STORIES_SPEC = RestEndpointSpec(
    id="export_stories",
    method="POST",
    build_path=lambda params: f"{project_path(params)}/export",
    build_data=build_export_form,
    parse_json=False,
)


class StoryAdapter(ModelAdapter):
    model = Story


class StoryListAdapter(ModelListAdapter):
    model = Story


class DeleteStoryAdapter(EmptyAdapter):
    pass


class ExportAdapter(ResponseAdapter):
    """Export responds with CSV text; returned as-is."""

    def parse(self, response: Any, params: dict[str, Any]) -> str:
        return response or ""
