"""Story comment endpoint definitions and adapters."""

from __future__ import annotations

from typing import Any

from laakhay.pivotal.models import Comment
from laakhay.pivotal.runtime.rest import RestEndpointSpec

from .base import ModelAdapter, ModelListAdapter, story_path


def comments_path(params: dict[str, Any]) -> str:
    return f"{story_path(params)}/comments"


def build_comment_body(params: dict[str, Any]) -> dict[str, Any]:
    """Build the comment payload; attachments are upload resources."""
    body: dict[str, Any] = {"text": params["text"]}
    if params.get("file_attachments"):
        body["file_attachments"] = list(params["file_attachments"])
    return body


COMMENTS_SPEC = RestEndpointSpec(
    id="comments",
    method="GET",
    build_path=comments_path,
)

CREATE_COMMENT_SPEC = RestEndpointSpec(
    id="create_comment",
    method="POST",
    build_path=comments_path,
    build_body=build_comment_body,
)


class CommentAdapter(ModelAdapter):
    model = Comment


class CommentListAdapter(ModelListAdapter):
    model = Comment
