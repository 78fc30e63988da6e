"""Shared response adapters for Tracker endpoints."""

from __future__ import annotations

from typing import Any, ClassVar

from laakhay.pivotal.models import TrackerResource
from laakhay.pivotal.runtime.rest import ResponseAdapter


class ModelAdapter(ResponseAdapter):
    """Parse a single resource into ``model``."""

    model: ClassVar[type[TrackerResource]]

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return self.model.model_validate(response)


class ModelListAdapter(ResponseAdapter):
    """Parse a bare JSON array into a list of ``model``."""

    model: ClassVar[type[TrackerResource]]

    def parse(self, response: Any, params: dict[str, Any]) -> list[Any]:
        return [self.model.model_validate(row) for row in response or []]


class EmptyAdapter(ResponseAdapter):
    """Endpoints that answer with no body (e.g. DELETE -> 204)."""

    def parse(self, response: Any, params: dict[str, Any]) -> None:
        return None


def project_path(params: dict[str, Any]) -> str:
    return f"projects/{params['project_id']}"


def story_path(params: dict[str, Any]) -> str:
    return f"{project_path(params)}/stories/{params['story_id']}"


def build_options_query(params: dict[str, Any]) -> dict[str, Any]:
    """Pass caller options through as the query string."""
    return dict(params.get("options") or {})
