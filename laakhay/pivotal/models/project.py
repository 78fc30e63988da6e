"""Project-level models: iterations, memberships and activity."""

from datetime import datetime
from typing import Any

from pydantic import Field

from .common import Person, TrackerResource
from .story import Story


class Iteration(TrackerResource):
    """A project iteration and the stories scheduled in it."""

    number: int
    project_id: int | None = None
    length: int | None = None
    team_strength: float | None = None
    velocity: float | None = None
    stories: list[Story] = Field(default_factory=list)
    start: datetime | None = None
    finish: datetime | None = None
    kind: str = "iteration"


class ProjectMembership(TrackerResource):
    """Membership of a person in a project."""

    id: int
    project_id: int | None = None
    person: Person | None = None
    role: str | None = None
    project_color: str | None = None
    last_viewed_at: datetime | None = None
    kind: str = "project_membership"


class Activity(TrackerResource):
    """Activity feed entry.

    ``changes`` and ``primary_resources`` are heterogeneous (their shape
    depends on the resource kind), so they stay as plain dicts.
    """

    guid: str
    kind: str
    project_version: int | None = None
    message: str | None = None
    highlight: str | None = None
    changes: list[dict[str, Any]] = Field(default_factory=list)
    primary_resources: list[dict[str, Any]] = Field(default_factory=list)
    project: dict[str, Any] | None = None
    performed_by: dict[str, Any] | None = None
    occurred_at: datetime | None = None
