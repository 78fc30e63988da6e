"""Story, label and comment models."""

from datetime import datetime

from pydantic import Field

from .common import FileAttachment, TrackerResource


class Label(TrackerResource):
    """Project label."""

    id: int
    project_id: int | None = None
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    kind: str = "label"


class Story(TrackerResource):
    """A story (feature, bug, chore or release)."""

    id: int
    project_id: int | None = None
    name: str | None = None
    description: str | None = None
    story_type: str | None = None
    current_state: str | None = None
    estimate: float | None = None
    requested_by_id: int | None = None
    owner_ids: list[int] = Field(default_factory=list)
    labels: list[Label] = Field(default_factory=list)
    url: str | None = None
    accepted_at: datetime | None = None
    deadline: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    kind: str = "story"

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.labels]


class Comment(TrackerResource):
    """Comment on a story or epic."""

    id: int
    story_id: int | None = None
    epic_id: int | None = None
    text: str | None = None
    person_id: int | None = None
    file_attachment_ids: list[int] = Field(default_factory=list)
    file_attachments: list[FileAttachment] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    kind: str = "comment"
