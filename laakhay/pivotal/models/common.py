"""Shared model configuration and small resource types."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class TrackerResource(BaseModel):
    """Base class for Tracker resources.

    Tracker adds fields over time and supports ``fields=`` projections, so
    unknown keys are kept rather than rejected.
    """

    model_config = ConfigDict(frozen=True, extra="allow")


class Person(TrackerResource):
    """A Tracker user."""

    id: int
    name: str | None = None
    email: str | None = None
    initials: str | None = None
    username: str | None = None
    kind: str = "person"


class FileAttachment(TrackerResource):
    """Uploaded file, as returned by the uploads endpoint."""

    id: int | None = None
    filename: str | None = None
    content_type: str | None = None
    size: int | None = None
    uploader_id: int | None = None
    thumbnailable: bool | None = None
    download_url: str | None = None
    created_at: datetime | None = None
    kind: str = "file_attachment"
