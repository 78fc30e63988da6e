"""Data models for Tracker resources.

Architecture:
    This module exports all Pydantic v2 models used throughout the library.
    Resource models are immutable (frozen=True) and keep unknown fields
    (extra="allow") so ``fields=`` projections and API additions survive
    parsing.

Model Categories:
    - Stories: Story, Label, Comment
    - Project: Iteration, ProjectMembership, Activity
    - Shared: Person, FileAttachment
    - Pagination: PaginationMeta
"""

from .common import FileAttachment, Person, TrackerResource
from .pagination import PaginationMeta
from .project import Activity, Iteration, ProjectMembership
from .story import Comment, Label, Story

__all__ = [
    "TrackerResource",
    "Person",
    "FileAttachment",
    "PaginationMeta",
    "Story",
    "Label",
    "Comment",
    "Iteration",
    "ProjectMembership",
    "Activity",
]
