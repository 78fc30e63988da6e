"""Pagination envelope metadata."""

from pydantic import BaseModel, ConfigDict, Field


class PaginationMeta(BaseModel):
    """Pagination block returned with ``envelope=true`` list responses.

    The server is expected to send ``returned <= limit``; this is not
    checked here. The server may clamp ``limit`` below the value requested.
    """

    total: int = Field(..., ge=0)
    returned: int = Field(..., ge=0)
    limit: int = Field(..., ge=0)
    offset: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def next_offset(self) -> int:
        """Offset immediately after the items in this page."""
        return self.offset + self.returned

    @property
    def remaining(self) -> int:
        """Items left after this page, according to this page's total."""
        return max(self.total - self.next_offset, 0)
