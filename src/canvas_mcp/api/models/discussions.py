"""Discussion topic and announcement models."""

from canvas_mcp.api.models.base import CanvasModel


class Announcement(CanvasModel):
    """Announcement (a discussion topic flagged as announcement)."""

    id: int | str | None = None
    title: str | None = None
    posted_at: str | None = None
    message: str | None = None


class Discussion(CanvasModel):
    id: int | str | None = None
    title: str | None = None
    discussion_subentry_count: int | None = None
    last_reply_at: str | None = None
