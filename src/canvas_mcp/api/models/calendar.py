"""Calendar event and todo models."""

from canvas_mcp.api.models.base import CanvasModel


class CalendarEvent(CanvasModel):
    """Calendar entry. Assignment events use string ids like ``assignment_12``."""

    id: int | str | None = None
    title: str | None = None
    start_at: str | None = None
    type: str | None = None


class TodoItem(CanvasModel):
    """Entry from the user's todo list."""

    title: str | None = None
    course_id: int | str | None = None
    due_at: str | None = None
