"""Assignment, quiz and submission models."""

from canvas_mcp.api.models.base import CanvasModel


class Assignment(CanvasModel):
    """Course assignment."""

    id: int | str | None = None
    name: str | None = None
    points_possible: int | float | None = None
    due_at: str | None = None
    html_url: str | None = None
    course_id: int | str | None = None


class Quiz(CanvasModel):
    """Classic quiz."""

    id: int | str | None = None
    title: str | None = None
    points_possible: int | float | None = None
    due_at: str | None = None


class Submission(CanvasModel):
    """The user's own submission for an assignment."""

    workflow_state: str | None = None
    score: int | float | None = None
    grade: str | None = None
    submitted_at: str | None = None
