"""User profile model."""

from canvas_mcp.api.models.base import CanvasModel


class Profile(CanvasModel):
    """Profile of the authenticated user (``/users/self/profile``)."""

    id: int | str | None = None
    name: str | None = None
    primary_email: str | None = None
    login_id: str | None = None
    time_zone: str | None = None
