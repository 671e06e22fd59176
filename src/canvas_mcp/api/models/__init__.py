"""Canvas record models."""

from canvas_mcp.api.models.assignments import Assignment, Quiz, Submission
from canvas_mcp.api.models.base import CanvasModel
from canvas_mcp.api.models.calendar import CalendarEvent, TodoItem
from canvas_mcp.api.models.courses import Course, Module, Term
from canvas_mcp.api.models.discussions import Announcement, Discussion
from canvas_mcp.api.models.users import Profile

__all__ = [
    # Base model
    "CanvasModel",
    # Models
    "Announcement",
    "Assignment",
    "CalendarEvent",
    "Course",
    "Discussion",
    "Module",
    "Profile",
    "Quiz",
    "Submission",
    "Term",
    "TodoItem",
]
