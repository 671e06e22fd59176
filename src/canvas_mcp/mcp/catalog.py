"""Fixed catalog of Canvas tools and their argument schemas."""

from mcp import types
from pydantic import BaseModel

COURSE_ID_PROPERTY = {"type": "number", "description": "Canvas course ID"}

NO_ARGS_SCHEMA = {"type": "object", "properties": {}}

COURSE_ARGS_SCHEMA = {
    "type": "object",
    "properties": {"course_id": COURSE_ID_PROPERTY},
    "required": ["course_id"],
}

SUBMISSION_ARGS_SCHEMA = {
    "type": "object",
    "properties": {
        "course_id": COURSE_ID_PROPERTY,
        "assignment_id": {"type": "number", "description": "Assignment ID"},
    },
    "required": ["course_id", "assignment_id"],
}


class CourseArgs(BaseModel):
    """Arguments for tools scoped to one course."""

    course_id: int


class SubmissionArgs(BaseModel):
    """Arguments for tools scoped to one assignment."""

    course_id: int
    assignment_id: int


def _tool(name: str, description: str, schema: dict) -> types.Tool:
    return types.Tool(name=name, description=description, inputSchema=schema)


TOOLS: list[types.Tool] = [
    _tool(
        "list_courses",
        "Get all active Canvas courses for the authenticated user",
        NO_ARGS_SCHEMA,
    ),
    _tool(
        "get_assignments",
        "Get assignments for a specific Canvas course",
        COURSE_ARGS_SCHEMA,
    ),
    _tool(
        "get_upcoming_assignments",
        "Get upcoming assignments across all courses with future due dates",
        NO_ARGS_SCHEMA,
    ),
    _tool(
        "get_grades",
        "Get current grades for a Canvas course, including assignment scores and overall grade",
        COURSE_ARGS_SCHEMA,
    ),
    _tool(
        "get_user_profile",
        "Get the authenticated user's Canvas profile information",
        NO_ARGS_SCHEMA,
    ),
    _tool(
        "get_modules",
        "Get all modules for a specific Canvas course",
        COURSE_ARGS_SCHEMA,
    ),
    _tool(
        "get_announcements",
        "Get recent announcements for a Canvas course",
        COURSE_ARGS_SCHEMA,
    ),
    _tool(
        "get_discussions",
        "Get discussion topics for a Canvas course",
        COURSE_ARGS_SCHEMA,
    ),
    _tool(
        "get_calendar_events",
        "Get calendar events for the authenticated user",
        NO_ARGS_SCHEMA,
    ),
    _tool(
        "get_todo_items",
        "Get todo items (assignments that need action) for the authenticated user",
        NO_ARGS_SCHEMA,
    ),
    _tool(
        "get_quizzes",
        "Get all quizzes for a specific Canvas course",
        COURSE_ARGS_SCHEMA,
    ),
    _tool(
        "get_submission_status",
        "Check submission status for a specific assignment",
        SUBMISSION_ARGS_SCHEMA,
    ),
]

TOOL_NAMES = frozenset(tool.name for tool in TOOLS)
