"""Tool dispatch: map MCP tool calls onto Canvas API calls and render the results.

Every call follows the same path:

1. look the tool up in the fixed catalog,
2. validate its arguments,
3. call the matching :class:`CanvasClient` method,
4. render ``title`` and ``body`` as one text block.

Failures surface as :class:`McpError` so the protocol layer can report them.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from mcp import types
from mcp.shared.exceptions import McpError
from pydantic import BaseModel

from canvas_mcp.api.client import CanvasClient
from canvas_mcp.api.exceptions import CanvasAPIError
from canvas_mcp.api.models import (
    Announcement,
    Assignment,
    CalendarEvent,
    CanvasModel,
    Course,
    Discussion,
    Module,
    Profile,
    Quiz,
    Submission,
    TodoItem,
)
from canvas_mcp.config import ServerConfig
from canvas_mcp.mcp.catalog import TOOL_NAMES, TOOLS, CourseArgs, SubmissionArgs
from canvas_mcp.mcp.formatters import (
    format_announcement,
    format_assignment,
    format_course,
    format_discussion,
    format_event,
    format_json,
    format_module,
    format_profile,
    format_quiz,
    format_submission_status,
    format_todo,
)

logger = logging.getLogger(__name__)

NO_DATA = "No data returned."

UNAUTHORIZED_MESSAGE = (
    "Canvas returned 401 Unauthorized. Check your API key and base URL.\n\nDetails: {details}"
)

ClientFactory = Callable[[], CanvasClient]
Rendered = tuple[str, str]


@dataclass(frozen=True)
class _Route:
    """How one tool validates its arguments and renders its result."""

    args_model: type[BaseModel] | None
    run: Callable[[CanvasClient, Any], Awaitable[Rendered]]


def render_records(
    data: Any,
    model: type[CanvasModel],
    formatter: Callable[[Any], str],
    empty_message: str,
) -> str:
    """Render a list of records, one paragraph each, or ``empty_message``."""
    if not isinstance(data, list) or not data:
        return empty_message
    return "\n\n".join(formatter(model.from_record(record)) for record in data)


def classify_error(error: Exception) -> McpError:
    """Map a failure during tool execution onto an MCP error.

    Unauthorized responses become INVALID_REQUEST with a hint to check the
    credentials; everything else is an INTERNAL_ERROR carrying the original
    message.
    """
    message = str(error)
    if isinstance(error, CanvasAPIError):
        unauthorized = error.status_code == 401
    else:
        unauthorized = "401" in message

    if unauthorized:
        return McpError(
            types.ErrorData(
                code=types.INVALID_REQUEST,
                message=UNAUTHORIZED_MESSAGE.format(details=message),
            )
        )
    return McpError(types.ErrorData(code=types.INTERNAL_ERROR, message=message))


def unknown_tool(name: str) -> McpError:
    return McpError(types.ErrorData(code=types.INVALID_REQUEST, message=f"Unknown tool: {name}"))


class ToolDispatcher:
    """Advertises the Canvas tool catalog and executes tool calls.

    Each call opens its own :class:`CanvasClient`, so concurrent calls share
    no state.
    """

    def __init__(self, config: ServerConfig, client_factory: ClientFactory | None = None):
        self._config = config
        self._client_factory = client_factory or self._default_client
        self._routes: dict[str, _Route] = {
            "list_courses": _Route(None, self._list_courses),
            "get_assignments": _Route(CourseArgs, self._get_assignments),
            "get_upcoming_assignments": _Route(None, self._get_upcoming_assignments),
            "get_grades": _Route(CourseArgs, self._get_grades),
            "get_user_profile": _Route(None, self._get_user_profile),
            "get_modules": _Route(CourseArgs, self._get_modules),
            "get_announcements": _Route(CourseArgs, self._get_announcements),
            "get_discussions": _Route(CourseArgs, self._get_discussions),
            "get_calendar_events": _Route(None, self._get_calendar_events),
            "get_todo_items": _Route(None, self._get_todo_items),
            "get_quizzes": _Route(CourseArgs, self._get_quizzes),
            "get_submission_status": _Route(SubmissionArgs, self._get_submission_status),
        }

    def _default_client(self) -> CanvasClient:
        return CanvasClient(self._config.api_key, self._config.base_url)

    def list_tools(self) -> list[types.Tool]:
        """Return the fixed tool catalog."""
        return list(TOOLS)

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> types.CallToolResult:
        """Execute a tool and wrap its text in a tool result.

        Raises:
            McpError: INVALID_REQUEST for unknown tools and rejected
                credentials, INTERNAL_ERROR for any other failure
        """
        logger.debug(f"Tool call: {name}")
        try:
            if name not in TOOL_NAMES:
                raise unknown_tool(name)
            route = self._routes[name]

            args = None
            if route.args_model is not None:
                args = route.args_model.model_validate(arguments or {})

            async with self._client_factory() as canvas:
                title, body = await route.run(canvas, args)
        except McpError:
            raise
        except Exception as e:
            logger.debug(f"Tool {name} failed: {e}")
            raise classify_error(e) from e

        text = "\n\n".join(part for part in (title, body) if part) or NO_DATA
        return types.CallToolResult(content=[types.TextContent(type="text", text=text)])

    # -------------------------------------------------------------------------
    # Tool implementations
    # -------------------------------------------------------------------------

    async def _list_courses(self, canvas: CanvasClient, args: None) -> Rendered:
        courses = await canvas.list_courses()
        return "Canvas Courses", render_records(
            courses, Course, format_course, "No active courses found."
        )

    async def _get_assignments(self, canvas: CanvasClient, args: CourseArgs) -> Rendered:
        assignments = await canvas.get_assignments(args.course_id)
        return f"Assignments for course {args.course_id}", render_records(
            assignments, Assignment, format_assignment, "No assignments found."
        )

    async def _get_upcoming_assignments(self, canvas: CanvasClient, args: None) -> Rendered:
        assignments = await canvas.get_upcoming_assignments()
        return "Upcoming Assignments", render_records(
            assignments, Assignment, format_assignment, "No upcoming assignments found."
        )

    async def _get_grades(self, canvas: CanvasClient, args: CourseArgs) -> Rendered:
        grades = await canvas.get_grades(args.course_id)
        if not isinstance(grades, list) or not grades:
            body = "No grade information returned."
        else:
            body = format_json(grades)
        return f"Grades for course {args.course_id}", body

    async def _get_user_profile(self, canvas: CanvasClient, args: None) -> Rendered:
        profile = await canvas.get_user_profile()
        return "Canvas Profile", format_profile(Profile.from_record(profile))

    async def _get_modules(self, canvas: CanvasClient, args: CourseArgs) -> Rendered:
        modules = await canvas.get_modules(args.course_id)
        return f"Modules for course {args.course_id}", render_records(
            modules, Module, format_module, "No modules found."
        )

    async def _get_announcements(self, canvas: CanvasClient, args: CourseArgs) -> Rendered:
        announcements = await canvas.get_announcements(args.course_id)
        return f"Announcements for course {args.course_id}", render_records(
            announcements, Announcement, format_announcement, "No announcements found."
        )

    async def _get_discussions(self, canvas: CanvasClient, args: CourseArgs) -> Rendered:
        discussions = await canvas.get_discussions(args.course_id)
        return f"Discussions for course {args.course_id}", render_records(
            discussions, Discussion, format_discussion, "No discussions found."
        )

    async def _get_calendar_events(self, canvas: CanvasClient, args: None) -> Rendered:
        events = await canvas.get_calendar_events()
        return "Upcoming Calendar Events", render_records(
            events, CalendarEvent, format_event, "No calendar events found."
        )

    async def _get_todo_items(self, canvas: CanvasClient, args: None) -> Rendered:
        todos = await canvas.get_todo_items()
        return "Todo Items", render_records(
            todos, TodoItem, format_todo, "No todo items found."
        )

    async def _get_quizzes(self, canvas: CanvasClient, args: CourseArgs) -> Rendered:
        quizzes = await canvas.get_quizzes(args.course_id)
        return f"Quizzes for course {args.course_id}", render_records(
            quizzes, Quiz, format_quiz, "No quizzes found."
        )

    async def _get_submission_status(
        self, canvas: CanvasClient, args: SubmissionArgs
    ) -> Rendered:
        submission = await canvas.get_submission_status(args.course_id, args.assignment_id)
        return (
            f"Submission status for assignment {args.assignment_id}",
            format_submission_status(Submission.from_record(submission)),
        )
