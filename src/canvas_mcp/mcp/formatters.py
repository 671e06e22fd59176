"""Plain-text formatters for Canvas records returned by MCP tools."""

import html
import json
import re
from typing import Any

from canvas_mcp.api.client import parse_timestamp
from canvas_mcp.api.models import (
    Announcement,
    Assignment,
    CalendarEvent,
    Course,
    Discussion,
    Module,
    Profile,
    Quiz,
    Submission,
    TodoItem,
)

NOT_PROVIDED = "Not provided"


def _or(value: Any, default: str) -> Any:
    """Substitute ``default`` only for a missing value (None)."""
    return default if value is None else value


def _number(value: Any) -> Any:
    """Render integral floats like JSON numbers do (10.0 as 10)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _lines(*lines: str | None) -> str:
    """Join the non-empty lines of a record block."""
    return "\n".join(line for line in lines if line)


def format_date(value: Any) -> str:
    """Render a Canvas timestamp in the local date-time format.

    Missing values render as ``Not provided``; strings that don't parse as
    ISO-8601 are returned unchanged.
    """
    if not value:
        return NOT_PROVIDED
    if not isinstance(value, str):
        return str(value)
    # Naive and date-only values are UTC, as in the upcoming-assignments filter
    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    return parsed.astimezone().strftime("%c")


def strip_html(text: str) -> str:
    """Strip HTML tags and decode entities from text."""
    if not text:
        return ""

    text = re.sub(r"<[^>]+>", " ", text)
    text = html.unescape(text)
    text = re.sub(r"\s+", " ", text)

    return text.strip()


def format_json(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False)


def format_course(course: Course) -> str:
    teachers = ", ".join(course.teacher_names)
    return _lines(
        f"📚 **{_or(course.name, 'Untitled Course')}** ({_or(course.course_code, 'N/A')})",
        f"   ID: {_or(course.id, 'N/A')} | Status: {_or(course.workflow_state, 'unknown')}",
        f"   Term: {_or(course.term_name, 'N/A')}",
        f"   Teachers: {teachers}" if teachers else None,
        f"   URL: {course.html_url}" if course.html_url else None,
    )


def format_assignment(assignment: Assignment) -> str:
    return _lines(
        f"📝 **{_or(assignment.name, 'Assignment')}**",
        f"   ID: {_or(assignment.id, 'N/A')} | Points: {_or(_number(assignment.points_possible), 'N/A')}",
        f"   Due: {format_date(assignment.due_at)}",
        f"   URL: {assignment.html_url}" if assignment.html_url else None,
    )


def format_module(module: Module) -> str:
    return _lines(
        f"📦 **{_or(module.name, 'Module')}**",
        f"   ID: {_or(module.id, 'N/A')} | Status: {_or(module.state, 'unknown')}",
        f"   Items: {module.item_count}",
    )


def format_announcement(announcement: Announcement) -> str:
    message = strip_html(str(announcement.message)) if announcement.message else ""
    return _lines(
        f"📣 **{_or(announcement.title, 'Announcement')}**",
        f"   ID: {_or(announcement.id, 'N/A')} | Posted: {format_date(announcement.posted_at)}",
        f"   {message}" if message else None,
    )


def format_discussion(discussion: Discussion) -> str:
    return _lines(
        f"💬 **{_or(discussion.title, 'Discussion')}**",
        f"   ID: {_or(discussion.id, 'N/A')} | Replies: {_or(discussion.discussion_subentry_count, 0)}",
        f"   Last post: {format_date(discussion.last_reply_at)}",
    )


def format_event(event: CalendarEvent) -> str:
    return _lines(
        f"📅 **{_or(event.title, 'Calendar Event')}**",
        f"   ID: {_or(event.id, 'N/A')} | When: {format_date(event.start_at)}",
        f"   Type: {event.type}" if event.type else None,
    )


def format_todo(todo: TodoItem) -> str:
    return _lines(
        f"✅ **{_or(todo.title, 'Todo')}**",
        f"   Course ID: {todo.course_id}" if todo.course_id else None,
        f"   Due: {format_date(todo.due_at)}" if todo.due_at else None,
    )


def format_quiz(quiz: Quiz) -> str:
    return _lines(
        f"🧪 **{_or(quiz.title, 'Quiz')}**",
        f"   ID: {_or(quiz.id, 'N/A')} | Points: {_or(_number(quiz.points_possible), 'N/A')}",
        f"   Due: {format_date(quiz.due_at)}",
    )


def format_submission_status(submission: Submission) -> str:
    return _lines(
        "📤 **Submission Status**",
        f"   Workflow: {_or(submission.workflow_state, 'unknown')}",
        f"   Score: {_or(_number(submission.score), 'N/A')}",
        f"   Grade: {_or(submission.grade, 'N/A')}",
        f"   Submitted: {format_date(submission.submitted_at)}",
    )


def format_profile(profile: Profile) -> str:
    return _lines(
        f"👤 **{_or(profile.name, 'Canvas User')}**",
        f"   Email: {profile.primary_email}" if profile.primary_email else None,
        f"   Login: {profile.login_id}" if profile.login_id else None,
        f"   ID: {profile.id}" if profile.id else None,
        f"   Timezone: {profile.time_zone}" if profile.time_zone else None,
    )
