"""Tests for tool output formatters."""

import pytest

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
from canvas_mcp.mcp.formatters import (
    format_announcement,
    format_assignment,
    format_course,
    format_date,
    format_discussion,
    format_event,
    format_json,
    format_module,
    format_profile,
    format_quiz,
    format_submission_status,
    format_todo,
    strip_html,
)


class TestFormatDate:
    """Tests for format_date."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_value(self, value):
        assert format_date(value) == "Not provided"

    def test_invalid_string_returned_unchanged(self):
        assert format_date("next tuesday") == "next tuesday"

    def test_valid_iso_string(self):
        value = "2026-01-10T09:00:00Z"
        result = format_date(value)

        assert result
        assert result != value
        assert "2026" in result


class TestStripHtml:
    """Tests for strip_html."""

    def test_strips_tags(self):
        assert strip_html("<p>Hello <b>world</b></p>") == "Hello world"

    def test_decodes_entities(self):
        assert strip_html("<p>Tom &amp; Jerry</p>") == "Tom & Jerry"

    def test_collapses_whitespace(self):
        assert strip_html("<div>\n  line one<br/>line two\n</div>") == "line one line two"

    def test_empty(self):
        assert strip_html("") == ""


class TestFormatJson:
    def test_pretty_prints(self):
        assert format_json([{"grade": "A"}]) == '[\n  {\n    "grade": "A"\n  }\n]'

    def test_string_passthrough(self):
        assert format_json("raw") == "raw"


class TestFormatCourse:
    """Tests for format_course."""

    def test_full_course(self):
        course = Course.from_record(
            {
                "id": 101,
                "name": "Biology",
                "course_code": "BIO-101",
                "workflow_state": "available",
                "term": {"name": "Fall 2026"},
                "teachers": [{"name": "Dr. Grey"}, {"name": "Dr. Shepherd"}],
                "html_url": "https://canvas.example.com/courses/101",
            }
        )

        assert format_course(course) == (
            "📚 **Biology** (BIO-101)\n"
            "   ID: 101 | Status: available\n"
            "   Term: Fall 2026\n"
            "   Teachers: Dr. Grey, Dr. Shepherd\n"
            "   URL: https://canvas.example.com/courses/101"
        )

    def test_missing_fields(self):
        text = format_course(Course.from_record({}))

        assert text == (
            "📚 **Untitled Course** (N/A)\n"
            "   ID: N/A | Status: unknown\n"
            "   Term: N/A"
        )


class TestFormatAssignment:
    def test_with_url(self):
        text = format_assignment(
            Assignment.from_record(
                {"id": 5, "name": "Essay", "points_possible": 10, "html_url": "https://x/a/5"}
            )
        )

        assert "📝 **Essay**" in text
        assert "ID: 5 | Points: 10" in text
        assert "Due: Not provided" in text
        assert text.endswith("URL: https://x/a/5")

    def test_defaults(self):
        text = format_assignment(Assignment.from_record({}))

        assert text.startswith("📝 **Assignment**")
        assert "Points: N/A" in text
        assert "URL" not in text


class TestFormatModule:
    def test_item_count_from_items(self):
        text = format_module(Module.from_record({"id": 1, "name": "Week 1", "items": [{}, {}]}))
        assert text == "📦 **Week 1**\n   ID: 1 | Status: unknown\n   Items: 2"


class TestFormatAnnouncement:
    def test_message_is_stripped(self):
        text = format_announcement(
            Announcement.from_record(
                {"id": 9, "title": "Welcome", "message": "<p>Hello <b>world</b></p>"}
            )
        )

        assert text.splitlines() == [
            "📣 **Welcome**",
            "   ID: 9 | Posted: Not provided",
            "   Hello world",
        ]

    def test_message_omitted(self):
        text = format_announcement(Announcement.from_record({"title": "Hi"}))
        assert len(text.splitlines()) == 2


class TestFormatDiscussion:
    def test_reply_default(self):
        text = format_discussion(Discussion.from_record({"title": "Intro"}))
        assert "Replies: 0" in text
        assert "Last post: Not provided" in text


class TestFormatEvent:
    def test_type_shown(self):
        text = format_event(CalendarEvent.from_record({"title": "Exam", "type": "event"}))
        assert text.endswith("Type: event")

    def test_type_omitted(self):
        text = format_event(CalendarEvent.from_record({}))
        assert text.startswith("📅 **Calendar Event**")
        assert "Type" not in text


class TestFormatTodo:
    def test_optional_lines_omitted(self):
        assert format_todo(TodoItem.from_record({})) == "✅ **Todo**"

    def test_course_and_due(self):
        text = format_todo(TodoItem.from_record({"title": "Read", "course_id": 3, "due_at": "bad"}))
        assert text == "✅ **Read**\n   Course ID: 3\n   Due: bad"


class TestFormatQuiz:
    def test_defaults(self):
        text = format_quiz(Quiz.from_record({}))
        assert text == "🧪 **Quiz**\n   ID: N/A | Points: N/A\n   Due: Not provided"


class TestFormatSubmissionStatus:
    def test_submitted(self):
        text = format_submission_status(
            Submission.from_record({"workflow_state": "graded", "score": 9.5, "grade": "A"})
        )
        assert text.splitlines() == [
            "📤 **Submission Status**",
            "   Workflow: graded",
            "   Score: 9.5",
            "   Grade: A",
            "   Submitted: Not provided",
        ]

    def test_zero_score_is_kept(self):
        text = format_submission_status(Submission.from_record({"score": 0}))
        assert "Score: 0" in text


class TestFormatProfile:
    def test_full_profile(self):
        text = format_profile(
            Profile.from_record(
                {
                    "id": 77,
                    "name": "Ada Lovelace",
                    "primary_email": "ada@example.com",
                    "login_id": "ada",
                    "time_zone": "Europe/London",
                }
            )
        )
        assert text.splitlines() == [
            "👤 **Ada Lovelace**",
            "   Email: ada@example.com",
            "   Login: ada",
            "   ID: 77",
            "   Timezone: Europe/London",
        ]

    def test_missing_lines_omitted(self):
        assert format_profile(Profile.from_record({})) == "👤 **Canvas User**"


class TestOffTypeRendering:
    def test_numeric_message(self):
        text = format_announcement(Announcement.from_record({"message": 42}))
        assert text.endswith("   42")

    def test_numeric_date(self):
        text = format_quiz(Quiz.from_record({"due_at": 1700000000}))
        assert "Due: 1700000000" in text


class TestNaiveDates:
    """Naive and date-only timestamps are read as UTC."""

    def test_date_only_is_utc(self):
        assert format_date("2026-01-15") == format_date("2026-01-15T00:00:00Z")

    def test_naive_timestamp_is_utc(self):
        assert format_date("2026-01-15T09:30:00") == format_date("2026-01-15T09:30:00+00:00")


class TestNumbers:
    def test_integral_float_points(self):
        text = format_assignment(Assignment.from_record({"points_possible": 10.0}))
        assert "Points: 10\n" in text

    def test_fractional_points(self):
        text = format_quiz(Quiz.from_record({"points_possible": 2.5}))
        assert "Points: 2.5\n" in text

    def test_integral_float_score(self):
        text = format_submission_status(Submission.from_record({"score": 9.0}))
        assert "Score: 9\n" in text
