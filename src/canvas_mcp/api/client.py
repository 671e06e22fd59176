"""Async HTTP client for the Canvas REST API."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from canvas_mcp.api.exceptions import CanvasAPIError, UnauthorizedError

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

# Canvas caps per_page at 100
MAX_PAGE_SIZE = 100

UPCOMING_LIMIT = 20


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a Canvas ISO-8601 timestamp into an aware datetime.

    Naive timestamps are taken to be UTC. Returns None for anything that
    is not a parseable string.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class CanvasClient:
    """Read-only async client for the Canvas LMS API.

    Usage:
        async with CanvasClient(api_key, "https://school.instructure.com") as canvas:
            courses = await canvas.list_courses()
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> "CanvasClient":
        """Open the underlying HTTP client."""
        self._client = httpx.AsyncClient(transport=self._transport)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure client is initialized."""
        if self._client is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with CanvasClient(...) as canvas:'"
            )
        return self._client

    def _handle_response(self, response: httpx.Response) -> Any:
        """Raise on a non-2xx status, otherwise decode the JSON body."""
        if not response.is_success:
            message = f"Canvas API error: {response.status_code} {response.reason_phrase}"
            if response.status_code == 401:
                raise UnauthorizedError(message)
            raise CanvasAPIError(message, response.status_code)

        return response.json()

    async def _fetch(
        self,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET ``endpoint`` under the versioned API root.

        Caller-supplied headers override the default authorization and
        content-type headers.
        """
        client = self._ensure_client()
        url = f"{self._base_url}{API_PREFIX}{endpoint}"
        request_headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        if headers:
            request_headers.update(headers)

        response = await client.get(url, params=params, headers=request_headers)
        return self._handle_response(response)

    # -------------------------------------------------------------------------
    # Courses
    # -------------------------------------------------------------------------

    async def list_courses(self) -> Any:
        """Get the user's active courses."""
        return await self._fetch(
            "/courses",
            params={"enrollment_state": "active", "per_page": MAX_PAGE_SIZE},
        )

    async def get_grades(self, course_id: int) -> Any:
        """Get the user's enrollments in a course, including total scores."""
        return await self._fetch(
            f"/courses/{course_id}/enrollments",
            params={"user_id": "self", "include[]": "total_scores"},
        )

    async def get_modules(self, course_id: int) -> Any:
        return await self._fetch(
            f"/courses/{course_id}/modules", params={"per_page": MAX_PAGE_SIZE}
        )

    async def get_announcements(self, course_id: int) -> Any:
        return await self._fetch(
            f"/courses/{course_id}/discussion_topics",
            params={"only_announcements": "true", "per_page": 20},
        )

    async def get_discussions(self, course_id: int) -> Any:
        return await self._fetch(
            f"/courses/{course_id}/discussion_topics", params={"per_page": 50}
        )

    async def get_quizzes(self, course_id: int) -> Any:
        return await self._fetch(
            f"/courses/{course_id}/quizzes", params={"per_page": MAX_PAGE_SIZE}
        )

    # -------------------------------------------------------------------------
    # Assignments
    # -------------------------------------------------------------------------

    async def get_assignments(self, course_id: int) -> Any:
        return await self._fetch(
            f"/courses/{course_id}/assignments", params={"per_page": MAX_PAGE_SIZE}
        )

    async def get_submission_status(self, course_id: int, assignment_id: int) -> Any:
        """Get the user's own submission for an assignment."""
        return await self._fetch(
            f"/courses/{course_id}/assignments/{assignment_id}/submissions/self"
        )

    async def _assignments_or_empty(self, course: Any) -> list:
        """Fetch one course's assignments, treating any failure as no assignments."""
        course_id = course.get("id") if isinstance(course, dict) else None
        try:
            assignments = await self.get_assignments(course_id)
        except Exception as e:
            logger.debug(f"Skipping assignments for course {course_id}: {e}")
            return []
        return assignments if isinstance(assignments, list) else []

    async def get_upcoming_assignments(self, now: datetime | None = None) -> list:
        """Get assignments due in the future across all active courses.

        Course assignment lists are fetched concurrently. A course whose
        fetch fails contributes nothing instead of failing the whole call.

        Args:
            now: Reference time, defaults to the current time

        Returns:
            Up to 20 assignments sorted by due date, soonest first
        """
        if now is None:
            now = datetime.now(timezone.utc)

        courses = await self.list_courses()
        if not isinstance(courses, list):
            courses = []

        # gather preserves course order regardless of completion order
        per_course = await asyncio.gather(
            *(self._assignments_or_empty(course) for course in courses)
        )

        upcoming = []
        for assignments in per_course:
            for assignment in assignments:
                if not isinstance(assignment, dict):
                    continue
                due = parse_timestamp(assignment.get("due_at"))
                if due is not None and due > now:
                    upcoming.append((due, assignment))

        upcoming.sort(key=lambda pair: pair[0])
        return [assignment for _, assignment in upcoming[:UPCOMING_LIMIT]]

    # -------------------------------------------------------------------------
    # User
    # -------------------------------------------------------------------------

    async def get_user_profile(self) -> Any:
        return await self._fetch("/users/self/profile")

    async def get_calendar_events(self) -> Any:
        """Get calendar events starting from now."""
        start_date = datetime.now(timezone.utc).isoformat()
        return await self._fetch(
            "/calendar_events", params={"start_date": start_date, "per_page": 50}
        )

    async def get_todo_items(self) -> Any:
        return await self._fetch("/users/self/todo")
