"""Course and module models."""

from typing import Any

from canvas_mcp.api.models.base import CanvasModel


class Term(CanvasModel):
    """Enrollment term a course belongs to."""

    id: int | str | None = None
    name: str | None = None


class Course(CanvasModel):
    """Canvas course as returned by ``/courses``."""

    id: int | str | None = None
    name: str | None = None
    course_code: str | None = None
    workflow_state: str | None = None
    term: Term | None = None
    teachers: list[Any] | None = None
    html_url: str | None = None

    @property
    def term_name(self) -> Any:
        return self.term.name if isinstance(self.term, Term) else None

    @property
    def teacher_names(self) -> list[str]:
        """Names of the listed teachers, skipping entries without one."""
        if not isinstance(self.teachers, list):
            return []
        names = []
        for teacher in self.teachers:
            name = teacher.get("name") if isinstance(teacher, dict) else None
            if name:
                names.append(str(name))
        return names


class Module(CanvasModel):
    """Course module."""

    id: int | str | None = None
    name: str | None = None
    state: str | None = None
    items_count: int | None = None
    items: list[Any] | None = None

    @property
    def item_count(self) -> Any:
        """Item count, falling back to the inlined items when no count is given."""
        if self.items_count is not None:
            return self.items_count
        if isinstance(self.items, (list, str)):
            return len(self.items)
        return 0
