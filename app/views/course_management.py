# /app/views/course_management.py

"""
Headless presentation model of the course catalog editor.

The view mirrors the server's Course and Department collections, drives a
create/edit dialog backed by `CourseForm`, and renders a searchable,
paginated table. Network failures never escape: they become error
notifications and the view keeps its previous state.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from ..client.api_client import CollegeApiClient
from ..client.references import Ref, entity_id
from .notifications import Notifier

logger = logging.getLogger(__name__)

PAGE_SIZE = 10
COURSE_CATEGORIES = ("Core", "Elective", "Lab", "Project")
SEMESTERS = tuple(range(1, 9))
SEARCH_FIELDS = ("code", "title", "category")


class CourseForm(BaseModel):
    """Dialog form state. Field values are whatever the user has typed so far."""
    id: str = ""
    code: str = ""
    title: str = ""
    credits: int = 3
    category: str = "Core"
    description: str = ""
    semester: int = 1
    departmentId: str = ""


class CourseRow(BaseModel):
    id: str
    code: str
    title: str
    category: str
    credits: Any
    semester: str
    department: str


def department_label(department: Any) -> str:
    """Column text for a course's department, raw id or populated."""
    ref = Ref.parse(department)
    if ref.resolved:
        return ref.get("code") or ref.get("name") or "-"
    return ref.id or "-"


class CourseManagementView:
    def __init__(self, api: CollegeApiClient, notifier: Optional[Notifier] = None):
        self.api = api
        self.notifier = notifier or Notifier(logger)
        self.courses: List[Dict[str, Any]] = []
        self.departments: List[Dict[str, Any]] = []
        self.dialog_open = False
        self.editing_course: Optional[Dict[str, Any]] = None
        self.form = CourseForm()
        self.search = ""
        self.page = 1

    # --- Loading ---

    async def mount(self) -> None:
        await self.fetch_courses()
        await self.fetch_departments()

    async def fetch_courses(self) -> None:
        try:
            self.courses = await self.api.get_courses()
        except Exception as error:
            logger.error(f"Error fetching courses: {error}")
            self.notifier.error("Failed to load courses")

    async def fetch_departments(self) -> None:
        try:
            self.departments = await self.api.get_departments()
        except Exception as error:
            # The department picker simply stays empty.
            logger.error(f"Error fetching departments: {error}")

    # --- Dialog & Form ---

    @property
    def code_field_disabled(self) -> bool:
        return self.editing_course is not None

    def open_create(self) -> None:
        self.reset_form()
        self.dialog_open = True

    def close_dialog(self) -> None:
        self.dialog_open = False

    def edit(self, course: Dict[str, Any]) -> None:
        self.editing_course = course
        self.form = CourseForm(
            id=entity_id(course) or "",
            code=course.get("code", ""),
            title=course.get("title", ""),
            credits=course.get("credits", 3),
            category=course.get("category", "Core"),
            description=course.get("description") or "",
            semester=course.get("semester") or 1,
            departmentId=Ref.parse(course.get("departmentId")).id or "",
        )
        self.dialog_open = True

    def set_field(self, name: str, value: Any) -> None:
        if name not in CourseForm.model_fields or name == "id":
            raise KeyError(name)
        if name == "code":
            if self.code_field_disabled:
                return
            # The code doubles as the identifier of a new course.
            self.form = self.form.model_copy(update={"code": value, "id": value})
            return
        if name == "category" and value not in COURSE_CATEGORIES:
            raise ValueError(f"Unknown course category: {value}")
        if name == "semester" and value not in SEMESTERS:
            raise ValueError(f"Semester must be between {SEMESTERS[0]} and {SEMESTERS[-1]}")
        self.form = self.form.model_copy(update={name: value})

    def reset_form(self) -> None:
        self.editing_course = None
        self.form = CourseForm()

    def _payload(self) -> Dict[str, Any]:
        payload = self.form.model_dump()
        if not payload["id"]:
            payload.pop("id")
        payload["departmentId"] = payload["departmentId"] or None
        return payload

    async def submit(self) -> bool:
        """
        Creates or updates the course in the form. On success the dialog is
        closed, the form reset and the list reloaded; on failure the dialog
        stays open with the form intact so the user can retry.
        """
        try:
            if self.editing_course is not None:
                await self.api.update_course(entity_id(self.editing_course), self._payload())
                self.notifier.success("Course updated successfully")
            else:
                await self.api.create_course(self._payload())
                self.notifier.success("Course created successfully")
        except Exception as error:
            logger.error(f"Error saving course: {error}")
            self.notifier.error(str(error) or "Failed to save course")
            return False

        self.dialog_open = False
        self.reset_form()
        await self.fetch_courses()
        return True

    async def delete(self, course: Dict[str, Any], confirm: Callable[[str], bool]) -> bool:
        if not confirm(f"Are you sure you want to delete {course.get('title')}?"):
            return False
        try:
            await self.api.delete_course(entity_id(course))
        except Exception as error:
            logger.error(f"Error deleting course: {error}")
            self.notifier.error(str(error) or "Failed to delete course")
            return False
        self.notifier.success("Course deleted successfully")
        await self.fetch_courses()
        return True

    # --- Table ---

    def department_options(self) -> List[Dict[str, str]]:
        return [
            {"value": entity_id(d) or "", "label": f"{d.get('code')} - {d.get('name')}"}
            for d in self.departments
        ]

    def rows(self) -> List[CourseRow]:
        return [
            CourseRow(
                id=entity_id(course) or "",
                code=course.get("code", ""),
                title=course.get("title", ""),
                category=course.get("category", ""),
                credits=course.get("credits", ""),
                semester=f"Semester {course.get('semester') or '-'}",
                department=department_label(course.get("departmentId")),
            )
            for course in self.courses
        ]

    def set_search(self, text: str) -> None:
        self.search = text
        self.page = 1

    def filtered_rows(self) -> List[CourseRow]:
        term = self.search.strip().lower()
        rows = self.rows()
        if not term:
            return rows
        return [row for row in rows if any(term in str(getattr(row, f)).lower() for f in SEARCH_FIELDS)]

    @property
    def page_count(self) -> int:
        return max(1, -(-len(self.filtered_rows()) // PAGE_SIZE))

    def set_page(self, page: int) -> None:
        self.page = min(max(1, page), self.page_count)

    def page_rows(self) -> List[CourseRow]:
        start = (self.page - 1) * PAGE_SIZE
        return self.filtered_rows()[start:start + PAGE_SIZE]
