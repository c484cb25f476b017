# /app/views/class_roster.py

"""
Headless presentation model of the "Students by Class" dashboard.

Loading works in two phases:

1. Fetch the course allocations (only the current faculty member's when
   "my classes only" is on) and derive the distinct set of classes from the
   populated class references.
2. Fetch every class roster independently. A failed roster becomes an empty
   list for that class; the other classes are unaffected.

Rosters are fetched one at a time by default. A `concurrency` above 1 turns
phase 2 into a bounded fan-out that is fully joined before anything renders.

Search, class selection and counts are computed locally from the loaded
rosters.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..client.api_client import CollegeApiClient
from ..client.references import Ref, entity_id
from .notifications import Notifier

logger = logging.getLogger(__name__)

ALL_CLASSES = "all"
STUDENT_SEARCH_FIELDS = ("name", "rollNo", "email")


class AuthSession(BaseModel):
    """The resolved (or still resolving) authentication context."""
    user: Optional[Dict[str, Any]] = None
    loading: bool = False

    @property
    def user_id(self) -> Optional[str]:
        return entity_id(self.user)


class RosterMode(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    GROUPED = "grouped"
    SINGLE = "single"


class ClassGroup(BaseModel):
    class_id: str
    label: str
    department_name: str
    students: List[Dict[str, Any]]
    student_count: int


class RosterScreen(BaseModel):
    mode: RosterMode
    message: Optional[str] = None
    total_students: int = 0
    groups: List[ClassGroup] = Field(default_factory=list)
    students: List[Dict[str, Any]] = Field(default_factory=list)


def class_label(class_info: Dict[str, Any]) -> str:
    department = Ref.parse(class_info.get("departmentId"))
    batch = Ref.parse(class_info.get("batchId"))
    return f"{department.get('code', 'Dept')} - {batch.get('name', 'Batch')} - Section {class_info.get('name')}"


def student_matches(student: Dict[str, Any], term: str) -> bool:
    """Case-insensitive substring match on name, roll number or email."""
    term = term.lower()
    return any(term in str(student.get(field) or "").lower() for field in STUDENT_SEARCH_FIELDS)


def derive_classes(allocations: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Returns the distinct classes referenced by `allocations`, in order of
    first appearance. Allocations whose class is not populated are skipped.
    """
    unique: Dict[str, Dict[str, Any]] = {}
    for allocation in allocations:
        ref = Ref.parse(allocation.get("classId"))
        if ref.resolved and ref.id:
            unique[ref.id] = ref.entity
    return list(unique.values())


class ClassRosterView:
    def __init__(
        self,
        api: CollegeApiClient,
        session: AuthSession,
        notifier: Optional[Notifier] = None,
        my_classes_only: bool = True,
        concurrency: int = 1
    ):
        self.api = api
        self.session = session
        self.notifier = notifier or Notifier(logger)
        self.my_classes_only = my_classes_only
        self.concurrency = max(1, concurrency)

        self.classes: List[Dict[str, Any]] = []
        self.students: Dict[str, List[Dict[str, Any]]] = {}
        self.selected_class = ALL_CLASSES
        self.search = ""
        self.is_loading = True

    # --- Loading ---

    async def load(self) -> None:
        if self.session.loading:
            logger.debug("Session still resolving; roster load deferred")
            return

        self.is_loading = True
        try:
            faculty_id = self.session.user_id
            params = {"facultyId": faculty_id} if self.my_classes_only and faculty_id else {}
            logger.debug(f"Fetching course allocations with params {params}")

            allocations = await self.api.get_course_allocations(params)
            self.classes = derive_classes(allocations)
            logger.info(f"Resolved {len(self.classes)} classes from {len(allocations)} allocations")

            self.students = await self._fetch_rosters(self.classes)
        except Exception as error:
            logger.error(f"Error fetching classes: {error}")
            self.notifier.error(str(error) or "Failed to load classes")
            self.classes = []
            self.students = {}
        finally:
            self.is_loading = False

    async def _fetch_roster(self, class_info: Dict[str, Any]) -> List[Dict[str, Any]]:
        class_id = entity_id(class_info)
        try:
            roster = await self.api.get_class_students(class_id)
        except Exception as error:
            logger.error(f"Error fetching students for class {class_info.get('name')}: {error}")
            return []
        logger.debug(f"Class {class_info.get('name')}: {len(roster)} students")
        return roster

    async def _fetch_rosters(self, classes: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
        if self.concurrency == 1:
            rosters = {}
            for class_info in classes:
                rosters[entity_id(class_info)] = await self._fetch_roster(class_info)
            return rosters

        semaphore = asyncio.Semaphore(self.concurrency)

        async def bounded(class_info):
            async with semaphore:
                return await self._fetch_roster(class_info)

        results = await asyncio.gather(*(bounded(c) for c in classes))
        return {entity_id(c): roster for c, roster in zip(classes, results)}

    async def set_session(self, session: AuthSession) -> None:
        self.session = session
        await self.load()

    async def toggle_my_classes(self, value: bool) -> None:
        self.my_classes_only = value
        await self.load()

    # --- Filters ---

    def select_class(self, class_id: str) -> None:
        self.selected_class = class_id or ALL_CLASSES

    def set_search(self, text: str) -> None:
        self.search = text

    def filtered_students(self, class_id: str) -> List[Dict[str, Any]]:
        class_students = self.students.get(class_id, [])
        if not self.search:
            return class_students
        return [s for s in class_students if student_matches(s, self.search)]

    def all_students(self) -> List[Dict[str, Any]]:
        combined = [student for roster in self.students.values() for student in roster]
        if not self.search:
            return combined
        return [s for s in combined if student_matches(s, self.search)]

    @property
    def display_classes(self) -> List[Dict[str, Any]]:
        if self.selected_class == ALL_CLASSES:
            return self.classes
        return [c for c in self.classes if entity_id(c) == self.selected_class]

    @property
    def total_students(self) -> int:
        if self.selected_class == ALL_CLASSES:
            return len(self.all_students())
        return len(self.filtered_students(self.selected_class))

    def class_options(self) -> List[Dict[str, str]]:
        options = [{"value": ALL_CLASSES, "label": "All Classes"}]
        options.extend({"value": entity_id(c), "label": class_label(c)} for c in self.classes)
        return options

    # --- Rendering ---

    def render(self) -> RosterScreen:
        if self.is_loading or self.session.loading:
            return RosterScreen(mode=RosterMode.LOADING, message="Loading...")

        if not self.classes:
            message = "No classes assigned to you yet" if self.my_classes_only else "No classes found"
            return RosterScreen(mode=RosterMode.EMPTY, message=message)

        if self.selected_class == ALL_CLASSES:
            groups = []
            for class_info in self.display_classes:
                class_id = entity_id(class_info)
                students = self.filtered_students(class_id)
                groups.append(ClassGroup(
                    class_id=class_id,
                    label=class_label(class_info),
                    department_name=Ref.parse(class_info.get("departmentId")).get("name", "Department"),
                    students=students,
                    student_count=len(students),
                ))
            return RosterScreen(mode=RosterMode.GROUPED, total_students=self.total_students, groups=groups)

        students = self.filtered_students(self.selected_class)
        return RosterScreen(
            mode=RosterMode.SINGLE,
            message=None if students else "No students found",
            total_students=len(students),
            students=students,
        )
