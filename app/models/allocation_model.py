# /app/models/allocation_model.py

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from .class_model import Class
from .course_model import Course
from .faculty_model import Faculty


class CourseAllocationCreate(BaseModel):
    courseId: str = Field(..., min_length=1)
    facultyId: str = Field(..., min_length=1)
    classId: str = Field(..., min_length=1)
    academicYear: Optional[str] = Field(default=None, example="2024-2025")


class CourseAllocation(BaseModel):
    """An allocation with its course, faculty member and class populated."""
    id: str
    courseId: Union[Course, str]
    facultyId: Union[Faculty, str]
    classId: Union[Class, str]
    academicYear: Optional[str] = None


class CourseAllocationListResponse(BaseModel):
    data: List[CourseAllocation]
