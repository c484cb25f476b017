# /app/models/course_model.py

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from .department_model import Department


class CourseCategory(str, Enum):
    CORE = "Core"
    ELECTIVE = "Elective"
    LAB = "Lab"
    PROJECT = "Project"


class CourseBase(BaseModel):
    code: str = Field(..., min_length=1, description="Business key of the course, e.g. 'CSE101'. Immutable once created.")
    title: str = Field(..., min_length=1)
    credits: int = Field(default=3, ge=1, le=6)
    category: CourseCategory = Field(default=CourseCategory.CORE)
    description: str = Field(default="")
    semester: int = Field(default=1, ge=1, le=8)


class CourseCreate(CourseBase):
    # The catalog editor uses the course code as the identifier; when no id
    # is supplied the server generates one.
    id: Optional[str] = Field(default=None, min_length=1)
    departmentId: Optional[str] = None


class CourseUpdate(BaseModel):
    """
    Partial update. The editor sends its whole form, so `id` and `code` are
    accepted here as long as they match the stored record.
    """
    id: Optional[str] = None
    code: Optional[str] = None
    title: Optional[str] = Field(default=None, min_length=1)
    credits: Optional[int] = Field(default=None, ge=1, le=6)
    category: Optional[CourseCategory] = None
    description: Optional[str] = None
    semester: Optional[int] = Field(default=None, ge=1, le=8)
    departmentId: Optional[str] = None


class Course(CourseBase):
    id: str
    departmentId: Optional[Union[Department, str]] = None


class CourseListResponse(BaseModel):
    data: List[Course]
