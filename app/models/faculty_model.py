# /app/models/faculty_model.py

"""
API contract for the faculty resource.

No response model in this module declares a `password` field, so FastAPI's
response validation strips it even if a serializer were to leak one.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, EmailStr, Field

from .common_model import Pagination
from .department_model import Department


class FacultyBase(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    designation: Optional[str] = None
    phone: Optional[str] = None


class FacultyCreate(FacultyBase):
    password: str = Field(..., min_length=6, description="Plaintext secret; hashed before it is stored.")
    departmentId: Optional[str] = None


class FacultyUpdate(BaseModel):
    """Partial update. A non-empty `password` triggers a rehash."""
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    designation: Optional[str] = None
    phone: Optional[str] = None
    departmentId: Optional[str] = None
    password: Optional[str] = None


class Faculty(FacultyBase):
    id: str
    departmentId: Optional[Union[Department, str]] = None


class FacultyListResponse(BaseModel):
    data: List[Faculty]
    pagination: Pagination
