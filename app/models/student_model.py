# /app/models/student_model.py

from pydantic import BaseModel, Field, EmailStr
from typing import List, Optional


class StudentBase(BaseModel):
    """
    The base model for a Student. Contains fields common to create and read operations.
    """
    name: str = Field(..., min_length=2, description="The full name of the student.")
    rollNo: str = Field(..., min_length=1, description="The official roll number, unique across the college.")
    email: EmailStr
    guardianMobile: Optional[str] = Field(default=None, description="Guardian's mobile number, if on record.")


class StudentCreate(StudentBase):
    classId: str = Field(..., description="The class this student belongs to.")


class StudentUpdate(BaseModel):
    """
    The model for updating a student. All fields are optional to allow for
    partial updates.
    """
    name: Optional[str] = Field(default=None, min_length=2)
    rollNo: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    guardianMobile: Optional[str] = None
    classId: Optional[str] = None


class Student(StudentBase):
    """
    The full representation of a Student resource as returned by the API.
    """
    id: str = Field(..., description="The unique, server-generated identifier for the student.")
    classId: str = Field(..., description="The ID of the class this student belongs to.")


class StudentListResponse(BaseModel):
    data: List[Student]
