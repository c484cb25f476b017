# /app/models/class_model.py

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from .department_model import Batch, Department


class ClassCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Section name, e.g. 'A'.")
    departmentId: Optional[str] = None
    batchId: Optional[str] = None


class Class(BaseModel):
    """A class section with its department and batch populated when known."""
    id: str
    name: str
    departmentId: Optional[Union[Department, str]] = None
    batchId: Optional[Union[Batch, str]] = None


class ClassListResponse(BaseModel):
    data: List[Class]
