# /app/models/department_model.py

from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional


class DepartmentCreate(BaseModel):
    code: str = Field(..., min_length=1, description="Short department code, e.g. 'CSE'.")
    name: str = Field(..., min_length=1)


class Department(DepartmentCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str


class DepartmentListResponse(BaseModel):
    data: List[Department]


class BatchCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Cohort label, e.g. '2022-2026'.")
    startYear: Optional[int] = Field(default=None, ge=1900, le=2200)
    endYear: Optional[int] = Field(default=None, ge=1900, le=2200)


class Batch(BatchCreate):
    id: str


class BatchListResponse(BaseModel):
    data: List[Batch]
