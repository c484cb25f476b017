# /app/models/dashboard_model.py

from pydantic import BaseModel, Field


class DashboardSummary(BaseModel):
    """
    Defines the data contract for the admin dashboard's quick info cards.
    """

    departmentCount: int = Field(..., description="Number of departments.", example=5)
    courseCount: int = Field(..., description="Number of courses in the catalog.", example=64)
    facultyCount: int = Field(..., description="Number of faculty members.", example=42)
    classCount: int = Field(..., description="Number of class sections.", example=18)
    studentCount: int = Field(..., description="Number of enrolled students.", example=1080)
