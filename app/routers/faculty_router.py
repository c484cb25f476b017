# /app/routers/faculty_router.py

"""
HTTP surface of the faculty resource.

This is a "thin" router: it parses query/body input, injects the database
service, and delegates to `faculty_service`. Errors raised by the service
(`BadRequestError`, `NotFoundError`) are rendered by the global handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ..core.config import DEFAULT_PAGE_LIMIT
from ..models import common_model, faculty_model
from ..services import faculty_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=faculty_model.FacultyListResponse, summary="List Faculty")
def list_faculty(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1),
    search: Optional[str] = Query(None, description="Case-insensitive substring of name or email."),
    departmentId: Optional[str] = Query(None, description="Exact department id."),
    db: DatabaseService = Depends(get_db_service)
):
    return faculty_service.list_faculty(db=db, page=page, limit=limit, search=search, department_id=departmentId)


@router.get("/{faculty_id}", response_model=faculty_model.Faculty, summary="Get a Faculty Member")
def get_faculty(faculty_id: str, db: DatabaseService = Depends(get_db_service)):
    return faculty_service.get_faculty(faculty_id=faculty_id, db=db)


@router.post("", response_model=faculty_model.Faculty, status_code=status.HTTP_201_CREATED, summary="Create a Faculty Member")
def create_faculty(faculty_create: faculty_model.FacultyCreate, db: DatabaseService = Depends(get_db_service)):
    return faculty_service.create_faculty(faculty_data=faculty_create, db=db)


@router.put("/{faculty_id}", response_model=faculty_model.Faculty, summary="Update a Faculty Member")
def update_faculty(faculty_id: str, faculty_update: faculty_model.FacultyUpdate, db: DatabaseService = Depends(get_db_service)):
    return faculty_service.update_faculty(faculty_id=faculty_id, faculty_update=faculty_update, db=db)


@router.delete("/{faculty_id}", response_model=common_model.MessageResponse, summary="Delete a Faculty Member")
def delete_faculty(faculty_id: str, db: DatabaseService = Depends(get_db_service)):
    return faculty_service.delete_faculty(faculty_id=faculty_id, db=db)
