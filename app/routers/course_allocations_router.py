# /app/routers/course_allocations_router.py

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ..models import allocation_model, common_model
from ..services import allocation_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=allocation_model.CourseAllocationListResponse, summary="List Course Allocations")
def list_allocations(
    facultyId: Optional[str] = Query(None),
    classId: Optional[str] = Query(None),
    courseId: Optional[str] = Query(None),
    db: DatabaseService = Depends(get_db_service)
):
    return allocation_service.list_allocations(db=db, faculty_id=facultyId, class_id=classId, course_id=courseId)


@router.post("", response_model=allocation_model.CourseAllocation, status_code=status.HTTP_201_CREATED, summary="Allocate a Course")
def create_allocation(allocation_create: allocation_model.CourseAllocationCreate, db: DatabaseService = Depends(get_db_service)):
    return allocation_service.create_allocation(allocation_data=allocation_create, db=db)


@router.delete("/{allocation_id}", response_model=common_model.MessageResponse, summary="Delete a Course Allocation")
def delete_allocation(allocation_id: str, db: DatabaseService = Depends(get_db_service)):
    return allocation_service.delete_allocation(allocation_id=allocation_id, db=db)
