# /app/routers/courses_router.py

from fastapi import APIRouter, Depends, status

from ..models import common_model, course_model
from ..services import course_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=course_model.CourseListResponse, summary="Get the Course Catalog")
def get_all_courses(db: DatabaseService = Depends(get_db_service)):
    return course_service.list_courses(db=db)


@router.get("/{course_id}", response_model=course_model.Course, summary="Get a Course")
def get_course(course_id: str, db: DatabaseService = Depends(get_db_service)):
    return course_service.get_course(course_id=course_id, db=db)


@router.post("", response_model=course_model.Course, status_code=status.HTTP_201_CREATED, summary="Create a Course")
def create_course(course_create: course_model.CourseCreate, db: DatabaseService = Depends(get_db_service)):
    return course_service.create_course(course_data=course_create, db=db)


@router.put("/{course_id}", response_model=course_model.Course, summary="Update a Course")
def update_course(course_id: str, course_update: course_model.CourseUpdate, db: DatabaseService = Depends(get_db_service)):
    return course_service.update_course(course_id=course_id, course_update=course_update, db=db)


@router.delete("/{course_id}", response_model=common_model.MessageResponse, summary="Delete a Course")
def delete_course(course_id: str, db: DatabaseService = Depends(get_db_service)):
    return course_service.delete_course(course_id=course_id, db=db)
