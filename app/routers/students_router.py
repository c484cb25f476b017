# /app/routers/students_router.py

from fastapi import APIRouter, Depends, status

from ..models import common_model, student_model
from ..services import class_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Add a Student to a Class")
def add_student(student_create: student_model.StudentCreate, db: DatabaseService = Depends(get_db_service)):
    return class_service.add_student(student_data=student_create, db=db)


@router.get("/{student_id}", response_model=student_model.Student, summary="Get a Student")
def get_student(student_id: str, db: DatabaseService = Depends(get_db_service)):
    return class_service.get_student(student_id=student_id, db=db)


@router.put("/{student_id}", response_model=student_model.Student, summary="Update a Student")
def update_student_details(student_id: str, student_update: student_model.StudentUpdate, db: DatabaseService = Depends(get_db_service)):
    return class_service.update_student(student_id=student_id, student_update=student_update, db=db)


@router.delete("/{student_id}", response_model=common_model.MessageResponse, summary="Remove a Student")
def remove_student(student_id: str, db: DatabaseService = Depends(get_db_service)):
    return class_service.delete_student(student_id=student_id, db=db)
