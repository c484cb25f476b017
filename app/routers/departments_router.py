# /app/routers/departments_router.py

from fastapi import APIRouter, Depends, status

from ..models import common_model, department_model
from ..services import department_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=department_model.DepartmentListResponse, summary="Get All Departments")
def get_all_departments(db: DatabaseService = Depends(get_db_service)):
    return department_service.list_departments(db=db)


@router.post("", response_model=department_model.Department, status_code=status.HTTP_201_CREATED, summary="Create a Department")
def create_department(department_create: department_model.DepartmentCreate, db: DatabaseService = Depends(get_db_service)):
    return department_service.create_department(department_data=department_create, db=db)


@router.delete("/{department_id}", response_model=common_model.MessageResponse, summary="Delete a Department")
def delete_department(department_id: str, db: DatabaseService = Depends(get_db_service)):
    return department_service.delete_department(department_id=department_id, db=db)
