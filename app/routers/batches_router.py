# /app/routers/batches_router.py

from fastapi import APIRouter, Depends, status

from ..models import common_model, department_model
from ..services import department_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=department_model.BatchListResponse, summary="Get All Batches")
def get_all_batches(db: DatabaseService = Depends(get_db_service)):
    return department_service.list_batches(db=db)


@router.post("", response_model=department_model.Batch, status_code=status.HTTP_201_CREATED, summary="Create a Batch")
def create_batch(batch_create: department_model.BatchCreate, db: DatabaseService = Depends(get_db_service)):
    return department_service.create_batch(batch_data=batch_create, db=db)


@router.delete("/{batch_id}", response_model=common_model.MessageResponse, summary="Delete a Batch")
def delete_batch(batch_id: str, db: DatabaseService = Depends(get_db_service)):
    return department_service.delete_batch(batch_id=batch_id, db=db)
