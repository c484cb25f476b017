# /app/services/department_service.py

import logging
import uuid
from typing import Dict

from ..core.errors import BadRequestError, ErrorCode, NotFoundError
from ..models import department_model
from .database_service import DatabaseService
from .serializers import serialize_batch, serialize_department

logger = logging.getLogger(__name__)


# --- Departments ---

def list_departments(db: DatabaseService) -> Dict:
    return {"data": [serialize_department(d) for d in db.get_all_departments()]}


def create_department(department_data: department_model.DepartmentCreate, db: DatabaseService) -> Dict:
    if db.get_department_by_code(department_data.code):
        raise BadRequestError(f"Department with code '{department_data.code}' already exists", code=ErrorCode.DUPLICATE_KEY)
    department = db.add_department({"id": f"dep_{uuid.uuid4().hex[:12]}", **department_data.model_dump()})
    logger.info(f"Created department {department.id} ({department.code})")
    return serialize_department(department)


def delete_department(department_id: str, db: DatabaseService) -> Dict:
    if not db.delete_department(department_id):
        raise NotFoundError("Department", department_id)
    return {"message": "Department deleted successfully"}


# --- Batches ---

def list_batches(db: DatabaseService) -> Dict:
    return {"data": [serialize_batch(b) for b in db.get_all_batches()]}


def create_batch(batch_data: department_model.BatchCreate, db: DatabaseService) -> Dict:
    if batch_data.startYear and batch_data.endYear and batch_data.endYear < batch_data.startYear:
        raise BadRequestError("endYear cannot be earlier than startYear")
    batch = db.add_batch({
        "id": f"bat_{uuid.uuid4().hex[:12]}",
        "name": batch_data.name,
        "start_year": batch_data.startYear,
        "end_year": batch_data.endYear,
    })
    logger.info(f"Created batch {batch.id} ({batch.name})")
    return serialize_batch(batch)


def delete_batch(batch_id: str, db: DatabaseService) -> Dict:
    if not db.delete_batch(batch_id):
        raise NotFoundError("Batch", batch_id)
    return {"message": "Batch deleted successfully"}
