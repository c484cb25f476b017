# /app/services/class_helpers/crud.py

import logging
import uuid
from typing import Dict, Optional

from ...core.errors import BadRequestError, ErrorCode, NotFoundError
from ...models import class_model, student_model
from ..database_service import DatabaseService
from ..serializers import serialize_class, serialize_student

logger = logging.getLogger(__name__)


# --- CLASS-RELATED CORE BUSINESS LOGIC ---

def create_class(class_data: class_model.ClassCreate, db: DatabaseService) -> Dict:
    """
    Creates a new class record after checking that its department and batch
    references resolve.
    """
    if class_data.departmentId and not db.get_department_by_id(class_data.departmentId):
        raise BadRequestError(f"Department with id '{class_data.departmentId}' does not exist", code=ErrorCode.INVALID_REFERENCE)
    if class_data.batchId and not db.get_batch_by_id(class_data.batchId):
        raise BadRequestError(f"Batch with id '{class_data.batchId}' does not exist", code=ErrorCode.INVALID_REFERENCE)

    new_class = db.add_class({
        "id": f"cls_{uuid.uuid4().hex[:12]}",
        "name": class_data.name,
        "department_id": class_data.departmentId,
        "batch_id": class_data.batchId,
    })
    return serialize_class(new_class)


def delete_class_by_id(class_id: str, db: DatabaseService) -> bool:
    # Students and allocations are removed by the model's cascade.
    return db.delete_class(class_id)


# --- STUDENT-RELATED CORE BUSINESS LOGIC ---

def get_student_by_roll_no(roll_no: str, db: DatabaseService) -> Optional[Dict]:
    """Checks if a student exists based on their roll number."""
    student = db.get_student_by_roll_no(roll_no)
    return serialize_student(student) if student else None


def add_student_to_class(student_data: student_model.StudentCreate, db: DatabaseService) -> Dict:
    """Business logic to add a new student to a class."""
    if not db.get_class_by_id(student_data.classId):
        raise BadRequestError(f"Class with id '{student_data.classId}' does not exist", code=ErrorCode.INVALID_REFERENCE)

    if get_student_by_roll_no(student_data.rollNo, db):
        raise BadRequestError(f"Student with roll number '{student_data.rollNo}' already exists", code=ErrorCode.DUPLICATE_KEY)

    new_student = db.add_student({
        "id": f"stu_{uuid.uuid4().hex[:12]}",
        "name": student_data.name,
        "roll_no": student_data.rollNo,
        "email": student_data.email,
        "guardian_mobile": student_data.guardianMobile,
        "class_id": student_data.classId,
    })
    logger.info(f"Added student {new_student.id} to class {new_student.class_id}")
    return serialize_student(new_student)


def update_student(student_id: str, student_update: student_model.StudentUpdate, db: DatabaseService) -> Dict:
    """Business logic to update a student's details."""
    existing = db.get_student_by_id(student_id)
    if existing is None:
        raise NotFoundError("Student", student_id)

    update_data = student_update.model_dump(exclude_unset=True)
    if not update_data:
        raise BadRequestError("No update data provided.")

    if update_data.get("rollNo") and update_data["rollNo"] != existing.roll_no:
        if get_student_by_roll_no(update_data["rollNo"], db):
            raise BadRequestError(f"Student with roll number '{update_data['rollNo']}' already exists", code=ErrorCode.DUPLICATE_KEY)
    if update_data.get("classId") and not db.get_class_by_id(update_data["classId"]):
        raise BadRequestError(f"Class with id '{update_data['classId']}' does not exist", code=ErrorCode.INVALID_REFERENCE)

    columns = {"name": "name", "rollNo": "roll_no", "email": "email",
               "guardianMobile": "guardian_mobile", "classId": "class_id"}
    changes = {columns[key]: value for key, value in update_data.items()
               if key in columns and (value is not None or key == "guardianMobile")}
    updated_student = db.update_student(student_id, changes)
    return serialize_student(updated_student)
