# /app/services/class_service.py

"""
This service module acts as the primary business logic layer for all
operations related to classes and their student rosters.

It serves as a facade, orchestrating calls to the lower-level `crud` helper
and the `DatabaseService`. It is the link between the API routers and the
data access layer.
"""

import logging
from typing import Dict

import pandas as pd

from ..core.errors import NotFoundError
from ..models import class_model, student_model
from .database_service import DatabaseService
from .serializers import serialize_class, serialize_student

# Import the specialist helper module this service orchestrates.
from .class_helpers import crud

logger = logging.getLogger(__name__)

ROSTER_EXPORT_COLUMNS = ['Roll No', 'Student Name', 'Email', 'Guardian Mobile', 'Class']


# --- Facade Methods for CRUD Operations ---

def list_classes(db: DatabaseService) -> Dict:
    return {"data": [serialize_class(c) for c in db.get_all_classes()]}


def get_class(class_id: str, db: DatabaseService) -> Dict:
    class_obj = db.get_class_by_id(class_id)
    if class_obj is None:
        raise NotFoundError("Class", class_id)
    return serialize_class(class_obj)


def create_class(class_data: class_model.ClassCreate, db: DatabaseService) -> Dict:
    new_class = crud.create_class(class_data=class_data, db=db)
    logger.info(f"Created class {new_class['id']}")
    return new_class


def delete_class(class_id: str, db: DatabaseService) -> Dict:
    if not crud.delete_class_by_id(class_id=class_id, db=db):
        raise NotFoundError("Class", class_id)
    logger.info(f"Deleted class {class_id}")
    return {"message": "Class deleted successfully"}


def add_student(student_data: student_model.StudentCreate, db: DatabaseService) -> Dict:
    return crud.add_student_to_class(student_data=student_data, db=db)


def get_student(student_id: str, db: DatabaseService) -> Dict:
    student = db.get_student_by_id(student_id)
    if student is None:
        raise NotFoundError("Student", student_id)
    return serialize_student(student)


def update_student(student_id: str, student_update: student_model.StudentUpdate, db: DatabaseService) -> Dict:
    return crud.update_student(student_id=student_id, student_update=student_update, db=db)


def delete_student(student_id: str, db: DatabaseService) -> Dict:
    if not db.delete_student(student_id):
        raise NotFoundError("Student", student_id)
    return {"message": "Student deleted successfully"}


# --- Roster Assembly & Export Logic ---

def get_class_roster(class_id: str, db: DatabaseService) -> Dict:
    """Returns `{"data": [...]}` with every student of the class."""
    if db.get_class_by_id(class_id) is None:
        raise NotFoundError("Class", class_id)
    return {"data": [serialize_student(s) for s in db.get_students_by_class_id(class_id)]}


def class_display_name(class_info: Dict) -> str:
    """Builds "<dept code> - <batch name> - Section <name>" from a populated class."""
    department = class_info.get("departmentId")
    batch = class_info.get("batchId")
    dept_code = department.get("code") if isinstance(department, dict) else None
    batch_name = batch.get("name") if isinstance(batch, dict) else None
    return f"{dept_code or 'Dept'} - {batch_name or 'Batch'} - Section {class_info.get('name')}"


def export_roster_as_csv(class_id: str, db: DatabaseService) -> str:
    """Generates a CSV export of a single class roster."""
    class_info = get_class(class_id, db)
    students_in_class = db.get_students_by_class_id(class_id)
    label = class_display_name(class_info)

    export_data = [
        {
            'Roll No': s.roll_no,
            'Student Name': s.name,
            'Email': s.email,
            'Guardian Mobile': s.guardian_mobile or "",
            'Class': label,
        } for s in students_in_class
    ]

    df = pd.DataFrame(export_data, columns=ROSTER_EXPORT_COLUMNS)
    return df.to_csv(index=False)
