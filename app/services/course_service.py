# /app/services/course_service.py

"""
Business logic for the course catalog.

The course code is the catalog's business key: it is unique, and once a
course exists its code can no longer change.
"""

import logging
import uuid
from typing import Dict, List, Optional

from ..core.errors import BadRequestError, ErrorCode, NotFoundError
from ..models import course_model
from .database_service import DatabaseService
from .serializers import serialize_course

logger = logging.getLogger(__name__)


def _ensure_department_exists(department_id: Optional[str], db: DatabaseService) -> None:
    if department_id and not db.get_department_by_id(department_id):
        raise BadRequestError(
            f"Department with id '{department_id}' does not exist",
            code=ErrorCode.INVALID_REFERENCE
        )


def list_courses(db: DatabaseService) -> Dict:
    return {"data": [serialize_course(course) for course in db.get_all_courses()]}


def get_course(course_id: str, db: DatabaseService) -> Dict:
    course = db.get_course_by_id(course_id)
    if course is None:
        raise NotFoundError("Course", course_id)
    return serialize_course(course)


def create_course(course_data: course_model.CourseCreate, db: DatabaseService) -> Dict:
    record = course_data.model_dump()
    course_id = record.get("id") or f"crs_{uuid.uuid4().hex[:12]}"

    if db.get_course_by_code(record["code"]):
        raise BadRequestError(f"Course with code '{record['code']}' already exists", code=ErrorCode.DUPLICATE_KEY)
    if db.get_course_by_id(course_id):
        raise BadRequestError(f"Course with id '{course_id}' already exists", code=ErrorCode.DUPLICATE_KEY)
    _ensure_department_exists(record.get("departmentId"), db)

    new_course = db.add_course({
        "id": course_id,
        "code": record["code"],
        "title": record["title"],
        "credits": record["credits"],
        "category": course_data.category.value,
        "description": record["description"],
        "semester": record["semester"],
        "department_id": record.get("departmentId") or None,
    })
    logger.info(f"Created course {new_course.id} ({new_course.code})")
    return serialize_course(new_course)


def update_course(course_id: str, course_update: course_model.CourseUpdate, db: DatabaseService) -> Dict:
    existing = db.get_course_by_id(course_id)
    if existing is None:
        raise NotFoundError("Course", course_id)

    update_data = course_update.model_dump(exclude_unset=True)
    # The identifier is addressed by the URL; a copy in the body is ignored.
    update_data.pop("id", None)

    code = update_data.pop("code", None)
    if code is not None and code != existing.code:
        raise BadRequestError(
            f"Course code '{existing.code}' cannot be changed",
            code=ErrorCode.IMMUTABLE_FIELD
        )

    changes = {}
    for field in ("title", "credits", "description", "semester"):
        if field in update_data and update_data[field] is not None:
            changes[field] = update_data[field]
    if update_data.get("category") is not None:
        changes["category"] = course_model.CourseCategory(update_data["category"]).value
    if "departmentId" in update_data:
        _ensure_department_exists(update_data["departmentId"], db)
        changes["department_id"] = update_data["departmentId"] or None

    updated = db.update_course(course_id, changes)
    logger.info(f"Updated course {course_id}")
    return serialize_course(updated)


def delete_course(course_id: str, db: DatabaseService) -> Dict:
    if not db.delete_course(course_id):
        raise NotFoundError("Course", course_id)
    logger.info(f"Deleted course {course_id}")
    return {"message": "Course deleted successfully"}
