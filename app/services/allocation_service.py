# /app/services/allocation_service.py

"""
Course allocations record which faculty member teaches which course to
which class. The roster view derives a faculty member's classes from them.
"""

import logging
import uuid
from typing import Dict, Optional

from ..core.errors import BadRequestError, ErrorCode, NotFoundError
from ..models import allocation_model
from .database_service import DatabaseService
from .serializers import serialize_allocation

logger = logging.getLogger(__name__)


def list_allocations(
    db: DatabaseService,
    faculty_id: Optional[str] = None,
    class_id: Optional[str] = None,
    course_id: Optional[str] = None
) -> Dict:
    allocations = db.get_allocations(faculty_id=faculty_id, class_id=class_id, course_id=course_id)
    return {"data": [serialize_allocation(a) for a in allocations]}


def create_allocation(allocation_data: allocation_model.CourseAllocationCreate, db: DatabaseService) -> Dict:
    # Every reference must resolve before anything is written.
    lookups = (
        ("Course", allocation_data.courseId, db.get_course_by_id),
        ("Faculty", allocation_data.facultyId, db.get_faculty_by_id),
        ("Class", allocation_data.classId, db.get_class_by_id),
    )
    for resource, identifier, lookup in lookups:
        if lookup(identifier) is None:
            raise BadRequestError(
                f"{resource} with id '{identifier}' does not exist",
                code=ErrorCode.INVALID_REFERENCE
            )

    allocation = db.add_allocation({
        "id": f"alc_{uuid.uuid4().hex[:12]}",
        "course_id": allocation_data.courseId,
        "faculty_id": allocation_data.facultyId,
        "class_id": allocation_data.classId,
        "academic_year": allocation_data.academicYear,
    })
    logger.info(
        f"Allocated course {allocation.course_id} to faculty {allocation.faculty_id} for class {allocation.class_id}"
    )
    return serialize_allocation(allocation)


def delete_allocation(allocation_id: str, db: DatabaseService) -> Dict:
    if not db.delete_allocation(allocation_id):
        raise NotFoundError("Course allocation", allocation_id)
    return {"message": "Course allocation deleted successfully"}
