# /app/services/faculty_service.py

"""
Business logic for the faculty resource: paginated search, creation with
password hashing, partial updates with conditional rehash, and deletion.

Every function returns dictionaries built by `serialize_faculty`, which never
includes the password hash.
"""

import logging
import uuid
from typing import Dict, Optional

from ..core import security
from ..core.config import DEFAULT_PAGE_LIMIT
from ..core.errors import BadRequestError, ErrorCode, NotFoundError
from ..models import faculty_model
from .database_service import DatabaseService
from .serializers import serialize_faculty

logger = logging.getLogger(__name__)

REQUIRED_UPDATE_FIELDS = ("name", "email")


def _ensure_department_exists(department_id: Optional[str], db: DatabaseService) -> None:
    if department_id and not db.get_department_by_id(department_id):
        raise BadRequestError(
            f"Department with id '{department_id}' does not exist",
            code=ErrorCode.INVALID_REFERENCE
        )


def list_faculty(
    db: DatabaseService,
    page: int = 1,
    limit: int = DEFAULT_PAGE_LIMIT,
    search: Optional[str] = None,
    department_id: Optional[str] = None
) -> Dict:
    """
    Returns `{"data": [...], "pagination": {"page", "limit", "total"}}`.

    `total` counts every record matching the filters, not just this page.
    """
    skip = (page - 1) * limit
    rows, total = db.list_faculty(skip=skip, limit=limit, search=search or None, department_id=department_id or None)
    return {
        "data": [serialize_faculty(row) for row in rows],
        "pagination": {"page": page, "limit": limit, "total": total},
    }


def get_faculty(faculty_id: str, db: DatabaseService) -> Dict:
    faculty = db.get_faculty_by_id(faculty_id)
    if faculty is None:
        raise NotFoundError("Faculty", faculty_id)
    return serialize_faculty(faculty)


def create_faculty(faculty_data: faculty_model.FacultyCreate, db: DatabaseService) -> Dict:
    """
    Hashes the plaintext password and persists the new faculty member.
    """
    record = faculty_data.model_dump()
    # Emails are stored lowercased so uniqueness ignores case.
    record["email"] = record["email"].lower()
    if db.get_faculty_by_email(record["email"]):
        raise BadRequestError(f"Faculty with email '{record['email']}' already exists", code=ErrorCode.DUPLICATE_KEY)
    _ensure_department_exists(record.get("departmentId"), db)

    new_faculty = db.add_faculty({
        "id": f"fac_{uuid.uuid4().hex[:12]}",
        "name": record["name"],
        "email": record["email"],
        "designation": record.get("designation"),
        "phone": record.get("phone"),
        "department_id": record.get("departmentId"),
        "password": security.hash_password(record["password"]),
    })
    logger.info(f"Created faculty {new_faculty.id} ({new_faculty.email})")
    return serialize_faculty(new_faculty)


def update_faculty(faculty_id: str, faculty_update: faculty_model.FacultyUpdate, db: DatabaseService) -> Dict:
    """
    Applies a partial update. Only a non-empty `password` in the payload
    replaces the stored hash; otherwise the hash is left untouched.
    """
    if db.get_faculty_by_id(faculty_id) is None:
        raise NotFoundError("Faculty", faculty_id)

    update_data = faculty_update.model_dump(exclude_unset=True)
    password = update_data.pop("password", None)

    for field in REQUIRED_UPDATE_FIELDS:
        if field in update_data and update_data[field] is None:
            raise BadRequestError(f"{field}: Field cannot be null", code=ErrorCode.VALIDATION_ERROR)
    if "email" in update_data:
        update_data["email"] = update_data["email"].lower()

    changes = {}
    for field, column in (("name", "name"), ("email", "email"), ("designation", "designation"),
                          ("phone", "phone"), ("departmentId", "department_id")):
        if field in update_data:
            changes[column] = update_data[field]

    if "email" in changes:
        existing = db.get_faculty_by_email(changes["email"])
        if existing is not None and existing.id != faculty_id:
            raise BadRequestError(f"Faculty with email '{changes['email']}' already exists", code=ErrorCode.DUPLICATE_KEY)
    if "department_id" in changes:
        _ensure_department_exists(changes["department_id"], db)
    if password:
        changes["password"] = security.hash_password(password)

    updated = db.update_faculty(faculty_id, changes)
    logger.info(f"Updated faculty {faculty_id} (fields: {sorted(changes)})")
    return serialize_faculty(updated)


def delete_faculty(faculty_id: str, db: DatabaseService) -> Dict:
    if not db.delete_faculty(faculty_id):
        raise NotFoundError("Faculty", faculty_id)
    logger.info(f"Deleted faculty {faculty_id}")
    return {"message": "Faculty deleted successfully"}
