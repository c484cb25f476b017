# /app/services/serializers.py

"""
Turns ORM objects into plain, JSON-ready dictionaries using the API's wire
names.

References are "populated" (expanded into the referenced record) when the
relationship is loaded and `populate` is true; otherwise the raw identifier
is emitted. Consumers of the API must accept both shapes.

`serialize_faculty` is the only place a Faculty row becomes a dict, and it
never copies the password hash.
"""

from typing import Any, Dict, Optional

from ..db.models.academic_models import Batch, Course, CourseAllocation, Department
from ..db.models.class_student_models import Class, Student
from ..db.models.faculty_model import Faculty


def _reference(related, raw_id: Optional[str], serializer, populate: bool):
    if populate and related is not None:
        return serializer(related)
    return raw_id


def serialize_department(department: Department) -> Dict[str, Any]:
    return {"id": department.id, "code": department.code, "name": department.name}


def serialize_batch(batch: Batch) -> Dict[str, Any]:
    return {
        "id": batch.id,
        "name": batch.name,
        "startYear": batch.start_year,
        "endYear": batch.end_year,
    }


def serialize_class(class_obj: Class, populate: bool = True) -> Dict[str, Any]:
    return {
        "id": class_obj.id,
        "name": class_obj.name,
        "departmentId": _reference(class_obj.department, class_obj.department_id, serialize_department, populate),
        "batchId": _reference(class_obj.batch, class_obj.batch_id, serialize_batch, populate),
    }


def serialize_course(course: Course, populate: bool = True) -> Dict[str, Any]:
    return {
        "id": course.id,
        "code": course.code,
        "title": course.title,
        "credits": course.credits,
        "category": course.category,
        "description": course.description or "",
        "semester": course.semester,
        "departmentId": _reference(course.department, course.department_id, serialize_department, populate),
    }


def serialize_student(student: Student) -> Dict[str, Any]:
    return {
        "id": student.id,
        "name": student.name,
        "rollNo": student.roll_no,
        "email": student.email,
        "guardianMobile": student.guardian_mobile,
        "classId": student.class_id,
    }


def serialize_faculty(faculty: Faculty, populate: bool = True) -> Dict[str, Any]:
    return {
        "id": faculty.id,
        "name": faculty.name,
        "email": faculty.email,
        "designation": faculty.designation,
        "phone": faculty.phone,
        "departmentId": _reference(faculty.department, faculty.department_id, serialize_department, populate),
    }


def serialize_allocation(allocation: CourseAllocation, populate: bool = True) -> Dict[str, Any]:
    return {
        "id": allocation.id,
        "courseId": _reference(allocation.course, allocation.course_id, serialize_course, populate),
        "facultyId": _reference(allocation.faculty, allocation.faculty_id, serialize_faculty, populate),
        "classId": _reference(allocation.class_, allocation.class_id, serialize_class, populate),
        "academicYear": allocation.academic_year,
    }
