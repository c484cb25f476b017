# /app/services/database_service.py

from typing import List, Dict, Optional, Tuple
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.class_student_repository_sql import ClassStudentRepositorySQL
from .database_helpers.catalog_repository_sql import CatalogRepositorySQL
from .database_helpers.faculty_repository_sql import FacultyRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        A single facade over every SQL repository. Services depend on this
        class only, never on a repository or a raw session.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.class_student_repo = ClassStudentRepositorySQL(db_session)
        self.catalog_repo = CatalogRepositorySQL(db_session)
        self.faculty_repo = FacultyRepositorySQL(db_session)

    # --- DEPARTMENT & BATCH METHODS (DELEGATED) ---
    def get_all_departments(self) -> List: return self.catalog_repo.get_all_departments()
    def get_department_by_id(self, department_id: str): return self.catalog_repo.get_department_by_id(department_id)
    def get_department_by_code(self, code: str): return self.catalog_repo.get_department_by_code(code)
    def add_department(self, record: Dict): return self.catalog_repo.add_department(record)
    def delete_department(self, department_id: str) -> bool: return self.catalog_repo.delete_department(department_id)
    def get_all_batches(self) -> List: return self.catalog_repo.get_all_batches()
    def get_batch_by_id(self, batch_id: str): return self.catalog_repo.get_batch_by_id(batch_id)
    def add_batch(self, record: Dict): return self.catalog_repo.add_batch(record)
    def delete_batch(self, batch_id: str) -> bool: return self.catalog_repo.delete_batch(batch_id)

    # --- COURSE METHODS (DELEGATED) ---
    def get_all_courses(self) -> List: return self.catalog_repo.get_all_courses()
    def get_course_by_id(self, course_id: str): return self.catalog_repo.get_course_by_id(course_id)
    def get_course_by_code(self, code: str): return self.catalog_repo.get_course_by_code(code)
    def add_course(self, record: Dict): return self.catalog_repo.add_course(record)
    def update_course(self, course_id: str, data: Dict): return self.catalog_repo.update_course(course_id, data)
    def delete_course(self, course_id: str) -> bool: return self.catalog_repo.delete_course(course_id)

    # --- COURSE ALLOCATION METHODS (DELEGATED) ---
    def get_allocations(self, faculty_id: Optional[str] = None, class_id: Optional[str] = None, course_id: Optional[str] = None) -> List:
        return self.catalog_repo.get_allocations(faculty_id=faculty_id, class_id=class_id, course_id=course_id)
    def add_allocation(self, record: Dict): return self.catalog_repo.add_allocation(record)
    def delete_allocation(self, allocation_id: str) -> bool: return self.catalog_repo.delete_allocation(allocation_id)

    # --- CLASS & STUDENT METHODS (DELEGATED) ---
    def get_all_classes(self) -> List: return self.class_student_repo.get_all_classes()
    def get_class_by_id(self, class_id: str): return self.class_student_repo.get_class_by_id(class_id)
    def add_class(self, record: Dict): return self.class_student_repo.add_class(record)
    def delete_class(self, class_id: str) -> bool: return self.class_student_repo.delete_class(class_id)
    def get_students_by_class_id(self, class_id: str) -> List: return self.class_student_repo.get_students_by_class_id(class_id)
    def get_student_by_id(self, student_id: str): return self.class_student_repo.get_student_by_id(student_id)
    def count_students(self) -> int: return self.class_student_repo.count_students()
    def get_student_by_roll_no(self, roll_no: str): return self.class_student_repo.get_student_by_roll_no(roll_no)
    def add_student(self, record: Dict): return self.class_student_repo.add_student(record)
    def update_student(self, student_id: str, data: Dict): return self.class_student_repo.update_student(student_id, data)
    def delete_student(self, student_id: str) -> bool: return self.class_student_repo.delete_student(student_id)

    # --- FACULTY METHODS (DELEGATED) ---
    def list_faculty(self, skip: int, limit: int, search: Optional[str] = None, department_id: Optional[str] = None) -> Tuple[List, int]:
        return self.faculty_repo.list_faculty(skip=skip, limit=limit, search=search, department_id=department_id)
    def get_faculty_by_id(self, faculty_id: str): return self.faculty_repo.get_faculty_by_id(faculty_id)
    def get_faculty_by_email(self, email: str): return self.faculty_repo.get_faculty_by_email(email)
    def add_faculty(self, record: Dict): return self.faculty_repo.add_faculty(record)
    def update_faculty(self, faculty_id: str, data: Dict): return self.faculty_repo.update_faculty(faculty_id, data)
    def delete_faculty(self, faculty_id: str) -> bool: return self.faculty_repo.delete_faculty(faculty_id)


# Dependency provider used by every router.
def get_db_service(db_session: Session = Depends(get_db)) -> DatabaseService:
    return DatabaseService(db_session=db_session)
